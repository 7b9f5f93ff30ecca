# =============================================================================
# travel_recommender/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define every kind of recommendation the system knows
# about.  There are exactly FOUR of them:
#
#     FlightRecommendation    HotelRecommendation
#     ActivityRecommendation  PackageRecommendation
#
# and the set is CLOSED.  Query code (describe, categorize, cast) is written
# as a total function over these four kinds.  A fifth kind cannot sneak in:
# `Recommendation.__init_subclass__` refuses any subclass whose `kind` tag is
# not a fresh RecommendationKind member, and every dispatch site checks that
# it covers all RecommendationKind members.
#
# IMMUTABILITY:
#   Every model is a frozen dataclass.  List-like fields (amenities,
#   categories, activities) are stored as tuples, so nothing reachable from
#   an instance can change after construction.
#
# VALIDATION:
#   Invariants are checked in __post_init__, which runs before the caller
#   ever sees the object.  A bad value raises InvalidArgumentError and no
#   instance exists - construction is all-or-nothing.  We never clamp.
# =============================================================================

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import ClassVar, Union


class InvalidArgumentError(ValueError):
    """Raised when a recommendation (or box) is built from invalid values."""


class RecommendationKind(enum.Enum):
    """The explicit discriminant carried by every recommendation variant."""

    FLIGHT = "flight"
    HOTEL = "hotel"
    ACTIVITY = "activity"
    PACKAGE = "package"


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(f"{name} must be between 0.0 and 1.0, got {value!r}")


def _check_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise InvalidArgumentError(f"{name} cannot be negative, got {value!r}")


def _hours_and_minutes(elapsed: timedelta) -> tuple[int, int]:
    """Split an elapsed time into whole hours and the leftover minutes.

    Both parts truncate toward zero, so a negative span yields negative parts
    instead of Python's floor-division wrap-around.
    """
    total_minutes = math.trunc(elapsed.total_seconds() / 60)
    hours = math.trunc(total_minutes / 60)
    return hours, total_minutes - hours * 60


# -----------------------------------------------------------------------------
# Recommendation - the common capability set
# -----------------------------------------------------------------------------
# Identity, title, description and confidence.  Confidence is supplied from
# outside (we never compute it) and must sit in [0.0, 1.0].
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Recommendation:
    """Abstract base for the four recommendation kinds."""

    id: str
    title: str
    description: str
    confidence_score: float

    kind: ClassVar[RecommendationKind]

    # kind -> variant class, filled in as the variants below are defined
    _variants: ClassVar[dict[RecommendationKind, type[Recommendation]]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if not isinstance(kind, RecommendationKind):
            raise TypeError(
                f"{cls.__name__} must declare a RecommendationKind 'kind'; "
                f"the recommendation hierarchy is closed"
            )
        if kind in Recommendation._variants:
            raise TypeError(
                f"{cls.__name__} cannot claim {kind.name}: already taken by "
                f"{Recommendation._variants[kind].__name__}"
            )
        Recommendation._variants[kind] = cls

    def __post_init__(self):
        if type(self) is Recommendation:
            raise TypeError("Recommendation is abstract; build one of its variants")
        _check_unit_interval("confidence_score", self.confidence_score)

    @classmethod
    def variant_for(cls, kind: RecommendationKind) -> type[Recommendation]:
        """Return the concrete class registered for ``kind``."""
        return Recommendation._variants[kind]


# -----------------------------------------------------------------------------
# FlightRecommendation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FlightRecommendation(Recommendation):
    """One bookable flight."""

    kind: ClassVar[RecommendationKind] = RecommendationKind.FLIGHT

    departure_airport: str             # "JFK"
    arrival_airport: str               # "CDG"
    departure_time: datetime
    arrival_time: datetime
    airline: str
    is_direct: bool
    amenities: tuple[str, ...]
    price: float                       # USD

    def __post_init__(self):
        super().__post_init__()
        _check_non_negative("price", self.price)
        object.__setattr__(self, "amenities", tuple(self.amenities))

    @property
    def formatted_duration(self) -> str:
        """Gate-to-gate time, e.g. ``"13 hours, 30 minutes"``."""
        hours, minutes = _hours_and_minutes(self.arrival_time - self.departure_time)
        return f"{hours} hours, {minutes} minutes"


# -----------------------------------------------------------------------------
# HotelRecommendation
# -----------------------------------------------------------------------------
# Star rating drives the tier a traveler sees:
#   1-2 Budget | 3 Standard | 4 Premium | 5 Luxury
# -----------------------------------------------------------------------------
_HOTEL_TIERS = {
    1: "Budget",
    2: "Budget",
    3: "Standard",
    4: "Premium",
    5: "Luxury",
}


@dataclass(frozen=True)
class HotelRecommendation(Recommendation):
    """One bookable hotel."""

    kind: ClassVar[RecommendationKind] = RecommendationKind.HOTEL

    hotel_name: str
    star_rating: int
    location: str
    amenities: tuple[str, ...]
    price_per_night: float             # USD
    distance_to_center: float          # km
    has_free_cancellation: bool

    def __post_init__(self):
        super().__post_init__()
        if self.star_rating not in _HOTEL_TIERS:
            raise InvalidArgumentError(
                f"star_rating must be between 1 and 5, got {self.star_rating!r}"
            )
        _check_non_negative("price_per_night", self.price_per_night)
        object.__setattr__(self, "amenities", tuple(self.amenities))

    @property
    def hotel_type(self) -> str:
        return _HOTEL_TIERS[self.star_rating]


# -----------------------------------------------------------------------------
# ActivityRecommendation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ActivityRecommendation(Recommendation):
    """A thing to do at the destination."""

    kind: ClassVar[RecommendationKind] = RecommendationKind.ACTIVITY

    activity_name: str
    location: str
    duration: timedelta
    categories: tuple[str, ...]        # ("Cultural", "Museum", ...)
    is_indoor: bool
    price: float
    minimum_age: int

    def __post_init__(self):
        super().__post_init__()
        _check_non_negative("price", self.price)
        _check_non_negative("minimum_age", self.minimum_age)
        object.__setattr__(self, "categories", tuple(self.categories))

    @property
    def activity_type(self) -> str:
        """Classify the activity by its categories.

        The checks run in priority order, so a museum tour that is also
        tagged "Food" is still a Cultural Experience.
        """
        categories = self.categories
        if "Adventure" in categories and not self.is_indoor:
            return "Outdoor Adventure"
        if "Cultural" in categories or "Museum" in categories:
            return "Cultural Experience"
        if "Food" in categories or "Dining" in categories:
            return "Culinary Experience"
        return "Indoor Activity" if self.is_indoor else "Outdoor Activity"

    @property
    def formatted_duration(self) -> str:
        """``"3 hours"``, ``"2 hours 30 minutes"`` or ``"30 minutes"``."""
        hours, minutes = _hours_and_minutes(self.duration)
        if hours > 0:
            suffix = f" {minutes} minutes" if minutes > 0 else ""
            return f"{hours} hours{suffix}"
        return f"{minutes} minutes"


# -----------------------------------------------------------------------------
# PackageRecommendation - the only composite
# -----------------------------------------------------------------------------
# A package bundles one flight, one hotel and some activities.  The same
# flight/hotel objects may also appear on their own elsewhere; the package
# only reads them to work out the bundle price.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PackageRecommendation(Recommendation):
    """A flight + hotel + activities bundle sold at one price."""

    kind: ClassVar[RecommendationKind] = RecommendationKind.PACKAGE

    flight: FlightRecommendation
    hotel: HotelRecommendation
    activities: tuple[ActivityRecommendation, ...]
    package_discount: float            # 0.15 == 15% off
    total_price: float

    def __post_init__(self):
        super().__post_init__()
        _check_unit_interval("package_discount", self.package_discount)
        _check_non_negative("total_price", self.total_price)
        object.__setattr__(self, "activities", tuple(self.activities))

    @property
    def duration_in_days(self) -> int:
        # Estimated from the activity count, never shorter than 3 nights.
        return max(3, len(self.activities) // 2)

    @property
    def savings_amount(self) -> float:
        """What the traveler saves versus booking every component alone."""
        individual_prices = (
            self.flight.price
            + self.hotel.price_per_night * self.duration_in_days
            + sum(activity.price for activity in self.activities)
        )
        return individual_prices - self.total_price


# The closed union.  Exhaustive `match` statements are written against this
# alias so a type checker can prove every variant is handled.
AnyRecommendation = Union[
    FlightRecommendation,
    HotelRecommendation,
    ActivityRecommendation,
    PackageRecommendation,
]

if set(Recommendation._variants) != set(RecommendationKind):
    raise TypeError("every RecommendationKind needs exactly one variant class")
