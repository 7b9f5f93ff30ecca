# =============================================================================
# travel_recommender/service.py  -  Query & Aggregation Logic
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Stateless operations over collections of recommendations:
#     - filter_by_predicate / filter_by_confidence
#     - combine_recommendations   (many sources -> one list)
#     - add_recommendation        (safe insertion into a broader list)
#     - describe_recommendation   (exhaustive per-kind formatting)
#     - categorize_recommendations (group by kind)
#
# PRODUCERS AND CONSUMERS:
#   A list we only READ from is a producer: a list of flights can be passed
#   wherever an iterable of recommendations is expected (Iterable is
#   covariant).  Something we only WRITE into is a consumer: a list of
#   Recommendation happily accepts a flight.  The type variables below encode
#   exactly that, so a type checker rejects e.g. appending a hotel to a list
#   of flights.
#
# None of these functions mutate their input (add_recommendation mutates the
# target, which is its whole job) and none of them can fail.
# =============================================================================

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol, TypeVar, assert_never

from travel_recommender.models import (
    ActivityRecommendation,
    AnyRecommendation,
    FlightRecommendation,
    HotelRecommendation,
    PackageRecommendation,
    Recommendation,
    RecommendationKind,
)

T = TypeVar("T", bound=Recommendation)
T_contra = TypeVar("T_contra", contravariant=True)


class SupportsAppend(Protocol[T_contra]):
    """Anything that can take an item at its end (a consumer of T)."""

    def append(self, item: T_contra, /) -> None: ...


def filter_by_predicate(
    recommendations: Iterable[T],
    predicate: Callable[[T], bool],
) -> list[T]:
    """Keep the recommendations the predicate accepts, in input order.

    The predicate may be written against a broader type than T - a
    ``Callable[[Recommendation], bool]`` works on a list of flights.
    """
    return [rec for rec in recommendations if predicate(rec)]


def filter_by_confidence(
    recommendations: Iterable[T],
    minimum_confidence: float,
) -> list[T]:
    """Keep the recommendations scored at or above ``minimum_confidence``."""
    return filter_by_predicate(
        recommendations,
        lambda rec: rec.confidence_score >= minimum_confidence,
    )


def combine_recommendations(*sources: Iterable[T]) -> list[T]:
    """Concatenate several sources into one new list.

    Sources are taken in argument order and each keeps its internal order.
    Duplicates are kept.  No sources at all gives an empty list.
    """
    combined: list[T] = []
    for source in sources:
        combined.extend(source)
    return combined


def add_recommendation(target: SupportsAppend[T], recommendation: T) -> None:
    """Append ``recommendation`` to a target whose element type is T or broader."""
    target.append(recommendation)


# -----------------------------------------------------------------------------
# describe_recommendation - one total match over the closed union
# -----------------------------------------------------------------------------
# The final `case _` hands the value to assert_never.  A type checker flags
# it if a variant is ever left unhandled; at runtime it raises
# AssertionError rather than returning some "unknown" description.
# -----------------------------------------------------------------------------
def describe_recommendation(recommendation: AnyRecommendation) -> str:
    """Render a one-line, human-readable description of a recommendation."""
    match recommendation:
        case FlightRecommendation():
            return (
                f"Flight from {recommendation.departure_airport} to "
                f"{recommendation.arrival_airport} on {recommendation.airline}, "
                f"{'Direct' if recommendation.is_direct else 'Connecting'}, "
                f"Price: ${recommendation.price:.2f}"
            )
        case HotelRecommendation():
            return (
                f"{recommendation.star_rating}-star hotel "
                f"'{recommendation.hotel_name}' in {recommendation.location}, "
                f"Price: ${recommendation.price_per_night:.2f} per night"
            )
        case ActivityRecommendation():
            return (
                f"Activity: {recommendation.activity_name} in "
                f"{recommendation.location}, "
                f"Duration: {recommendation.formatted_duration}, "
                f"Price: ${recommendation.price:.2f}"
            )
        case PackageRecommendation():
            return (
                f"Package: {recommendation.title} - Including flight, "
                f"{recommendation.hotel.star_rating}-star hotel, and "
                f"{len(recommendation.activities)} activities, "
                f"Total price: ${recommendation.total_price:.2f} "
                f"(Save: ${recommendation.savings_amount:.2f})"
            )
        case _:
            assert_never(recommendation)


# -----------------------------------------------------------------------------
# categorize_recommendations
# -----------------------------------------------------------------------------
# Bucketing goes by the `kind` tag, never by isinstance: a package embeds a
# flight but is not itself one.
# -----------------------------------------------------------------------------
CATEGORY_NAMES: dict[RecommendationKind, str] = {
    RecommendationKind.FLIGHT: "Flights",
    RecommendationKind.HOTEL: "Hotels",
    RecommendationKind.ACTIVITY: "Activities",
    RecommendationKind.PACKAGE: "Packages",
}

if set(CATEGORY_NAMES) != set(RecommendationKind):
    raise TypeError("CATEGORY_NAMES must name a category for every RecommendationKind")


def categorize_recommendations(
    recommendations: Iterable[Recommendation],
) -> dict[str, list[Recommendation]]:
    """Group recommendations into the four fixed categories.

    Returns:
        A dict with exactly the keys "Flights", "Hotels", "Activities" and
        "Packages" (in that order).  Every key is present even when its list
        is empty; each list keeps input order.
    """
    categorized: dict[str, list[Recommendation]] = {
        name: [] for name in CATEGORY_NAMES.values()
    }
    for rec in recommendations:
        categorized[CATEGORY_NAMES[rec.kind]].append(rec)
    return categorized


def is_recommendation_list(obj: Any) -> bool:
    """Best-effort runtime check that ``obj`` is a list of recommendations.

    A list's element type is not part of its runtime type, so the only thing
    to inspect is an element.  Like the check it models, this looks at the
    first one: an empty list, or anything that is not a list, is False.
    """
    if isinstance(obj, list) and obj:
        return isinstance(obj[0], Recommendation)
    return False
