# =============================================================================
# travel_recommender/box.py  -  RecommendationBox, a one-slot typed container
# =============================================================================
#
# A box holds exactly one recommendation and never None.  It lets callers
# work on a single item point-wise (map it, test it, narrow it) without
# caring which of the four kinds is inside.
#
# NARROWING (cast_to):
#   Narrowing compares the `kind` tag carried by every variant, not class
#   identity.  A mismatch is not an error: you simply get None back.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, overload

from travel_recommender.models import (
    InvalidArgumentError,
    Recommendation,
    RecommendationKind,
)

T = TypeVar("T", bound=Recommendation)
U = TypeVar("U", bound=Recommendation)
R = TypeVar("R")


@dataclass(frozen=True)
class RecommendationBox(Generic[T]):
    """A container holding exactly one recommendation."""

    recommendation: T

    def __post_init__(self):
        if self.recommendation is None:
            raise InvalidArgumentError("Recommendation cannot be None")

    @classmethod
    def of(cls, recommendation: T) -> RecommendationBox[T]:
        return cls(recommendation)

    def get(self) -> T:
        return self.recommendation

    def get_id(self) -> str:
        return self.recommendation.id

    def has_high_confidence(self, threshold: float) -> bool:
        return self.recommendation.confidence_score >= threshold

    def map(self, mapper: Callable[[T], R]) -> R:
        """Apply ``mapper`` to the boxed value and return its result."""
        return mapper(self.recommendation)

    def if_present(self, consumer: Callable[[T], object]) -> None:
        # Always present - a box is never empty.
        consumer(self.recommendation)

    def filter(self, threshold: float) -> T | None:
        """The boxed value if its confidence reaches ``threshold``, else None."""
        if self.has_high_confidence(threshold):
            return self.recommendation
        return None

    @overload
    def cast_to(self, target: type[U]) -> RecommendationBox[U] | None: ...

    @overload
    def cast_to(self, target: RecommendationKind) -> RecommendationBox[Recommendation] | None: ...

    def cast_to(self, target):
        """Narrow the box to a specific kind.

        Args:
            target: A variant class (e.g. ``HotelRecommendation``) or a
                ``RecommendationKind``.  The abstract ``Recommendation`` class
                matches every kind.

        Returns:
            A new box around the same value if its kind matches, else None.
        """
        if target is Recommendation:
            return RecommendationBox(self.recommendation)
        if isinstance(target, RecommendationKind):
            wanted = target
        else:
            wanted = getattr(target, "kind", None)
        if wanted is not self.recommendation.kind:
            return None
        return RecommendationBox(self.recommendation)
