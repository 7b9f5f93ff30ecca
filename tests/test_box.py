"""RecommendationBox: access, mapping, confidence filtering and narrowing."""

import pytest
from hypothesis import given, strategies as st

from travel_recommender.box import RecommendationBox
from travel_recommender.models import (
    ActivityRecommendation,
    FlightRecommendation,
    HotelRecommendation,
    InvalidArgumentError,
    PackageRecommendation,
    Recommendation,
    RecommendationKind,
)

VARIANTS = [
    ("flight", FlightRecommendation),
    ("hotel", HotelRecommendation),
    ("activity", ActivityRecommendation),
    ("package", PackageRecommendation),
]


def test_box_gives_back_its_value(flight):
    box = RecommendationBox(flight)

    assert box.get() is flight
    assert box.get_id() == "F1"
    assert box.has_high_confidence(0.7)
    assert not box.has_high_confidence(0.9)


def test_of_is_the_same_as_the_constructor(hotel):
    assert RecommendationBox.of(hotel) == RecommendationBox(hotel)
    assert RecommendationBox.of(hotel).get() is hotel


def test_box_rejects_none():
    with pytest.raises(InvalidArgumentError):
        RecommendationBox(None)
    with pytest.raises(InvalidArgumentError):
        RecommendationBox.of(None)


def test_map(hotel):
    box = RecommendationBox.of(hotel)

    assert box.map(lambda h: h.hotel_name) == "Test Hotel"
    assert box.map(lambda h: h.price_per_night) == 150.0


def test_if_present_calls_the_consumer_once(activity):
    seen = []

    result = RecommendationBox(activity).if_present(seen.append)

    assert result is None
    assert seen == [activity]


def test_filter(activity):
    box = RecommendationBox(activity)

    assert box.filter(0.7) is None
    assert box.filter(0.5) is activity
    assert box.filter(0.6) is activity


@given(threshold=st.floats(min_value=0.0, max_value=1.0, allow_nan=False))
def test_filter_present_iff_confidence_reaches_threshold(threshold):
    hotel = HotelRecommendation(
        "H", "Hotel", "Hotel", 0.5, "Hotel", 3, "Town", (), 10.0, 1.0, False,
    )
    filtered = RecommendationBox(hotel).filter(threshold)

    assert (filtered is not None) == (hotel.confidence_score >= threshold)


@pytest.mark.parametrize("fixture_name, cls", VARIANTS)
def test_cast_to_same_kind_is_present(request, fixture_name, cls):
    rec = request.getfixturevalue(fixture_name)
    box: RecommendationBox[Recommendation] = RecommendationBox(rec)

    narrowed = box.cast_to(cls)

    assert narrowed is not None
    assert narrowed.get() is rec
    assert narrowed == box


@pytest.mark.parametrize("fixture_name, cls", VARIANTS)
def test_cast_to_other_kinds_is_empty(request, fixture_name, cls):
    rec = request.getfixturevalue(fixture_name)
    box = RecommendationBox(rec)

    for _, other in VARIANTS:
        if other is not cls:
            assert box.cast_to(other) is None


def test_package_does_not_cast_to_flight(package):
    # A package embeds a flight but is not one.
    assert RecommendationBox(package).cast_to(FlightRecommendation) is None


def test_cast_to_by_kind_tag(flight):
    box = RecommendationBox(flight)

    assert box.cast_to(RecommendationKind.FLIGHT).get() is flight
    assert box.cast_to(RecommendationKind.HOTEL) is None


def test_cast_to_base_always_succeeds(activity):
    assert RecommendationBox(activity).cast_to(Recommendation).get() is activity


def test_cast_to_unrelated_type_is_empty(flight):
    assert RecommendationBox(flight).cast_to(str) is None
