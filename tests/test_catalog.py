"""The sample catalog used by the demo and the tool server."""

from datetime import date

import pytest

from travel_recommender.catalog import build_catalog, sample_activities, sample_flights
from travel_recommender.service import categorize_recommendations, filter_by_confidence

TODAY = date(2026, 1, 1)


@pytest.fixture
def catalog():
    return build_catalog(TODAY)


def test_catalog_counts(catalog):
    assert len(catalog.flights) == 3
    assert len(catalog.hotels) == 3
    assert len(catalog.activities) == 4
    assert len(catalog.packages) == 2
    assert len(catalog.all()) == 12


def test_all_keeps_kind_order(catalog):
    ids = [rec.id for rec in catalog.all()]
    assert ids[:3] == ["FL001", "FL002", "FL003"]
    assert ids[-2:] == ["PK001", "PK002"]


def test_catalog_is_deterministic_for_a_fixed_date():
    assert build_catalog(TODAY) == build_catalog(TODAY)


def test_flights_are_anchored_on_today():
    paris, london, tokyo = sample_flights(TODAY)

    assert paris.departure_time.date() == date(2026, 1, 11)
    assert paris.formatted_duration == "13 hours, 30 minutes"
    assert london.formatted_duration == "18 hours, 45 minutes"
    assert not tokyo.is_direct


def test_sample_activity_types_and_durations():
    louvre, eye, food, cruise = sample_activities()

    assert louvre.activity_type == "Cultural Experience"
    assert eye.activity_type == "Outdoor Activity"
    assert food.activity_type == "Cultural Experience"
    assert cruise.activity_type == "Culinary Experience"
    assert eye.formatted_duration == "30 minutes"
    assert cruise.formatted_duration == "2 hours 30 minutes"


def test_paris_package_reuses_catalog_components(catalog):
    paris = catalog.find("PK001")

    assert paris.flight is catalog.flights[0]
    assert paris.hotel is catalog.hotels[0]
    assert [a.id for a in paris.activities] == ["AC001", "AC004"]
    assert paris.duration_in_days == 3
    assert paris.savings_amount == pytest.approx(
        (450.99 + 320.00 * 3 + 65.50 + 120.00) - 950.00, abs=1e-9
    )


def test_find_unknown_id(catalog):
    assert catalog.find("XX999") is None


def test_high_confidence_and_categories(catalog):
    high = filter_by_confidence(catalog.all(), 0.7)
    assert [rec.id for rec in high] == [
        "FL001", "FL002", "HT001", "HT002",
        "AC001", "AC002", "AC003", "AC004",
        "PK001", "PK002",
    ]

    counts = {name: len(recs) for name, recs in categorize_recommendations(catalog.all()).items()}
    assert counts == {"Flights": 3, "Hotels": 3, "Activities": 4, "Packages": 2}
