"""Shared fixtures: one recommendation of each kind, plus a mixed list."""

from datetime import datetime, timedelta

import pytest

from travel_recommender.models import (
    ActivityRecommendation,
    FlightRecommendation,
    HotelRecommendation,
    PackageRecommendation,
)

DEPARTURE = datetime(2026, 3, 1, 9, 0)


@pytest.fixture
def flight():
    return FlightRecommendation(
        "F1", "Test Flight", "A test flight", 0.8,
        "SRC", "DST", DEPARTURE, DEPARTURE + timedelta(hours=5),
        "Test Airline", True, ["Wi-Fi"], 200.0,
    )


@pytest.fixture
def hotel():
    return HotelRecommendation(
        "H1", "Test Hotel", "A test hotel", 0.7,
        "Test Hotel", 4, "Test Location", ["Pool"], 150.0, 1.0, True,
    )


@pytest.fixture
def activity():
    return ActivityRecommendation(
        "A1", "Test Activity", "A test activity", 0.6,
        "Test Activity", "Test Location", timedelta(hours=2),
        ["Test"], False, 50.0, 10,
    )


@pytest.fixture
def package(flight, hotel, activity):
    return PackageRecommendation(
        "P1", "Test Package", "A test package", 0.9,
        flight, hotel, [activity], 0.1, 380.0,
    )


@pytest.fixture
def all_recommendations(flight, hotel, activity, package):
    return [flight, hotel, activity, package]
