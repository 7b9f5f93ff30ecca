# =============================================================================
# travel_recommender/catalog.py  -  Sample Recommendation Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds a small, fixed set of recommendations: three flights, three
#   hotels, four activities and two packages (Paris and London).  The demo
#   and the MCP tool server both read from it.
#
# REAL-WORLD NOTE:
#   In production the recommendations would come from a search backend with
#   its own confidence model.  Here the scores are hardcoded, and the only
#   moving part is the date the flight schedule is anchored on.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Sequence

from travel_recommender.models import (
    ActivityRecommendation,
    FlightRecommendation,
    HotelRecommendation,
    PackageRecommendation,
    Recommendation,
)
from travel_recommender.service import combine_recommendations


def _at(day: date, hour: int, minute: int) -> datetime:
    return datetime.combine(day, time(hour, minute))


def sample_flights(today: date | None = None) -> list[FlightRecommendation]:
    """Three flights departing 10, 15 and 20 days after ``today``.

    Args:
        today: Anchor date for the schedule.  Defaults to the current date;
            pass a fixed date for reproducible output.
    """
    today = today or date.today()
    return [
        FlightRecommendation(
            "FL001",
            "Budget flight to Paris",
            "Low-cost direct flight to Paris with basic amenities",
            0.85,
            departure_airport="JFK",
            arrival_airport="CDG",
            departure_time=_at(today + timedelta(days=10), 9, 0),
            arrival_time=_at(today + timedelta(days=10), 22, 30),
            airline="Air France",
            is_direct=True,
            amenities=("Wi-Fi", "Meal included"),
            price=450.99,
        ),
        FlightRecommendation(
            "FL002",
            "Business class to London",
            "Premium business class experience with dedicated service",
            0.92,
            departure_airport="LAX",
            arrival_airport="LHR",
            departure_time=_at(today + timedelta(days=15), 18, 30),
            arrival_time=_at(today + timedelta(days=16), 13, 15),
            airline="British Airways",
            is_direct=True,
            amenities=("Lie-flat seats", "Lounge access", "Premium meals", "Priority boarding"),
            price=1250.50,
        ),
        # Connecting via Seoul: cheaper, lower confidence.
        FlightRecommendation(
            "FL003",
            "Economy flight to Tokyo",
            "Connecting economy flight to Tokyo with one stop in Seoul",
            0.68,
            departure_airport="SFO",
            arrival_airport="NRT",
            departure_time=_at(today + timedelta(days=20), 11, 15),
            arrival_time=_at(today + timedelta(days=21), 8, 45),
            airline="Korean Air",
            is_direct=False,
            amenities=("In-flight entertainment", "USB charging"),
            price=875.25,
        ),
    ]


def sample_hotels() -> list[HotelRecommendation]:
    return [
        HotelRecommendation(
            "HT001",
            "Luxury stay in central Paris",
            "5-star hotel experience in the heart of Paris with Eiffel Tower views",
            0.78,
            hotel_name="Parisian Luxury Hotel",
            star_rating=5,
            location="Paris, France",
            amenities=("Spa", "Pool", "Fine dining", "Concierge", "Room service"),
            price_per_night=320.00,
            distance_to_center=0.5,
            has_free_cancellation=True,
        ),
        HotelRecommendation(
            "HT002",
            "Family-friendly resort in London",
            "Kid-friendly 4-star hotel with family amenities and spacious rooms",
            0.82,
            hotel_name="London Family Resort",
            star_rating=4,
            location="London, UK",
            amenities=("Kids club", "Pool", "Game room", "Family dining", "Babysitting"),
            price_per_night=240.50,
            distance_to_center=2.0,
            has_free_cancellation=True,
        ),
        HotelRecommendation(
            "HT003",
            "Budget stay in Tokyo",
            "Clean, comfortable 3-star hotel in Tokyo with great public transport links",
            0.65,
            hotel_name="Tokyo Budget Inn",
            star_rating=3,
            location="Tokyo, Japan",
            amenities=("Free Wi-Fi", "Breakfast included", "Laundry service"),
            price_per_night=150.75,
            distance_to_center=3.5,
            has_free_cancellation=False,
        ),
    ]


def sample_activities() -> list[ActivityRecommendation]:
    return [
        ActivityRecommendation(
            "AC001",
            "Skip-the-line Louvre Museum tour",
            "Guided tour of the world-famous Louvre Museum with priority access",
            0.91,
            activity_name="Louvre Museum Guided Tour",
            location="Paris, France",
            duration=timedelta(hours=3),
            categories=("Cultural", "Museum", "Art"),
            is_indoor=True,
            price=65.50,
            minimum_age=8,
        ),
        ActivityRecommendation(
            "AC002",
            "London Eye experience",
            "Spectacular views of London from the iconic London Eye",
            0.85,
            activity_name="London Eye Ticket",
            location="London, UK",
            duration=timedelta(minutes=30),
            categories=("Sightseeing", "Family-friendly"),
            is_indoor=False,
            price=32.00,
            minimum_age=5,
        ),
        ActivityRecommendation(
            "AC003",
            "Tokyo street food tour",
            "Culinary adventure through Tokyo's vibrant street food scene",
            0.79,
            activity_name="Tokyo Street Food Experience",
            location="Tokyo, Japan",
            duration=timedelta(hours=4),
            categories=("Food", "Cultural", "Walking tour"),
            is_indoor=False,
            price=95.00,
            minimum_age=12,
        ),
        ActivityRecommendation(
            "AC004",
            "Seine River dinner cruise",
            "Romantic dinner cruise along the Seine with views of illuminated Paris landmarks",
            0.72,
            activity_name="Seine Dinner Cruise",
            location="Paris, France",
            duration=timedelta(hours=2, minutes=30),
            categories=("Romantic", "Dining", "Sightseeing"),
            is_indoor=True,
            price=120.00,
            minimum_age=18,
        ),
    ]


def sample_packages(
    flights: Sequence[FlightRecommendation],
    hotels: Sequence[HotelRecommendation],
    activities: Sequence[ActivityRecommendation],
) -> list[PackageRecommendation]:
    """Bundle the sample components into a Paris and a London package.

    Expects the lists produced by the other ``sample_*`` functions: the
    packages pick components by position.
    """
    return [
        PackageRecommendation(
            "PK001",
            "Romantic Paris Getaway",
            "All-inclusive romantic weekend in Paris with luxury accommodations",
            0.88,
            flight=flights[0],
            hotel=hotels[0],
            activities=(activities[0], activities[3]),   # Louvre + Seine cruise
            package_discount=0.15,
            total_price=950.00,
        ),
        PackageRecommendation(
            "PK002",
            "Family London Adventure",
            "Fun-filled family trip to London with kid-friendly activities",
            0.75,
            flight=flights[1],
            hotel=hotels[1],
            activities=(activities[1],),
            package_discount=0.10,
            total_price=1450.00,
        ),
    ]


@dataclass(frozen=True)
class Catalog:
    """The full sample catalog, grouped by kind."""

    flights: tuple[FlightRecommendation, ...]
    hotels: tuple[HotelRecommendation, ...]
    activities: tuple[ActivityRecommendation, ...]
    packages: tuple[PackageRecommendation, ...]

    def all(self) -> list[Recommendation]:
        """Every recommendation: flights, hotels, activities, then packages."""
        return combine_recommendations(self.flights, self.hotels, self.activities, self.packages)

    def find(self, recommendation_id: str) -> Recommendation | None:
        for rec in self.all():
            if rec.id == recommendation_id:
                return rec
        return None


def build_catalog(today: date | None = None) -> Catalog:
    """Build the complete sample catalog anchored on ``today``."""
    flights = sample_flights(today)
    hotels = sample_hotels()
    activities = sample_activities()
    packages = sample_packages(flights, hotels, activities)
    return Catalog(
        flights=tuple(flights),
        hotels=tuple(hotels),
        activities=tuple(activities),
        packages=tuple(packages),
    )
