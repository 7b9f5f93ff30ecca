# =============================================================================
# main.py  -  Entry Point for the Travel Recommendation Demo
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Builds the sample catalog (flights, hotels, activities, packages)
#   2. Combines everything into one list and filters by confidence
#   3. Boxes one item of each kind and narrows / maps the boxes
#   4. Describes the top high-confidence items
#   5. Shows producer/consumer typing with add_recommendation
#   6. Groups the catalog by category
#   7. Shows what a runtime list check can and cannot tell you
#
# CONFIGURATION:
#   TRAVEL_MIN_CONFIDENCE and TRAVEL_LOG_LEVEL, from the environment or a
#   .env file next to this script (see travel_recommender/config.py).
#   The report goes to stdout; log lines go to stderr.
# =============================================================================

import logging
import sys
from datetime import date

from dotenv import load_dotenv

from travel_recommender.box import RecommendationBox
from travel_recommender.catalog import build_catalog
from travel_recommender.config import Settings
from travel_recommender.models import (
    ActivityRecommendation,
    FlightRecommendation,
    HotelRecommendation,
    PackageRecommendation,
    Recommendation,
)
from travel_recommender.service import (
    add_recommendation,
    categorize_recommendations,
    combine_recommendations,
    describe_recommendation,
    filter_by_confidence,
    is_recommendation_list,
)

logger = logging.getLogger(__name__)


def run_demo(today: date | None = None, min_confidence: float | None = None) -> None:
    """Walk through the recommendation model, printing each step.

    Args:
        today: Anchor date for the sample flight schedule (default: today).
        min_confidence: Threshold for the high-confidence filter.  Defaults
            to the TRAVEL_MIN_CONFIDENCE setting.
    """
    if min_confidence is None:
        min_confidence = Settings.from_env().min_confidence

    print("Travel Recommendation System - Demo")
    print("=" * 70)

    catalog = build_catalog(today)
    logger.info("Built sample catalog anchored on %s", today or date.today())

    print(f"\n🛫 Flight Recommendations: {len(catalog.flights)}")
    print(f"\n🏨 Hotel Recommendations: {len(catalog.hotels)}")
    print(f"\n🏄 Activity Recommendations: {len(catalog.activities)}")
    print(f"\n📦 Package Recommendations: {len(catalog.packages)}")

    all_recommendations: list[Recommendation] = combine_recommendations(
        catalog.flights, catalog.hotels, catalog.activities, catalog.packages
    )
    print(f"\n📋 Total Recommendations: {len(all_recommendations)}")

    high_confidence = filter_by_confidence(all_recommendations, min_confidence)
    print(f"\n⭐ High Confidence Recommendations (>= {min_confidence}): {len(high_confidence)}")

    print("\n📦 Recommendation Box Demo:")
    _demonstrate_box(
        catalog.flights[0], catalog.hotels[0], catalog.activities[0], catalog.packages[0]
    )

    print("\n🔍 Pattern Matching Demo:")
    for rec in high_confidence[:4]:
        print(f" - {describe_recommendation(rec)}")

    print("\n🧩 Producer / Consumer Demo:")
    _demonstrate_producer_consumer(catalog.flights, catalog.hotels, catalog.activities)

    print("\n📊 Categorized Recommendations:")
    for category, recs in categorize_recommendations(all_recommendations).items():
        print(f" - {category}: {len(recs)}")

    print("\n⚠️ Runtime Generics:")
    _demonstrate_runtime_generics(list(catalog.flights), list(catalog.hotels), all_recommendations)


def _demonstrate_box(
    flight: FlightRecommendation,
    hotel: HotelRecommendation,
    activity: ActivityRecommendation,
    package: PackageRecommendation,
) -> None:
    flight_box = RecommendationBox(flight)
    hotel_box = RecommendationBox.of(hotel)
    boxes = [flight_box, hotel_box, RecommendationBox(activity), RecommendationBox(package)]

    for box in boxes:
        match box.get():
            case FlightRecommendation(airline=airline, departure_airport=origin):
                print(f" - Flight box: {airline} from {origin}")
            case HotelRecommendation(hotel_name=name, star_rating=stars):
                print(f" - Hotel box: {name} ({stars}-star)")
            case ActivityRecommendation() as a:
                print(f" - Activity box: {a.activity_name} ({a.formatted_duration})")
            case PackageRecommendation() as p:
                print(f" - Package box: {p.title} with {len(p.activities)} activities")

    # map() takes any callable accepting the boxed type or something broader.
    flight_title = flight_box.map(lambda rec: rec.title)
    hotel_price = hotel_box.map(lambda h: h.price_per_night)
    print(f" - Mapped flight title: {flight_title}")
    print(f" - Mapped hotel price: ${hotel_price}")

    widened: RecommendationBox[Recommendation] = RecommendationBox(flight)
    narrowed = widened.cast_to(FlightRecommendation)
    print(f" - Narrowed to flight box: {narrowed is not None}")
    print(f" - Narrowed to hotel box: {flight_box.cast_to(HotelRecommendation) is not None}")


def _demonstrate_producer_consumer(flights, hotels, activities) -> None:
    # Producer: a sequence of flights can be READ as recommendations.
    recommendations = flights
    print(f" - Producer: reading {recommendations[0].title}")

    # Consumer: a list of Recommendation can TAKE a flight.
    broader: list[Recommendation] = []
    add_recommendation(broader, flights[0])
    print(" - Consumer: added a flight to a list of Recommendation")

    all_recs: list[Recommendation] = []
    add_recommendation(all_recs, flights[0])
    add_recommendation(all_recs, hotels[0])
    add_recommendation(all_recs, activities[0])
    print(f" - Added different recommendation kinds: {len(all_recs)} items")


def _demonstrate_runtime_generics(flights, hotels, recommendations) -> None:
    # list[FlightRecommendation] and list[HotelRecommendation] are both just
    # `list` at runtime; only the elements can be inspected.
    print(f"   isinstance(flights, list): {isinstance(flights, list)}")
    all_flights = all(isinstance(rec, FlightRecommendation) for rec in recommendations)
    print(f"   All recommendations are flights: {all_flights}")
    print(f"   is_recommendation_list(flights): {is_recommendation_list(flights)}")
    print(f"   is_recommendation_list(hotels): {is_recommendation_list(hotels)}")
    print(f"   is_recommendation_list('not a list'): {is_recommendation_list('not a list')}")


if __name__ == "__main__":
    # Load .env before reading settings so a local file can override them.
    load_dotenv()
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [demo] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    run_demo(min_confidence=settings.min_confidence)
