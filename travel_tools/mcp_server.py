# =============================================================================
# travel_tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes read-only queries over the sample catalog as MCP tools.  Each
#   tool is a thin wrapper around a travel_recommender function - it looks
#   things up, formats the result as a plain dict, and logs the exchange.
#
# TOOL NAMING CONVENTIONS:
#   - list_*     → Read-only listing with filters (idempotent)
#   - describe_* → Human-readable text for one item (idempotent)
#   - get_*      → Derived numbers for one item (idempotent)
#   Nothing here writes.  Unknown ids come back as an error dict with a
#   hint, never as an exception, so the caller can recover.
#
# RUNNING THIS SERVER:
#   python -m travel_tools.mcp_server      (stdio transport)
# =============================================================================

import json
import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on travel_recommender and nothing else.
from travel_recommender.catalog import build_catalog
from travel_recommender.config import Settings
from travel_recommender.models import PackageRecommendation, RecommendationKind
from travel_recommender.service import (
    categorize_recommendations,
    describe_recommendation,
    filter_by_confidence,
    filter_by_predicate,
)

load_dotenv()
_SETTINGS = Settings.from_env()

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON messages, and a stray log
# line there would corrupt the protocol stream.
#
#   CYAN   incoming requests (tool name + parameters)
#   GREEN  responses (compact JSON)
#   YELLOW intermediate status
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=_SETTINGS.log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


mcp = FastMCP("travel-recommender")

# Built once; every tool reads from the same immutable catalog.
_CATALOG = build_catalog()


def _summary(rec) -> dict:
    return {
        "id": rec.id,
        "kind": rec.kind.value,
        "title": rec.title,
        "confidence_score": rec.confidence_score,
        "description": describe_recommendation(rec),
    }


def _not_found(tool_name: str, recommendation_id: str) -> dict:
    _log_status(f"No recommendation with id {recommendation_id!r}")
    return _log_response(tool_name, {
        "error": f"Recommendation '{recommendation_id}' not found.",
        "hint": "Call list_recommendations to see the available ids.",
    })


# =============================================================================
# TOOL 1: list_recommendations
# =============================================================================
def list_recommendations(min_confidence: float = 0.0, kind: str | None = None) -> dict:
    """List catalog recommendations at or above a confidence threshold.

    Args:
        min_confidence: Minimum confidence score, 0.0 to 1.0 (default 0.0
            lists everything).
        kind: Optional kind to restrict to: "flight", "hotel", "activity"
            or "package".

    Returns:
        A dict with:
          - count: number of matches
          - recommendations: id, kind, title, confidence_score and a
            one-line description for each match, in catalog order
    """
    _log_request("list_recommendations", min_confidence=min_confidence, kind=kind)

    matches = filter_by_confidence(_CATALOG.all(), min_confidence)
    if kind is not None:
        try:
            wanted = RecommendationKind(kind.lower())
        except ValueError:
            _log_status(f"Unknown kind {kind!r}")
            return _log_response("list_recommendations", {
                "error": f"Unknown kind '{kind}'.",
                "hint": "Use one of: " + ", ".join(k.value for k in RecommendationKind),
            })
        matches = filter_by_predicate(matches, lambda rec: rec.kind is wanted)

    _log_status(f"{len(matches)} recommendations match")
    return _log_response("list_recommendations", {
        "count": len(matches),
        "recommendations": [_summary(rec) for rec in matches],
    })


# =============================================================================
# TOOL 2: describe_recommendation
# =============================================================================
def describe(recommendation_id: str) -> dict:
    """Describe a single recommendation in one human-readable line.

    Args:
        recommendation_id: Catalog id such as "FL001", "HT002" or "PK001".

    Returns:
        A dict with id, kind and description, or an error dict if the id
        is unknown.
    """
    _log_request("describe_recommendation", recommendation_id=recommendation_id)

    rec = _CATALOG.find(recommendation_id)
    if rec is None:
        return _not_found("describe_recommendation", recommendation_id)
    return _log_response("describe_recommendation", {
        "id": rec.id,
        "kind": rec.kind.value,
        "description": describe_recommendation(rec),
    })


# =============================================================================
# TOOL 3: categorize_catalog
# =============================================================================
def categorize_catalog() -> dict:
    """Group every catalog recommendation by category.

    Returns:
        A dict mapping "Flights", "Hotels", "Activities" and "Packages" to
        the ids in that category (all four keys always present).
    """
    _log_request("categorize_catalog")

    categorized = categorize_recommendations(_CATALOG.all())
    return _log_response("categorize_catalog", {
        category: [rec.id for rec in recs]
        for category, recs in categorized.items()
    })


# =============================================================================
# TOOL 4: get_package_breakdown
# =============================================================================
# Shows the arithmetic behind "Save: $X" so the numbers can be checked.
# =============================================================================
def get_package_breakdown(package_id: str) -> dict:
    """Break a package's price down into its components.

    Args:
        package_id: Catalog id of a package, e.g. "PK001".

    Returns:
        A dict with:
          - stay_nights: estimated stay length used for the hotel cost
          - flight_price, hotel_price_per_night, hotel_total, activities_total
          - individual_total: what the components cost booked separately
          - total_price: the package price
          - savings: individual_total - total_price
        or an error dict if the id is unknown or not a package.
    """
    _log_request("get_package_breakdown", package_id=package_id)

    rec = _CATALOG.find(package_id)
    if rec is None:
        return _not_found("get_package_breakdown", package_id)
    if not isinstance(rec, PackageRecommendation):
        _log_status(f"{package_id} is a {rec.kind.value}, not a package")
        return _log_response("get_package_breakdown", {
            "error": f"Recommendation '{package_id}' is a {rec.kind.value}, not a package.",
            "hint": "Package ids start with 'PK'.",
        })

    hotel_total = rec.hotel.price_per_night * rec.duration_in_days
    activities_total = sum(activity.price for activity in rec.activities)
    return _log_response("get_package_breakdown", {
        "id": rec.id,
        "stay_nights": rec.duration_in_days,
        "flight_price": rec.flight.price,
        "hotel_price_per_night": rec.hotel.price_per_night,
        "hotel_total": round(hotel_total, 2),
        "activities_total": round(activities_total, 2),
        "individual_total": round(rec.flight.price + hotel_total + activities_total, 2),
        "total_price": rec.total_price,
        "savings": round(rec.savings_amount, 2),
    })


# Register the plain functions as tools.  The module-level names stay bound
# to the functions themselves, so they remain directly callable.
mcp.tool()(list_recommendations)
mcp.tool(name="describe_recommendation")(describe)
mcp.tool()(categorize_catalog)
mcp.tool()(get_package_breakdown)


if __name__ == "__main__":
    mcp.run()
