"""Payloads returned by the MCP tool functions."""

import pytest

from travel_tools import mcp_server


def test_list_everything():
    result = mcp_server.list_recommendations()

    assert result["count"] == 12
    first = result["recommendations"][0]
    assert first["id"] == "FL001"
    assert first["kind"] == "flight"
    assert first["description"].startswith("Flight from JFK to CDG on Air France, Direct")


def test_list_with_threshold_and_kind():
    result = mcp_server.list_recommendations(min_confidence=0.8, kind="Hotel")

    assert [rec["id"] for rec in result["recommendations"]] == ["HT002"]


def test_list_with_unknown_kind():
    result = mcp_server.list_recommendations(kind="cruise")

    assert "error" in result
    assert "flight" in result["hint"]


def test_describe_known_and_unknown_ids():
    hotel = mcp_server.describe("HT001")
    assert hotel["description"] == (
        "5-star hotel 'Parisian Luxury Hotel' in Paris, France, Price: $320.00 per night"
    )

    missing = mcp_server.describe("nope")
    assert missing["error"] == "Recommendation 'nope' not found."


def test_categorize_catalog():
    assert mcp_server.categorize_catalog() == {
        "Flights": ["FL001", "FL002", "FL003"],
        "Hotels": ["HT001", "HT002", "HT003"],
        "Activities": ["AC001", "AC002", "AC003", "AC004"],
        "Packages": ["PK001", "PK002"],
    }


def test_package_breakdown():
    result = mcp_server.get_package_breakdown("PK001")

    assert result["stay_nights"] == 3
    assert result["hotel_total"] == pytest.approx(960.0)
    assert result["activities_total"] == pytest.approx(185.5)
    assert result["individual_total"] == pytest.approx(1596.49)
    assert result["savings"] == pytest.approx(646.49)


def test_package_breakdown_rejects_non_packages():
    assert "not a package" in mcp_server.get_package_breakdown("FL001")["error"]
    assert "not found" in mcp_server.get_package_breakdown("PK999")["error"]
