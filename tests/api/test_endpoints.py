"""
API endpoint tests
"""

import pytest
from unittest.mock import AsyncMock

from api.dependencies import get_store
from api.main import app
from core.exceptions import StoreError
from core.store import RecordStore
from sample_data import ELEMENTS, ELEMENTS_BY_NUMBER


ENRICHMENT_FIELDS = ("uses", "oxidationStates", "sources")


def test_root_info_document(client):
    """Test / and /api return the info document"""
    for path in ("/", "/api"):
        response = client.get(path)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Periodic Table API"
        assert "version" in data
        assert "GET /elements" in data["endpoints"]
        assert "/elements/1" in data["examples"]


@pytest.mark.parametrize("number", [1, 2, 26, 35, 57, 80, 117, 118])
def test_element_by_number_matches(client, number):
    response = client.get(f"/elements/{number}")

    assert response.status_code == 200
    data = response.json()
    assert data["atomicNumber"] == number
    assert data["symbol"] == ELEMENTS_BY_NUMBER[number]["symbol"]
    for field in ENRICHMENT_FIELDS:
        assert isinstance(data[field], list)


def test_every_atomic_number_resolves(client):
    for row in ELEMENTS:
        response = client.get(f"/elements/{row['atomic_number']}")
        assert response.status_code == 200
        assert response.json()["atomicNumber"] == row["atomic_number"]


@pytest.mark.parametrize("number", [0, 119, 500])
def test_element_by_number_out_of_range(client, number):
    response = client.get(f"/elements/{number}")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid atomic number. Must be 1-118"}


def test_element_by_number_missing_row(client, seeded_engine):
    with seeded_engine.begin() as conn:
        conn.exec_driver_sql('DELETE FROM elements WHERE "atomicNumber" = 50')

    response = client.get("/elements/50")

    assert response.status_code == 404
    assert response.json() == {"error": "Element not found"}


def test_element_enrichment_fields(client):
    data = client.get("/elements/1").json()

    assert data["uses"] == ["Rocket fuel", "Ammonia production"]
    assert sorted(data["oxidationStates"]) == [-1, 1]
    assert data["sources"] == ["Electrolysis of water"]


def test_element_without_child_rows_gets_empty_lists(client):
    data = client.get("/elements/5").json()

    assert data["uses"] == []
    assert data["oxidationStates"] == []
    assert data["sources"] == []


def test_symbol_lookup_is_case_insensitive(client):
    upper = client.get("/elements/symbol/H")
    lower = client.get("/elements/symbol/h")

    assert upper.status_code == 200
    assert lower.status_code == 200
    assert upper.json() == lower.json()
    assert upper.json()["name"] == "Hydrogen"


def test_symbol_lookup_multi_letter(client):
    response = client.get("/elements/symbol/oG")

    assert response.status_code == 200
    assert response.json()["atomicNumber"] == 118


def test_symbol_lookup_unknown(client):
    response = client.get("/elements/symbol/Xx")

    assert response.status_code == 404
    assert response.json() == {"error": "Element not found"}


@pytest.mark.parametrize("path", [
    "/elements/symbol/ABCD",
    "/elements/symbol/H1",
    "/elements/name/Iron2",
    "/elements/",
    "/elements/1/",
    "/elements/symbol/H/",
    "/elements/name/Iron/",
])
def test_lookup_shape_mismatch_is_not_found(client, path):
    response = client.get(path, follow_redirects=False)

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_name_lookup_is_case_insensitive(client):
    response = client.get("/elements/name/iRoN")

    assert response.status_code == 200
    assert response.json()["atomicNumber"] == 26
    assert response.json()["uses"] == ["Steel"]


def test_name_lookup_unknown(client):
    response = client.get("/elements/name/Unobtainium")

    assert response.status_code == 404
    assert response.json() == {"error": "Element not found"}


def test_categories_sorted_and_unique(client):
    response = client.get("/elements/categories")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert categories == sorted(categories)
    assert len(categories) == len(set(categories))
    assert set(categories) == {row["category"] for row in ELEMENTS}


def test_categories_skip_null(client, seeded_engine):
    with seeded_engine.begin() as conn:
        conn.exec_driver_sql('UPDATE elements SET category = NULL WHERE "atomicNumber" = 1')

    categories = client.get("/elements/categories").json()["categories"]

    assert None not in categories


def test_liquid_elements_enriched(client):
    response = client.get("/elements/liquid")

    assert response.status_code == 200
    data = response.json()
    assert [e["atomicNumber"] for e in data] == [35, 80]
    assert data[1]["uses"] == ["Thermometers"]
    for element in data:
        for field in ENRICHMENT_FIELDS:
            assert field in element


def test_gas_elements_enriched_beyond_threshold(client):
    response = client.get("/elements/gas")

    assert response.status_code == 200
    data = response.json()
    numbers = [e["atomicNumber"] for e in data]
    assert numbers == [1, 2, 7, 8, 9, 10, 17, 18, 36, 54, 86]
    assert len(data) > 10
    assert all("uses" in e for e in data)


def test_group_filter(client):
    response = client.get("/elements?group=1")

    assert response.status_code == 200
    data = response.json()
    numbers = [e["atomicNumber"] for e in data]
    assert numbers == [1, 3, 11, 19, 37, 55, 87]
    assert all(e["groupNumber"] == 1 for e in data)
    # seven results: small enough to enrich
    assert all("oxidationStates" in e for e in data)


@pytest.mark.parametrize("value", ["19", "0", "abc", "", "1.5"])
def test_group_filter_fails_closed(client, value):
    response = client.get(f"/elements?group={value}")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid group parameter. Must be 1-18"}


@pytest.mark.parametrize("value", ["99", "0", "abc", "2.5"])
def test_period_filter_fails_open(client, value):
    response = client.get(f"/elements?period={value}")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 118
    assert "uses" not in data[0]


def test_period_and_block_filters(client):
    data = client.get("/elements?period=3&block=P").json()

    assert [e["symbol"] for e in data] == ["Al", "Si", "P", "S", "Cl", "Ar"]


@pytest.mark.parametrize("value", ["200", "0", "119", "ten", "-1"])
def test_limit_fails_closed(client, value):
    response = client.get(f"/elements?limit={value}")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid limit parameter. Must be 1-118"}


def test_limit_caps_results_after_ordering(client):
    data = client.get("/elements?limit=5").json()

    assert [e["atomicNumber"] for e in data] == [1, 2, 3, 4, 5]


def test_limit_with_filters(client):
    data = client.get("/elements?state=GAS&limit=3").json()

    assert [e["symbol"] for e in data] == ["H", "He", "N"]


def test_category_filter_case_insensitive(client):
    data = client.get("/elements?category=Noble-Gas").json()

    assert [e["symbol"] for e in data] == ["He", "Ne", "Ar", "Kr", "Xe", "Rn", "Og"]


def test_numeric_filters_are_strict_greater_than(client):
    data = client.get("/elements?meltingPoint=1811").json()

    assert [e["symbol"] for e in data] == ["C", "W"]


def test_unparseable_numeric_filter_ignored(client):
    response = client.get("/elements?density=heavy&limit=3")

    assert response.status_code == 200
    assert [e["atomicNumber"] for e in response.json()] == [1, 2, 3]


def test_density_and_boiling_point_filters(client):
    data = client.get("/elements?density=10&boilingPoint=3000").json()

    assert [e["symbol"] for e in data] == ["W", "Au"]


def test_large_result_not_enriched(client):
    data = client.get("/elements").json()

    assert len(data) == 118
    for field in ENRICHMENT_FIELDS:
        assert field not in data[0]


def test_small_result_enriched(client):
    data = client.get("/elements?limit=10").json()

    assert len(data) == 10
    assert all(all(field in e for field in ENRICHMENT_FIELDS) for e in data)


def test_injection_attempt_is_bound_not_interpolated(client):
    response = client.get("/elements", params={"category": "x' OR '1'='1"})

    assert response.status_code == 200
    assert response.json() == []


def test_unknown_path_not_found(client):
    response = client.get("/nonexistent")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_unsupported_method_not_found(client):
    response = client.post("/elements", json={})

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_options_preflight(client):
    response = client.options("/elements/1")

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "GET" in response.headers["access-control-allow-methods"]


def test_cors_and_content_type_on_every_response(client):
    for path in ("/", "/elements/1", "/elements/999", "/nonexistent"):
        response = client.get(path)
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["content-type"].startswith("application/json")
        assert "x-request-id" in response.headers


def test_cache_control_on_element_routes(client):
    response = client.get("/elements/1")

    assert response.headers["cache-control"] == "public, max-age=3600"


def test_store_failure_returns_generic_500(client):
    """Store errors never leak internal detail"""
    failing_store = AsyncMock()
    failing_store.fetch_one = AsyncMock(
        side_effect=StoreError("Database operation failed", context={"secret": "dsn"})
    )
    app.dependency_overrides[get_store] = lambda: failing_store

    response = client.get("/elements/1")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_unreachable_database_returns_json_500(client):
    """Connection failures are reported like any other store failure"""
    def refuse():
        raise ConnectionRefusedError(111, "Connection refused")

    app.dependency_overrides[get_store] = lambda: RecordStore(refuse)

    response = client.get("/elements/1")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["content-type"].startswith("application/json")
    assert response.headers["access-control-allow-origin"] == "*"


def test_repeated_query_parameter_uses_first_value(client):
    response = client.get("/elements?group=1&group=abc")

    assert response.status_code == 200
    assert [e["atomicNumber"] for e in response.json()] == [1, 3, 11, 19, 37, 55, 87]
