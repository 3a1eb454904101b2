import asyncio
import threading

import pytest

from conftest import ALL_MODES_SUCCESS, POLYGONS, make_interview, make_point
from localisation_calc import routing
from localisation_calc.schemas import AccessibilityAndRouting, RoutingResult
from localisation_calc.server import is_entering_results, update_results_fields

SCENARIO = "test-scenario"
RESULTS = [{"section": "home"}, {"section": "results"}]


def run(interview, value, client, scenario_id=SCENARIO):
    return asyncio.run(update_results_fields(interview, value, client, scenario_id))


@pytest.mark.parametrize(
    "value",
    [
        [],
        None,
        "results",
        [{"section": "addresses"}],
        [{"section": "results"}, {"section": "destinations"}],
        [{"section": "results"}, {"other": "results"}],
        ["results"],
    ],
)
def test_not_entering_results(value, home, client):
    assert not is_entering_results(value)
    assert run(make_interview([home]), value, client) == {}
    client.transit_accessibility_map.assert_not_called()


def test_single_rent_address(home, client):
    result = run(make_interview([home]), RESULTS, client)

    assert result == {
        "addresses.address-1.monthlyCost": {"housingCostMonthly": 1200, "housingCostPercentageOfIncome": None},
        "addresses.address-1.accessibilityMap": POLYGONS,
        "addresses.address-1.routingTimeDistances": {},
    }


def test_routing_is_serialized(home, destinations, client):
    result = run(make_interview([home], destinations[:1]), RESULTS, client)

    routing_time_distances = result["addresses.address-1.routingTimeDistances"]
    assert routing_time_distances["work"]["_uuid"] == "work"
    assert routing_time_distances["work"]["_sequence"] == 1
    assert routing_time_distances["work"]["resultsByMode"]["transit"] == {
        "_uuid": "transit",
        "_sequence": 0,
        "distanceMeters": 6100,
        "travelTimeSeconds": 1500,
    }


def test_every_address(home, client):
    condo = {
        "_uuid": "address-2",
        "_sequence": 2,
        "geography": make_point(-73.6, 45.55),
        "ownership": "buy",
        "mortgage": 0,
        "interestRate": 5,
        "amortizationPeriod": "25",
        "taxes": 2400,
        "utilities": 100,
    }
    unknown = {"_uuid": "address-3", "_sequence": 3}

    result = run(make_interview([home, condo, unknown]), RESULTS, client)

    assert result["addresses.address-1.monthlyCost"]["housingCostMonthly"] == 1200
    assert result["addresses.address-2.monthlyCost"]["housingCostMonthly"] == 300
    assert result["addresses.address-3.monthlyCost"]["housingCostMonthly"] is None
    assert result["addresses.address-3.accessibilityMap"] is None
    assert len(result) == 9


def test_failure_is_isolated_per_address(home, destinations, client, monkeypatch):
    other = dict(home, _uuid="address-2", _sequence=2, rent=900)

    async def fake_calculation(address, interview, client, scenario_id):
        if address.uuid == "address-1":
            raise RuntimeError("accessibility failed")
        return AccessibilityAndRouting(POLYGONS, {"work": RoutingResult("work", 1)})

    monkeypatch.setattr(routing, "calculate_accessibility_and_routing", fake_calculation)

    result = run(make_interview([home, other], destinations), RESULTS, client)

    assert result["addresses.address-1.monthlyCost"]["housingCostMonthly"] == 1200
    assert result["addresses.address-1.accessibilityMap"] is None
    assert result["addresses.address-1.routingTimeDistances"] is None
    assert result["addresses.address-2.monthlyCost"]["housingCostMonthly"] == 900
    assert result["addresses.address-2.accessibilityMap"] == POLYGONS
    assert result["addresses.address-2.routingTimeDistances"]["work"]["_uuid"] == "work"


def test_no_scenario_still_computes_cost(home, client):
    result = run(make_interview([home]), RESULTS, client, scenario_id=None)

    assert result["addresses.address-1.monthlyCost"]["housingCostMonthly"] == 1200
    assert result["addresses.address-1.accessibilityMap"] is None
    assert result["addresses.address-1.routingTimeDistances"] is None


def test_no_addresses(client):
    assert run(make_interview(), RESULTS, client) == {}


@pytest.mark.parametrize(
    "interview",
    [
        None,
        {},
        {"response": {"addresses": ["address-1"]}},
        {"response": {"addresses": {"address-1": {"rent": 1200}}}},
    ],
)
def test_malformed_interview(interview, client):
    assert run(interview, RESULTS, client) == {}


def test_extreme_mortgage_answers_keep_other_addresses(home, client):
    tiny_rate = dict(
        home, _uuid="address-2", _sequence=2, ownership="buy", mortgage=300000, interestRate=1e-17, amortizationPeriod="25"
    )
    long_period = dict(
        home, _uuid="address-3", _sequence=3, ownership="buy", mortgage=300000, interestRate=5, amortizationPeriod="20000"
    )

    result = run(make_interview([home, tiny_rate, long_period]), RESULTS, client)

    assert result["addresses.address-1.monthlyCost"]["housingCostMonthly"] == 1200
    assert result["addresses.address-2.monthlyCost"]["housingCostMonthly"] == pytest.approx(1000)
    assert result["addresses.address-3.monthlyCost"]["housingCostMonthly"] > 0


def test_addresses_are_computed_concurrently(home, destinations, client):
    # One call per address for accessibility and one for its destination, all
    # of which must be waiting at the same time for the barrier to release.
    barrier = threading.Barrier(4, timeout=5)

    def accessibility(**kwargs):
        barrier.wait()
        return {"status": "success", "polygons": POLYGONS}

    def route(modes, **kwargs):
        barrier.wait()
        return dict(ALL_MODES_SUCCESS)

    client.transit_accessibility_map.side_effect = accessibility
    client.time_distance_by_mode.side_effect = route
    other = dict(home, _uuid="address-2", _sequence=2)

    result = run(make_interview([home, other], destinations[:1]), RESULTS, client)

    for uuid in ("address-1", "address-2"):
        assert result[f"addresses.{uuid}.accessibilityMap"] == POLYGONS
        assert result[f"addresses.{uuid}.routingTimeDistances"]["work"] is not None
