"""Shared fixtures: GeoJSON points, interview snapshots and a fake routing client."""

from unittest.mock import MagicMock

import pytest

from localisation_calc.data_sources import TransitionRoutingClient


def make_point(lon, lat):
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": {},
    }


def make_interview(addresses=None, destinations=None, **response):
    response = dict(response)
    if addresses is not None:
        response["addresses"] = {a["_uuid"]: a for a in addresses}
    if destinations is not None:
        response["destinations"] = {d["_uuid"]: d for d in destinations}
    return {"id": 1, "uuid": "interview-uuid", "response": response}


POLYGONS = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [
                    [[[-73.51, 45.51], [-73.49, 45.51], [-73.49, 45.49], [-73.51, 45.49], [-73.51, 45.51]]]
                ],
            },
            "properties": {},
        }
    ],
}


def mode_success(distance, time):
    return {"status": "success", "distanceM": distance, "travelTimeS": time}


ALL_MODES_SUCCESS = {
    "driving": mode_success(5200, 600),
    "cycling": mode_success(4800, 1100),
    "walking": mode_success(4500, 3400),
    "transit": mode_success(6100, 1500),
}


@pytest.fixture
def client():
    fake = MagicMock(spec=TransitionRoutingClient)
    fake.transit_accessibility_map.return_value = {"status": "success", "polygons": POLYGONS}
    fake.time_distance_by_mode.return_value = dict(ALL_MODES_SUCCESS)
    return fake


@pytest.fixture
def home():
    return {
        "_uuid": "address-1",
        "_sequence": 1,
        "geography": make_point(-73.5, 45.5),
        "ownership": "rent",
        "rent": 1200,
        "areUtilitiesIncluded": True,
    }


@pytest.fixture
def destinations():
    return [
        {"_uuid": "work", "_sequence": 1, "geography": make_point(-73.56, 45.50)},
        {"_uuid": "school", "_sequence": 2, "geography": make_point(-73.61, 45.52)},
    ]
