from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import requests


@dataclass
class RoutingSettings:
    """Where to reach the Transition routing API and which scenario to use."""

    base_url: str = "http://localhost:8080"
    api_token: Optional[str] = None
    scenario_id: Optional[str] = None  # weekday transit scenario
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "RoutingSettings":
        timeout = os.environ.get("TRANSITION_API_TIMEOUT", cls.timeout)
        try:
            timeout = float(timeout)
        except ValueError as exc:
            raise ValueError(f"TRANSITION_API_TIMEOUT must be a number of seconds, got {timeout!r}") from exc
        return cls(
            base_url=os.environ.get("TRANSITION_API_URL", cls.base_url),
            api_token=os.environ.get("TRANSITION_API_TOKEN"),
            scenario_id=os.environ.get("TRANSIT_SCENARIO_SE"),
            timeout=timeout,
        )


class TransitionRoutingClient:
    """Thin wrapper around the Transition API for accessibility and routing."""

    ACCESSIBILITY_ENDPOINT = "api/v1/accessibility"
    ROUTE_ENDPOINT = "api/v1/route"

    def __init__(
        self,
        base_url: str,
        api_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: RoutingSettings) -> "TransitionRoutingClient":
        return cls(
            settings.base_url, api_token=settings.api_token, timeout=settings.timeout
        )

    def transit_accessibility_map(
        self,
        *,
        point: Dict[str, Any],
        number_of_polygons: int,
        max_total_travel_time_minutes: int,
        departure_seconds_since_midnight: int,
        transit_scenario: str,
        calculate_pois: bool = False,
    ) -> Dict[str, Any]:
        body = {
            "point": point,
            "numberOfPolygons": number_of_polygons,
            "maxTotalTravelTimeMinutes": max_total_travel_time_minutes,
            "departureSecondsSinceMidnight": departure_seconds_since_midnight,
            "transitScenario": transit_scenario,
            "calculatePois": calculate_pois,
        }
        return self._post(self.ACCESSIBILITY_ENDPOINT, body)

    def time_distance_by_mode(
        self,
        modes: Sequence[str],
        *,
        origin: Dict[str, Any],
        destination: Dict[str, Any],
        departure_seconds_since_midnight: int,
        departure_date_string: str,
        transit_scenario: str,
    ) -> Dict[str, Dict[str, Any]]:
        body = {
            "routingModes": list(modes),
            "origin": origin,
            "destination": destination,
            "departureSecondsSinceMidnight": departure_seconds_since_midnight,
            "departureDateString": departure_date_string,
            "transitScenario": transit_scenario,
            "withGeojson": False,
        }
        return self._post(self.ROUTE_ENDPOINT, body)

    def _post(self, endpoint: str, body: Dict[str, Any]) -> Dict[str, Any]:
        headers = {}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        url = f"{self.base_url}/{endpoint}"
        response = self.session.post(url, json=body, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise RuntimeError(f"Unexpected response from {url}: {data!r}")
        return data
