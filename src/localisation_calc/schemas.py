from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Order matters: the index of each mode is its ordinal in routing results.
ROUTING_MODES = ("transit", "walking", "cycling", "driving")


@dataclass
class Address:
    """A candidate residence, as entered in the addresses section."""

    uuid: str
    sequence: int
    name: Optional[str] = None
    geography: Optional[Dict[str, Any]] = None  # GeoJSON point feature
    ownership: Optional[str] = None  # "rent" or "buy"
    rent: Any = None  # monthly
    are_utilities_included: Optional[bool] = None
    utilities: Any = None  # monthly
    mortgage: Any = None
    interest_rate: Any = None  # annual percentage, e.g., 5.25
    amortization_period: Any = None  # whole years as a string, e.g., "25"
    taxes: Any = None  # annual

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "Address":
        return cls(
            uuid=data["_uuid"],
            sequence=data.get("_sequence", 0),
            name=data.get("name"),
            geography=data.get("geography"),
            ownership=data.get("ownership"),
            rent=data.get("rent"),
            are_utilities_included=data.get("areUtilitiesIncluded"),
            utilities=data.get("utilities"),
            mortgage=data.get("mortgage"),
            interest_rate=data.get("interestRate"),
            amortization_period=data.get("amortizationPeriod"),
            taxes=data.get("taxes"),
        )


@dataclass
class Destination:
    """A place the household visits frequently."""

    uuid: str
    sequence: int
    name: Optional[str] = None
    geography: Optional[Dict[str, Any]] = None
    frequency: Optional[str] = None

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "Destination":
        return cls(
            uuid=data["_uuid"],
            sequence=data.get("_sequence", 0),
            name=data.get("name"),
            geography=data.get("geography"),
            frequency=data.get("frequency"),
        )


@dataclass
class MonthlyCostResult:
    housing_cost_monthly: Optional[float] = None
    housing_cost_percentage_of_income: Optional[float] = None

    def to_response(self) -> Dict[str, Optional[float]]:
        return {
            "housingCostMonthly": self.housing_cost_monthly,
            "housingCostPercentageOfIncome": self.housing_cost_percentage_of_income,
        }


@dataclass
class ModeTimeDistance:
    mode: str
    sequence: int
    distance_meters: Optional[float] = None
    travel_time_seconds: Optional[float] = None

    def to_response(self) -> Dict[str, Any]:
        return {
            "_uuid": self.mode,
            "_sequence": self.sequence,
            "distanceMeters": self.distance_meters,
            "travelTimeSeconds": self.travel_time_seconds,
        }


def _empty_results_by_mode() -> Dict[str, Optional[ModeTimeDistance]]:
    return {mode: None for mode in ROUTING_MODES}


@dataclass
class RoutingResult:
    """Travel time and distance by mode from an address to one destination."""

    destination_uuid: str
    destination_sequence: int
    results_by_mode: Dict[str, Optional[ModeTimeDistance]] = field(
        default_factory=_empty_results_by_mode
    )

    def to_response(self) -> Dict[str, Any]:
        return {
            "_uuid": self.destination_uuid,
            "_sequence": self.destination_sequence,
            "resultsByMode": {
                mode: result.to_response() if result is not None else None
                for mode, result in self.results_by_mode.items()
            },
        }


@dataclass
class AccessibilityAndRouting:
    accessibility_map: Optional[Dict[str, Any]] = None  # GeoJSON FeatureCollection
    routing_time_distances: Optional[Dict[str, Optional[RoutingResult]]] = None

    def routing_to_response(self) -> Optional[Dict[str, Any]]:
        if self.routing_time_distances is None:
            return None
        return {
            uuid: result.to_response() if result is not None else None
            for uuid, result in self.routing_time_distances.items()
        }
