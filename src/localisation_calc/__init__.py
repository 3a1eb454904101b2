"""
Localisation survey calculations.

This package computes, for each candidate address of a household relocation
survey, the monthly housing cost (rent, or a Canadian mortgage with taxes and
utilities) and the transit accessibility and multi-modal travel times to the
household's frequent destinations, using the Transition routing API.
"""

from .schemas import (
    Address,
    Destination,
    MonthlyCostResult,
    ModeTimeDistance,
    RoutingResult,
    AccessibilityAndRouting,
)
from .model import (
    calculate_monthly_cost,
    monthly_housing_cost,
    monthly_mortgage_payment,
    percentage_of_income,
)
from .routing import (
    accessibility_map_from_address,
    calculate_accessibility_and_routing,
    routing_to_destination,
)
from .server import update_results_fields
from .interview import current_address_id, get_addresses, get_destinations, get_response
from .carcost import CarCategory, CarEngine, car_cost_average_caa
from .validations import amortization_year_choices, interest_rate_errors

__all__ = [
    "Address",
    "Destination",
    "MonthlyCostResult",
    "ModeTimeDistance",
    "RoutingResult",
    "AccessibilityAndRouting",
    "calculate_monthly_cost",
    "monthly_housing_cost",
    "monthly_mortgage_payment",
    "percentage_of_income",
    "accessibility_map_from_address",
    "calculate_accessibility_and_routing",
    "routing_to_destination",
    "update_results_fields",
    "current_address_id",
    "get_addresses",
    "get_destinations",
    "get_response",
    "CarCategory",
    "CarEngine",
    "car_cost_average_caa",
    "amortization_year_choices",
    "interest_rate_errors",
]
