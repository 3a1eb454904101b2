from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .schemas import Address, MonthlyCostResult

logger = logging.getLogger(__name__)


def calculate_monthly_cost(
    address: Address, interview: Mapping[str, Any]
) -> MonthlyCostResult:
    housing_cost = monthly_housing_cost(address)
    percentage = (
        percentage_of_income(housing_cost, interview)
        if housing_cost is not None
        else None
    )
    # TODO: add the annual car ownership cost from carcost, prorated monthly.
    return MonthlyCostResult(
        housing_cost_monthly=housing_cost,
        housing_cost_percentage_of_income=percentage,
    )


def monthly_housing_cost(address: Address) -> Optional[float]:
    if address.ownership == "rent":
        return _rent_monthly_cost(address)
    if address.ownership == "buy":
        return _owner_monthly_cost(address)
    logger.warning(
        "Unknown ownership type %r for address %s", address.ownership, address.uuid
    )
    return None


def percentage_of_income(
    monthly_cost: float, interview: Mapping[str, Any]
) -> Optional[float]:
    """
    Share of household income going to housing.

    Income is collected as a bracket, not an amount, so there is no value to
    divide by yet and this always returns None.
    """
    return None


def monthly_mortgage_payment(
    principal: float, annual_rate: float, amortization_months: int
) -> float:
    """
    Level monthly payment for a Canadian mortgage.

    ``annual_rate`` is the nominal rate as a fraction (0.05 for 5%),
    compounded semi-annually.
    """
    if principal < 0:
        raise ValueError("principal must not be negative")
    if annual_rate < 0:
        raise ValueError("annual_rate must not be negative")
    if amortization_months <= 0:
        raise ValueError("amortization_months must be positive")
    monthly_rate = effective_monthly_rate(annual_rate)
    if monthly_rate == 0:
        return principal / amortization_months
    discount = (1 + monthly_rate) ** (-amortization_months)
    return principal * monthly_rate / (1 - discount)


def effective_monthly_rate(nominal_annual_rate: float) -> float:
    return (1 + nominal_annual_rate / 2) ** (1 / 6.0) - 1


def _rent_monthly_cost(address: Address) -> Optional[float]:
    if not _is_number(address.rent):
        logger.warning("Missing rent amount for address %s", address.uuid)
        return None
    if address.are_utilities_included is False:
        if not _is_number(address.utilities):
            logger.warning(
                "Utilities not included but no utilities amount for address %s",
                address.uuid,
            )
            return None
        return address.rent + address.utilities
    return address.rent


def _owner_monthly_cost(address: Address) -> Optional[float]:
    if not (_is_number(address.mortgage) and _is_number(address.interest_rate)):
        logger.warning("Incomplete mortgage information for address %s", address.uuid)
        return None
    if address.mortgage < 0 or address.interest_rate < 0:
        logger.warning("Negative mortgage amount or rate for address %s", address.uuid)
        return None
    years = _parse_years(address.amortization_period)
    if years is None:
        logger.warning(
            "Invalid amortization period %r for address %s",
            address.amortization_period,
            address.uuid,
        )
        return None

    mortgage_payment = (
        0.0
        if address.mortgage == 0
        else monthly_mortgage_payment(
            address.mortgage, address.interest_rate / 100.0, years * 12
        )
    )
    taxes = address.taxes / 12.0 if _is_number(address.taxes) else 0.0
    utilities = address.utilities if _is_number(address.utilities) else 0.0
    return mortgage_payment + taxes + utilities


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_years(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        years = value
    elif isinstance(value, str):
        try:
            years = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return years if years > 0 else None
