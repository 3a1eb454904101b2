from __future__ import annotations

from typing import Any, List

MAX_AMORTIZATION_YEARS = 30


def interest_rate_errors(value: Any) -> List[str]:
    """Problems with an interest rate answer, in percent. Empty when valid."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return ["Interest rate is required."]
    try:
        rate = float(value)
    except (TypeError, ValueError):
        return ["Interest rate is invalid."]
    if rate != rate:  # NaN
        return ["Interest rate is invalid."]
    errors = []
    if rate < 0:
        errors.append("Interest rate must be at least 0%.")
    if rate > 100:
        errors.append("Interest rate must be at most 100%.")
    return errors


def amortization_year_choices(max_years: int = MAX_AMORTIZATION_YEARS) -> List[str]:
    return [str(year) for year in range(1, max_years + 1)]
