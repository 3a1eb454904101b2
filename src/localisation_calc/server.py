from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

from . import routing
from .data_sources import TransitionRoutingClient
from .interview import get_addresses
from .model import calculate_monthly_cost
from .schemas import Address

logger = logging.getLogger(__name__)

# Interview field whose updates trigger the results calculation.
SECTIONS_ACTIONS_FIELD = "_sections._actions"
RESULTS_SECTION = "results"


def is_entering_results(value: Any) -> bool:
    if not isinstance(value, list) or not value:
        return False
    last_action = value[-1]
    return isinstance(last_action, Mapping) and last_action.get("section") == RESULTS_SECTION


async def update_results_fields(
    interview: Mapping[str, Any],
    value: Any,
    client: TransitionRoutingClient,
    scenario_id: Optional[str],
) -> Dict[str, Any]:
    """
    Compute cost, accessibility and routing for every address of the interview.

    ``value`` is the list of section actions; nothing is computed unless the
    respondent is entering the results section. Returns the values to merge
    in the interview, keyed by dotted path (``addresses.<uuid>.<field>``).
    """
    try:
        if not is_entering_results(value):
            return {}

        updated_values: Dict[str, Any] = {}
        tasks = []
        for address in get_addresses(interview):
            cost = calculate_monthly_cost(address, interview)
            updated_values[f"addresses.{address.uuid}.monthlyCost"] = cost.to_response()
            tasks.append(
                _update_accessibility_and_routing(
                    address, interview, client, scenario_id, updated_values
                )
            )
        await asyncio.gather(*tasks)
        return updated_values
    except Exception:
        logger.exception("Error calculating results for interview")
        return {}


async def _update_accessibility_and_routing(
    address: Address,
    interview: Mapping[str, Any],
    client: TransitionRoutingClient,
    scenario_id: Optional[str],
    updated_values: Dict[str, Any],
) -> None:
    prefix = f"addresses.{address.uuid}"
    try:
        result = await routing.calculate_accessibility_and_routing(
            address, interview, client, scenario_id
        )
    except Exception:
        logger.exception("Error calculating accessibility and routing for address %s", address.uuid)
        updated_values[f"{prefix}.accessibilityMap"] = None
        updated_values[f"{prefix}.routingTimeDistances"] = None
        return
    updated_values[f"{prefix}.accessibilityMap"] = result.accessibility_map
    updated_values[f"{prefix}.routingTimeDistances"] = result.routing_to_response()
