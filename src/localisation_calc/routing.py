"""
Transit accessibility and multi-modal routing for candidate addresses.

The routing client is blocking (``requests``), so every call is pushed to a
worker thread with ``asyncio.to_thread``. That lets the accessibility lookup
and the routing to every destination of an address run at the same time.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
from typing import Any, Dict, Mapping, Optional

from .data_sources import TransitionRoutingClient
from .interview import get_destinations
from .schemas import (
    ROUTING_MODES,
    AccessibilityAndRouting,
    Address,
    Destination,
    ModeTimeDistance,
    RoutingResult,
)

logger = logging.getLogger(__name__)

DEPARTURE_SECONDS_SINCE_MIDNIGHT = 8 * 3600
MAX_TOTAL_TRAVEL_TIME_MINUTES = 30
NUMBER_OF_POLYGONS = 1


async def accessibility_map_from_address(
    address: Address,
    client: TransitionRoutingClient,
    scenario_id: Optional[str],
) -> Optional[Dict[str, Any]]:
    """
    Area reachable by transit within 30 minutes of the address, leaving at 8 AM.

    Returns the polygons as a GeoJSON FeatureCollection, or None when they
    could not be calculated.
    """
    if not address.geography:
        logger.warning("No geography for address %s, skipping accessibility map", address.uuid)
        return None
    if scenario_id is None:
        logger.error("No transit scenario configured for accessibility map calculation")
        return None
    try:
        response = await asyncio.to_thread(
            client.transit_accessibility_map,
            point=address.geography,
            number_of_polygons=NUMBER_OF_POLYGONS,
            max_total_travel_time_minutes=MAX_TOTAL_TRAVEL_TIME_MINUTES,
            departure_seconds_since_midnight=DEPARTURE_SECONDS_SINCE_MIDNIGHT,
            transit_scenario=scenario_id,
            calculate_pois=True,
        )
        if response.get("status") != "success":
            logger.info("Accessibility map not available for address %s: %r", address.uuid, response)
            return None
        return response.get("polygons")
    except Exception:
        logger.exception("Error getting accessibility map for address %s", address.uuid)
        return None


async def routing_to_destination(
    address: Address,
    destination: Destination,
    client: TransitionRoutingClient,
    scenario_id: Optional[str],
    departure_date: Optional[datetime.date] = None,
) -> Optional[RoutingResult]:
    if not address.geography:
        logger.warning("No geography for address %s, skipping routing", address.uuid)
        return None
    if not destination.geography:
        logger.warning("No geography for destination %s, skipping routing", destination.uuid)
        return None
    if scenario_id is None:
        logger.error("No transit scenario configured for routing calculation")
        return None
    # Any day works with a weekday scenario, so default to today.
    departure_date = departure_date or datetime.date.today()
    try:
        by_mode = await asyncio.to_thread(
            client.time_distance_by_mode,
            list(ROUTING_MODES),
            origin=address.geography,
            destination=destination.geography,
            departure_seconds_since_midnight=DEPARTURE_SECONDS_SINCE_MIDNIGHT,
            departure_date_string=departure_date.isoformat(),
            transit_scenario=scenario_id,
        )
        result = RoutingResult(
            destination_uuid=destination.uuid,
            destination_sequence=destination.sequence,
        )
        for index, mode in enumerate(ROUTING_MODES):
            mode_result = by_mode.get(mode) or {}
            if mode_result.get("status") != "success":
                logger.info("No routing found for mode %s: %r", mode, mode_result)
                continue
            result.results_by_mode[mode] = ModeTimeDistance(
                mode=mode,
                sequence=index,
                distance_meters=mode_result.get("distanceM"),
                travel_time_seconds=mode_result.get("travelTimeS"),
            )
        return result
    except Exception:
        logger.exception(
            "Error getting routing from address %s to destination %s",
            address.uuid,
            destination.uuid,
        )
        return None


async def calculate_accessibility_and_routing(
    address: Address,
    interview: Mapping[str, Any],
    client: TransitionRoutingClient,
    scenario_id: Optional[str],
) -> AccessibilityAndRouting:
    """
    Accessibility map of the address and routing to every destination.

    A failed destination is recorded as None without affecting the others.
    A failure of the accessibility map is raised to the caller.
    """
    if scenario_id is None:
        logger.error("No transit scenario configured for routing and accessibility calculation")
        return AccessibilityAndRouting()

    destinations = get_destinations(interview)
    accessibility_task = asyncio.create_task(
        accessibility_map_from_address(address, client, scenario_id)
    )
    routing_tasks = {
        destination.uuid: asyncio.create_task(
            routing_to_destination(address, destination, client, scenario_id)
        )
        for destination in destinations
    }

    routing_time_distances: Dict[str, Optional[RoutingResult]] = {}
    for destination_uuid, task in routing_tasks.items():
        try:
            routing_time_distances[destination_uuid] = await task
        except Exception:
            logger.exception(
                "Error getting routing from address %s to destination %s",
                address.uuid,
                destination_uuid,
            )
            routing_time_distances[destination_uuid] = None

    accessibility_map = await accessibility_task
    return AccessibilityAndRouting(
        accessibility_map=accessibility_map,
        routing_time_distances=routing_time_distances,
    )
