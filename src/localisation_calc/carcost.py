from __future__ import annotations

from enum import Enum
from typing import Dict


class CarCategory(str, Enum):
    PASSENGER_CAR = "passengerCar"
    LUXURY_CAR = "luxuryCar"
    PICKUP = "pickup"
    SUV = "suv"


class CarEngine(str, Enum):
    ELECTRIC = "electric"
    PLUGIN_HYBRID = "pluginHybrid"
    HYBRID = "hybrid"
    GAS = "gas"


# Annual ownership cost in dollars, averaged from CAA driving cost figures for
# the 2019 and 2022 model lists. No plug-in hybrid pickups in that data.
AVERAGE_ANNUAL_CAR_COST: Dict[CarCategory, Dict[CarEngine, float]] = {
    CarCategory.PASSENGER_CAR: {
        CarEngine.ELECTRIC: 5947.69,
        CarEngine.PLUGIN_HYBRID: 7484.73,
        CarEngine.HYBRID: 7539.17,
        CarEngine.GAS: 9399.17,
    },
    CarCategory.LUXURY_CAR: {
        CarEngine.ELECTRIC: 13060.87,
        CarEngine.PLUGIN_HYBRID: 15433.43,
        CarEngine.HYBRID: 11478.78,
        CarEngine.GAS: 16252.59,
    },
    CarCategory.PICKUP: {
        CarEngine.ELECTRIC: 10440.29,
        CarEngine.HYBRID: 13034.54,
        CarEngine.GAS: 11915.5,
    },
    CarCategory.SUV: {
        CarEngine.ELECTRIC: 6432.82,
        CarEngine.PLUGIN_HYBRID: 7175.75,
        CarEngine.HYBRID: 7831.03,
        CarEngine.GAS: 9907.93,
    },
}


def car_cost_average_caa(category: CarCategory, engine: CarEngine) -> float:
    """Average annual cost of owning a car of this category and engine type."""
    category = CarCategory(category)
    engine = CarEngine(engine)
    cost = AVERAGE_ANNUAL_CAR_COST[category].get(engine)
    if cost is None:
        raise ValueError(f"No data available for {category.value} + {engine.value}")
    return cost
