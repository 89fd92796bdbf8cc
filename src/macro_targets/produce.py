from __future__ import annotations

from .constants import (
    FATBURNER_FRUIT_REDUCTION,
    FRUIT_CARBS_PERCENT_WEIGHT,
    FRUIT_MAX_CARB_PERCENT,
    VEGGIE_CARBS_PERCENT_WEIGHT,
    VEGGIE_MAX_CARB_PERCENT,
)
from .models import DayType
from .rounding import round_to_nearest_5


def calculate_fruit(carbs_g: float, target_g: float, day_type: DayType) -> int:
    """Fruit grams, capped so fruit supplies at most 30% of the day's carbs."""
    max_fruit = carbs_g * FRUIT_MAX_CARB_PERCENT / FRUIT_CARBS_PERCENT_WEIGHT
    if day_type == "fatburner":
        target_g *= FATBURNER_FRUIT_REDUCTION
    return round_to_nearest_5(min(target_g, max_fruit))


def calculate_veggies(carbs_g: float, target_g: float) -> int:
    """Vegetable grams, capped so vegetables supply at most 10% of the day's carbs."""
    max_veggies = carbs_g * VEGGIE_MAX_CARB_PERCENT / VEGGIE_CARBS_PERCENT_WEIGHT
    return round_to_nearest_5(min(target_g, max_veggies))
