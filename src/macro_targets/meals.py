from __future__ import annotations

from .constants import (
    COLLAGEN_PROTEIN_PERCENT,
    FRUIT_CARBS_PERCENT_WEIGHT,
    MALTODEXTRIN_CARB_PERCENT,
    VEGGIE_CARBS_PERCENT_WEIGHT,
    WHEY_PROTEIN_PERCENT,
)
from .models import (
    DayType,
    FastingProtocol,
    MacroPoints,
    MealRatios,
    MealTargets,
    PointsConfig,
    SupplementConfig,
    UserProfile,
)
from .rounding import round_to_nearest_5


def effective_meal_ratios_for(protocol: FastingProtocol, ratios: MealRatios) -> MealRatios:
    """Meal ratios after a fasting protocol moves skipped meals into the eating window."""
    if protocol == "16_8":
        return MealRatios(breakfast=0.0, lunch=0.5, dinner=0.5)
    if protocol == "20_4":
        return MealRatios(breakfast=0.0, lunch=0.0, dinner=1.0)
    if protocol == "standard":
        return ratios
    raise ValueError("fasting protocol must be one of: standard, 16_8, 20_4")


def ratios_for_profile(profile: UserProfile) -> MealRatios:
    if profile.effective_meal_ratios is not None:
        return profile.effective_meal_ratios
    return profile.meal_ratios


def available_carbs_g(
    carbs_g: float,
    fruit_g: float,
    veggies_g: float,
    day_type: DayType,
    supplements: SupplementConfig,
) -> float:
    available = carbs_g - veggies_g * VEGGIE_CARBS_PERCENT_WEIGHT - fruit_g * FRUIT_CARBS_PERCENT_WEIGHT
    # Intra-workout maltodextrin is only taken on performance days.
    if day_type == "performance":
        available -= supplements.maltodextrin_g * MALTODEXTRIN_CARB_PERCENT
    return max(available, 0.0)


def available_protein_g(protein_g: float, day_type: DayType, supplements: SupplementConfig) -> float:
    available = protein_g - supplements.collagen_g * COLLAGEN_PROTEIN_PERCENT
    if day_type == "performance":
        available -= supplements.whey_g * WHEY_PROTEIN_PERCENT
    return max(available, 0.0)


def _meal_points(carbs_g: float, protein_g: float, fats_g: float, points: PointsConfig, ratio: float) -> MacroPoints:
    return MacroPoints(
        carbs=round_to_nearest_5(carbs_g * points.carb_multiplier * ratio),
        protein=round_to_nearest_5(protein_g * points.protein_multiplier * ratio),
        fats=round_to_nearest_5(fats_g * points.fat_multiplier * ratio),
    )


def calculate_meal_points(
    carbs_g: float,
    protein_g: float,
    fats_g: float,
    fruit_g: float,
    veggies_g: float,
    ratios: MealRatios,
    points: PointsConfig,
    day_type: DayType,
    supplements: SupplementConfig,
) -> MealTargets:
    """Split the day's macros into per-meal points.

    Carbs already covered by fruit, vegetables and (on performance days)
    maltodextrin are removed first, as is protein covered by collagen and
    (on performance days) whey. Fats are distributed as-is.
    """
    carbs = available_carbs_g(carbs_g, fruit_g, veggies_g, day_type, supplements)
    protein = available_protein_g(protein_g, day_type, supplements)
    return MealTargets(
        breakfast=_meal_points(carbs, protein, fats_g, points, ratios.breakfast),
        lunch=_meal_points(carbs, protein, fats_g, points, ratios.lunch),
        dinner=_meal_points(carbs, protein, fats_g, points, ratios.dinner),
    )
