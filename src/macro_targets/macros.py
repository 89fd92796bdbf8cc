from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    AGGRESSIVE_DEFICIT_SEVERITY,
    CALORIES_PER_GRAM_CARB,
    CALORIES_PER_GRAM_FAT,
    CALORIES_PER_GRAM_PROTEIN,
    FAT_CALORIES_PERCENT,
    FAT_MINIMUM_G_PER_KG,
)
from .models import DayType, Goal


@dataclass(frozen=True)
class ProteinRecommendation:
    min_g_per_kg: float
    optimal_g_per_kg: float


@dataclass(frozen=True)
class DayTypeMultipliers:
    carbs: float
    protein: float
    fats: float


@dataclass(frozen=True)
class MacroGrams:
    carbs_g: float
    protein_g: float
    fats_g: float

    @property
    def calories(self) -> float:
        return (
            self.carbs_g * CALORIES_PER_GRAM_CARB
            + self.protein_g * CALORIES_PER_GRAM_PROTEIN
            + self.fats_g * CALORIES_PER_GRAM_FAT
        )


# Keyed by (goal, training day, aggressive deficit). The deficit flag is only
# ever True under lose_weight, where the training flag is ignored.
PROTEIN_RECOMMENDATIONS: dict[tuple[Goal, bool, bool], ProteinRecommendation] = {
    ("lose_weight", False, True): ProteinRecommendation(2.0, 2.4),
    ("lose_weight", False, False): ProteinRecommendation(1.8, 2.2),
    ("gain_weight", True, False): ProteinRecommendation(1.6, 2.0),
    ("gain_weight", False, False): ProteinRecommendation(1.4, 1.8),
    ("maintain", True, False): ProteinRecommendation(1.4, 1.8),
    ("maintain", False, False): ProteinRecommendation(1.2, 1.6),
}

DAY_TYPE_MULTIPLIERS: dict[DayType, DayTypeMultipliers] = {
    "fatburner": DayTypeMultipliers(carbs=0.60, protein=1.00, fats=0.85),
    "performance": DayTypeMultipliers(carbs=1.30, protein=1.00, fats=1.00),
    "metabolize": DayTypeMultipliers(carbs=1.50, protein=1.00, fats=1.10),
}


def protein_recommendation(goal: Goal, training_day: bool, deficit_severity: float) -> ProteinRecommendation:
    if goal == "lose_weight":
        return PROTEIN_RECOMMENDATIONS[(goal, False, deficit_severity > AGGRESSIVE_DEFICIT_SEVERITY)]
    return PROTEIN_RECOMMENDATIONS[(goal, training_day, False)]


def fat_minimum_g(weight_kg: float) -> float:
    return weight_kg * FAT_MINIMUM_G_PER_KG


def split_macros(target_calories: float, weight_kg: float, rec: ProteinRecommendation) -> MacroGrams:
    """Protein first, then 35% of the remainder to fat (floored), rest to carbs."""
    protein_g = weight_kg * rec.optimal_g_per_kg
    protein_calories = protein_g * CALORIES_PER_GRAM_PROTEIN

    fat_calories_target = (target_calories - protein_calories) * FAT_CALORIES_PERCENT
    fats_g = max(fat_calories_target / CALORIES_PER_GRAM_FAT, fat_minimum_g(weight_kg))

    carb_calories = max(target_calories - protein_calories - fats_g * CALORIES_PER_GRAM_FAT, 0.0)
    return MacroGrams(
        carbs_g=carb_calories / CALORIES_PER_GRAM_CARB,
        protein_g=protein_g,
        fats_g=fats_g,
    )


def apply_day_type(macros: MacroGrams, day_type: DayType, weight_kg: float, rec: ProteinRecommendation) -> MacroGrams:
    """Scale by the day-type triple, then put the protein and fat floors back."""
    mult = DAY_TYPE_MULTIPLIERS[day_type]
    return MacroGrams(
        carbs_g=macros.carbs_g * mult.carbs,
        protein_g=max(macros.protein_g * mult.protein, weight_kg * rec.min_g_per_kg),
        fats_g=max(macros.fats_g * mult.fats, fat_minimum_g(weight_kg)),
    )
