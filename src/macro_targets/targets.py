from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from .constants import WATER_L_PER_KG
from .energy import (
    adjust_for_goal,
    calculate_bmr,
    calculate_exercise_calories,
    calculate_tdee,
    is_training_day,
)
from .macros import apply_day_type, protein_recommendation, split_macros
from .meals import calculate_meal_points, ratios_for_profile
from .models import DailyTargets, DayEntry, TrainingSession, UserProfile
from .produce import calculate_fruit, calculate_veggies
from .rounding import round_half_away, round_to_tenth

logger = logging.getLogger(__name__)


def calculate_water_l(weight_kg: float) -> float:
    return round_to_tenth(weight_kg * WATER_L_PER_KG)


def estimate_tdee(profile: UserProfile, weight_kg: float, sessions: Iterable[TrainingSession], on: date) -> int:
    """Rounded total daily energy expenditure before any goal adjustment."""
    bmr = calculate_bmr(profile, weight_kg, on)
    return round_half_away(calculate_tdee(bmr, calculate_exercise_calories(sessions, weight_kg)))


def compute_daily_targets(profile: UserProfile, entry: DayEntry, on: date) -> DailyTargets | None:
    """Daily calorie, macro and per-meal point targets for one day.

    ``on`` is the reference date used for the age calculation; callers pass
    today's date explicitly so that the result depends only on the arguments.
    Returns None when the entry has no usable body weight.
    """
    weight_kg = entry.weight_kg
    # NaN fails "> 0" as well, so it counts as missing.
    if weight_kg is None or not weight_kg > 0:
        logger.info("no targets: weight_kg=%r", weight_kg)
        return None

    bmr = calculate_bmr(profile, weight_kg, on)
    exercise_calories = calculate_exercise_calories(entry.sessions, weight_kg)
    tdee = calculate_tdee(bmr, exercise_calories)
    calorie_target = adjust_for_goal(tdee, profile.goal)
    logger.debug(
        "bmr=%.2f exercise=%.2f tdee=%.2f target=%.2f severity=%.3f",
        bmr,
        exercise_calories,
        tdee,
        calorie_target.target_calories,
        calorie_target.deficit_severity,
    )

    rec = protein_recommendation(profile.goal, is_training_day(entry.sessions), calorie_target.deficit_severity)
    base = split_macros(calorie_target.target_calories, weight_kg, rec)
    final = apply_day_type(base, entry.day_type, weight_kg, rec)
    logger.debug(
        "macros base=(%.2f, %.2f, %.2f) %s=(%.2f, %.2f, %.2f)",
        base.carbs_g,
        base.protein_g,
        base.fats_g,
        entry.day_type,
        final.carbs_g,
        final.protein_g,
        final.fats_g,
    )

    fruit_g = calculate_fruit(final.carbs_g, profile.fruit_target_g, entry.day_type)
    veggies_g = calculate_veggies(final.carbs_g, profile.veggie_target_g)
    meals = calculate_meal_points(
        final.carbs_g,
        final.protein_g,
        final.fats_g,
        fruit_g,
        veggies_g,
        ratios_for_profile(profile),
        profile.points_config,
        entry.day_type,
        profile.supplement_config,
    )

    return DailyTargets(
        total_carbs_g=round_half_away(final.carbs_g),
        total_protein_g=round_half_away(final.protein_g),
        total_fats_g=round_half_away(final.fats_g),
        total_calories=round_half_away(final.calories),
        estimated_tdee=round_half_away(tdee),
        meals=meals,
        fruit_g=fruit_g,
        veggies_g=veggies_g,
        water_l=calculate_water_l(weight_kg),
        day_type=entry.day_type,
    )
