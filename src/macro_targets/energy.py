from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .constants import (
    MAX_DEFICIT_KCAL,
    MAX_DEFICIT_PERCENT,
    MAX_SURPLUS_KCAL,
    MAX_SURPLUS_PERCENT,
    NEAT_MULTIPLIER,
)
from .models import Goal, Sex, TrainingSession, TrainingType, UserProfile

# MET values from the 2024 Compendium of Physical Activities.
TRAINING_MET: dict[TrainingType, float] = {
    "rest": 1.0,
    "qigong": 2.5,
    "walking": 3.5,
    "gmb": 4.0,
    "run": 9.8,
    "row": 7.0,
    "cycle": 6.8,
    "hiit": 12.8,
    "strength": 5.0,
    "calisthenics": 4.0,
    "mobility": 2.5,
    "mixed": 6.0,
}


@dataclass(frozen=True)
class CalorieTarget:
    tdee: float
    target_calories: float
    deficit_severity: float


def calculate_age(birth_date: date, on: date) -> int:
    """Whole years between ``birth_date`` and the reference date ``on``."""
    age = on.year - birth_date.year
    if (on.month, on.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def mifflin_st_jeor(sex: Sex, weight_kg: float, height_cm: float, age: int) -> float:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex == "male":
        return base + 5
    return base - 161


def katch_mcardle(weight_kg: float, body_fat_percent: float) -> float:
    lean_mass_kg = weight_kg * (1 - body_fat_percent / 100)
    return 370 + 21.6 * lean_mass_kg


def oxford_henry(sex: Sex, weight_kg: float, age: int) -> float:
    if sex == "male":
        if age < 30:
            return 14.4 * weight_kg + 313
        return 11.4 * weight_kg + 541
    if age < 30:
        return 10.4 * weight_kg + 615
    if age < 60:
        return 8.18 * weight_kg + 502
    return 8.52 * weight_kg + 421


def harris_benedict(sex: Sex, weight_kg: float, height_cm: float, age: int) -> float:
    if sex == "male":
        return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
    return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age


def calculate_bmr(profile: UserProfile, weight_kg: float, on: date) -> float:
    """Basal metabolic rate using the profile's configured equation."""
    age = calculate_age(profile.birth_date, on)
    equation = profile.bmr_equation
    if equation == "katch_mcardle" and profile.body_fat_percent > 0:
        return katch_mcardle(weight_kg, profile.body_fat_percent)
    if equation == "oxford_henry":
        return oxford_henry(profile.sex, weight_kg, age)
    if equation == "harris_benedict":
        return harris_benedict(profile.sex, weight_kg, profile.height_cm, age)
    # Katch-McArdle without a body fat reading falls back here too.
    return mifflin_st_jeor(profile.sex, weight_kg, profile.height_cm, age)


def calculate_session_calories(session: TrainingSession, weight_kg: float) -> float:
    """Calories above resting for one session: (MET - 1) x kg x hours."""
    net_met = max(TRAINING_MET[session.type] - 1.0, 0.0)
    return net_met * weight_kg * (session.duration_min / 60.0)


def calculate_exercise_calories(sessions: Iterable[TrainingSession], weight_kg: float) -> float:
    total = 0.0
    for session in sessions:
        total += calculate_session_calories(session, weight_kg)
    return total


def is_training_day(sessions: Iterable[TrainingSession]) -> bool:
    return any(session.type != "rest" for session in sessions)


def calculate_tdee(bmr: float, exercise_calories: float) -> float:
    return bmr * NEAT_MULTIPLIER + exercise_calories


def adjust_for_goal(tdee: float, goal: Goal) -> CalorieTarget:
    if goal == "lose_weight":
        deficit = min(tdee * MAX_DEFICIT_PERCENT, MAX_DEFICIT_KCAL)
        # A zero TDEE has no deficit to speak of; severity stays at 0.
        severity = deficit / tdee if tdee else 0.0
        return CalorieTarget(tdee=tdee, target_calories=tdee - deficit, deficit_severity=severity)
    if goal == "gain_weight":
        surplus = min(tdee * MAX_SURPLUS_PERCENT, MAX_SURPLUS_KCAL)
        return CalorieTarget(tdee=tdee, target_calories=tdee + surplus, deficit_severity=0.0)
    return CalorieTarget(tdee=tdee, target_calories=tdee, deficit_severity=0.0)
