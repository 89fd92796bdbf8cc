from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, get_args

Sex = Literal["male", "female"]
Goal = Literal["lose_weight", "maintain", "gain_weight"]
DayType = Literal["performance", "fatburner", "metabolize"]
TrainingType = Literal[
    "rest",
    "qigong",
    "walking",
    "gmb",
    "run",
    "row",
    "cycle",
    "hiit",
    "strength",
    "calisthenics",
    "mobility",
    "mixed",
]
BMREquation = Literal["mifflin_st_jeor", "katch_mcardle", "oxford_henry", "harris_benedict"]
FastingProtocol = Literal["standard", "16_8", "20_4"]


def _check_choice(name: str, value: str, alias) -> None:
    choices = get_args(alias)
    if value not in choices:
        raise ValueError(f"{name} must be one of: {', '.join(choices)}")


@dataclass(frozen=True)
class MealRatios:
    breakfast: float
    lunch: float
    dinner: float


@dataclass(frozen=True)
class PointsConfig:
    """Grams-to-points multipliers per macro."""

    carb_multiplier: float
    protein_multiplier: float
    fat_multiplier: float


@dataclass(frozen=True)
class SupplementConfig:
    maltodextrin_g: float = 0.0
    whey_g: float = 0.0
    collagen_g: float = 0.0


@dataclass(frozen=True)
class UserProfile:
    """Physiological profile and meal preferences; read-only to the engine."""

    sex: Sex
    birth_date: date
    height_cm: float
    goal: Goal
    meal_ratios: MealRatios
    points_config: PointsConfig
    supplement_config: SupplementConfig = field(default_factory=SupplementConfig)
    fruit_target_g: float = 600.0
    veggie_target_g: float = 500.0
    effective_meal_ratios: MealRatios | None = None
    bmr_equation: BMREquation = "mifflin_st_jeor"
    body_fat_percent: float = 0.0

    def __post_init__(self) -> None:
        _check_choice("sex", self.sex, Sex)
        _check_choice("goal", self.goal, Goal)
        _check_choice("bmr_equation", self.bmr_equation, BMREquation)


@dataclass(frozen=True)
class TrainingSession:
    type: TrainingType
    duration_min: float

    def __post_init__(self) -> None:
        _check_choice("type", self.type, TrainingType)
        if self.duration_min < 0:
            raise ValueError("duration_min must not be negative")


@dataclass(frozen=True)
class DayEntry:
    """One calendar day's input. A missing or non-positive weight yields no targets."""

    weight_kg: float | None
    day_type: DayType
    sessions: tuple[TrainingSession, ...] = ()

    def __post_init__(self) -> None:
        _check_choice("day_type", self.day_type, DayType)
        # Accept any iterable of sessions but store an immutable tuple.
        object.__setattr__(self, "sessions", tuple(self.sessions))


@dataclass(frozen=True)
class MacroPoints:
    carbs: int
    protein: int
    fats: int


@dataclass(frozen=True)
class MealTargets:
    breakfast: MacroPoints
    lunch: MacroPoints
    dinner: MacroPoints


@dataclass(frozen=True)
class DailyTargets:
    total_carbs_g: int
    total_protein_g: int
    total_fats_g: int
    total_calories: int
    estimated_tdee: int
    meals: MealTargets
    fruit_g: int
    veggies_g: int
    water_l: float
    day_type: DayType
