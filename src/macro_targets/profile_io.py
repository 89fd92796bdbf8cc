from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from .meals import effective_meal_ratios_for
from .models import (
    DayEntry,
    MealRatios,
    PointsConfig,
    SupplementConfig,
    TrainingSession,
    UserProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_MEAL_RATIOS = MealRatios(breakfast=0.30, lunch=0.30, dinner=0.40)
DEFAULT_POINTS_CONFIG = PointsConfig(carb_multiplier=1.15, protein_multiplier=4.35, fat_multiplier=3.5)
DEFAULT_FRUIT_TARGET_G = 600.0
DEFAULT_VEGGIE_TARGET_G = 500.0


class ProfileError(ValueError):
    """Raised when a profile or day entry document cannot be read."""


def _get(data: dict[str, Any], *keys: str) -> Any:
    # Documents from the web client use camelCase, the server uses snake_case.
    for key in keys:
        if key in data:
            return data[key]
    return None


def _to_float(value: Any, name: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ProfileError(f"{name} must be a number, got {value!r}") from None


def _require(data: dict[str, Any], name: str, *keys: str) -> Any:
    value = _get(data, *keys)
    if value is None:
        raise ProfileError(f"missing required field: {name}")
    return value


def _parse_date(value: Any, name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ProfileError(f"{name} must be an ISO date (YYYY-MM-DD), got {value!r}") from None


def _section(data: dict[str, Any], *keys: str) -> dict[str, Any] | None:
    value = _get(data, *keys)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ProfileError(f"{keys[0]} must be an object")
    return value


def _meal_ratios(data: dict[str, Any] | None, default: MealRatios | None) -> MealRatios | None:
    if data is None:
        return default
    values = [_to_float(data.get(meal), meal) or 0.0 for meal in ("breakfast", "lunch", "dinner")]
    # All-zero ratios mean "not configured", matching the server's defaults.
    if default is not None and not any(values):
        return default
    return MealRatios(*values)


def _points_config(data: dict[str, Any] | None) -> PointsConfig:
    if data is None:
        return DEFAULT_POINTS_CONFIG
    carb = _to_float(_get(data, "carbMultiplier", "carb_multiplier"), "carb_multiplier")
    protein = _to_float(_get(data, "proteinMultiplier", "protein_multiplier"), "protein_multiplier")
    fat = _to_float(_get(data, "fatMultiplier", "fat_multiplier"), "fat_multiplier")
    return PointsConfig(
        carb_multiplier=carb or DEFAULT_POINTS_CONFIG.carb_multiplier,
        protein_multiplier=protein or DEFAULT_POINTS_CONFIG.protein_multiplier,
        fat_multiplier=fat or DEFAULT_POINTS_CONFIG.fat_multiplier,
    )


def _supplement_config(data: dict[str, Any] | None) -> SupplementConfig:
    if data is None:
        return SupplementConfig()
    return SupplementConfig(
        maltodextrin_g=_to_float(_get(data, "maltodextrinG", "maltodextrin_g"), "maltodextrin_g") or 0.0,
        whey_g=_to_float(_get(data, "wheyG", "whey_g"), "whey_g") or 0.0,
        collagen_g=_to_float(_get(data, "collagenG", "collagen_g"), "collagen_g") or 0.0,
    )


def profile_from_dict(data: dict[str, Any]) -> UserProfile:
    """Build a UserProfile, filling unset fields with the server's defaults.

    A ``fastingProtocol`` other than ``standard`` derives the effective meal
    ratios unless the document already carries an explicit override.
    """
    if not isinstance(data, dict):
        raise ProfileError("profile document must be a JSON object")

    meal_ratios = _meal_ratios(_section(data, "mealRatios", "meal_ratios"), DEFAULT_MEAL_RATIOS)
    effective = _meal_ratios(_section(data, "effectiveMealRatios", "effective_meal_ratios"), None)
    protocol = _get(data, "fastingProtocol", "fasting_protocol")
    if effective is None and protocol not in (None, "", "standard"):
        try:
            effective = effective_meal_ratios_for(protocol, meal_ratios)
        except ValueError as exc:
            raise ProfileError(str(exc)) from exc

    height = _to_float(_require(data, "height_cm", "heightCm", "height_cm"), "height_cm")
    fruit = _to_float(_get(data, "fruitTargetG", "fruit_target_g"), "fruit_target_g")
    veggies = _to_float(_get(data, "veggieTargetG", "veggie_target_g"), "veggie_target_g")
    body_fat = _to_float(_get(data, "bodyFatPercent", "body_fat_percent"), "body_fat_percent")

    try:
        return UserProfile(
            sex=_require(data, "sex", "sex"),
            birth_date=_parse_date(_require(data, "birth_date", "birthDate", "birth_date"), "birth_date"),
            height_cm=height,
            goal=_require(data, "goal", "goal"),
            meal_ratios=meal_ratios,
            points_config=_points_config(_section(data, "pointsConfig", "points_config")),
            supplement_config=_supplement_config(_section(data, "supplementConfig", "supplement_config")),
            fruit_target_g=fruit or DEFAULT_FRUIT_TARGET_G,
            veggie_target_g=veggies or DEFAULT_VEGGIE_TARGET_G,
            effective_meal_ratios=effective,
            bmr_equation=_get(data, "bmrEquation", "bmr_equation") or "mifflin_st_jeor",
            body_fat_percent=body_fat or 0.0,
        )
    except ValueError as exc:
        raise ProfileError(str(exc)) from exc


def session_from_dict(data: dict[str, Any]) -> TrainingSession:
    if not isinstance(data, dict):
        raise ProfileError("training session must be a JSON object")
    duration = _to_float(_require(data, "duration_min", "durationMin", "duration_min"), "duration_min")
    try:
        return TrainingSession(type=_require(data, "type", "type"), duration_min=duration)
    except ValueError as exc:
        raise ProfileError(str(exc)) from exc


def parse_session(text: str) -> TrainingSession:
    """Parse a ``type:minutes`` pair such as ``strength:60``."""
    kind, sep, minutes = text.partition(":")
    if not sep:
        raise ProfileError(f"session must look like TYPE:MINUTES, got {text!r}")
    return session_from_dict({"type": kind.strip().lower(), "duration_min": minutes.strip()})


def day_entry_from_dict(data: dict[str, Any]) -> DayEntry:
    if not isinstance(data, dict):
        raise ProfileError("day entry document must be a JSON object")
    sessions = _get(data, "plannedTrainingSessions", "sessions") or []
    if not isinstance(sessions, list):
        raise ProfileError("sessions must be a list")
    try:
        return DayEntry(
            weight_kg=_to_float(_get(data, "weightKg", "weight_kg"), "weight_kg"),
            day_type=_require(data, "day_type", "dayType", "day_type"),
            sessions=tuple(session_from_dict(s) for s in sessions),
        )
    except ProfileError:
        raise
    except ValueError as exc:
        raise ProfileError(str(exc)) from exc


def load_profile(path: Path) -> UserProfile:
    logger.debug("loading profile from %s", path)
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ProfileError(f"{path}: invalid JSON ({exc.msg})") from exc
    return profile_from_dict(data)
