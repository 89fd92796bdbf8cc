import itertools

import pytest

from macro_targets.macros import (
    DAY_TYPE_MULTIPLIERS,
    MacroGrams,
    apply_day_type,
    fat_minimum_g,
    protein_recommendation,
    split_macros,
)


@pytest.mark.parametrize(
    ("goal", "training_day", "severity", "expected"),
    [
        ("lose_weight", False, 0.30, (2.0, 2.4)),
        ("lose_weight", True, 0.30, (2.0, 2.4)),
        ("lose_weight", True, 0.20, (1.8, 2.2)),
        ("lose_weight", False, 0.25, (1.8, 2.2)),
        ("gain_weight", True, 0.0, (1.6, 2.0)),
        ("gain_weight", False, 0.0, (1.4, 1.8)),
        ("maintain", True, 0.0, (1.4, 1.8)),
        ("maintain", False, 0.0, (1.2, 1.6)),
    ],
)
def test_protein_recommendation(goal: str, training_day: bool, severity: float, expected: tuple[float, float]) -> None:
    rec = protein_recommendation(goal, training_day, severity)
    assert (rec.min_g_per_kg, rec.optimal_g_per_kg) == expected


def test_split_macros_fat_above_floor() -> None:
    rec = protein_recommendation("maintain", False, 0.0)
    macros = split_macros(2136.0, 85, rec)
    assert macros.protein_g == pytest.approx(136.0)
    assert macros.fats_g == pytest.approx(557.2 / 9)
    assert macros.carbs_g == pytest.approx(258.7)
    assert macros.calories == pytest.approx(2136.0)


def test_split_macros_fat_floor_applies() -> None:
    rec = protein_recommendation("lose_weight", True, 0.2)
    macros = split_macros(1916.8, 80, rec)
    assert macros.protein_g == pytest.approx(176.0)
    assert macros.fats_g == pytest.approx(56.0)
    assert macros.carbs_g == pytest.approx(177.2)


def test_split_macros_carbs_never_negative() -> None:
    rec = protein_recommendation("lose_weight", False, 0.3)
    macros = split_macros(500.0, 100, rec)
    assert macros.carbs_g == 0.0
    assert macros.fats_g == pytest.approx(70.0)


def test_day_type_multiplier_table() -> None:
    assert DAY_TYPE_MULTIPLIERS["fatburner"].carbs == 0.60
    assert DAY_TYPE_MULTIPLIERS["performance"].carbs == 1.30
    assert DAY_TYPE_MULTIPLIERS["metabolize"].fats == 1.10
    assert all(m.protein == 1.00 for m in DAY_TYPE_MULTIPLIERS.values())


def test_apply_day_type_carb_ratio() -> None:
    rec = protein_recommendation("maintain", False, 0.0)
    base = MacroGrams(carbs_g=250.0, protein_g=128.0, fats_g=70.0)
    performance = apply_day_type(base, "performance", 80, rec)
    fatburner = apply_day_type(base, "fatburner", 80, rec)
    assert performance.carbs_g / fatburner.carbs_g == pytest.approx(1.30 / 0.60)


def test_apply_day_type_restores_floors() -> None:
    rec = protein_recommendation("maintain", False, 0.0)
    base = MacroGrams(carbs_g=100.0, protein_g=50.0, fats_g=40.0)
    result = apply_day_type(base, "fatburner", 80, rec)
    assert result.protein_g == pytest.approx(80 * 1.2)
    assert result.fats_g == pytest.approx(fat_minimum_g(80))
    assert result.carbs_g == pytest.approx(60.0)


@pytest.mark.parametrize(
    ("goal", "day_type", "weight_kg"),
    list(itertools.product(["lose_weight", "maintain", "gain_weight"], list(DAY_TYPE_MULTIPLIERS), [45.0, 80.0, 140.0])),
)
def test_fat_floor_after_day_type(goal: str, day_type: str, weight_kg: float) -> None:
    rec = protein_recommendation(goal, True, 0.2)
    for target_calories in (800.0, 2000.0, 4000.0):
        macros = apply_day_type(split_macros(target_calories, weight_kg, rec), day_type, weight_kg, rec)
        assert macros.fats_g >= fat_minimum_g(weight_kg)
        assert macros.protein_g >= weight_kg * rec.min_g_per_kg
        assert macros.carbs_g >= 0
