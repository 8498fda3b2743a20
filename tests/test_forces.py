"""Tests for the road-load force model."""

import math

import pytest

from ev_engine.core.constants import CONSTANTS, TerrainType
from ev_engine.core.forces import (
    acceleration_force,
    aerodynamic_drag,
    force_breakdown,
    grade_resistance,
    rolling_resistance,
    tractive_force,
)

_MASS: float = 1575.0
_CD: float = 0.28
_AREA: float = 2.3


def test_flat_road_components() -> None:
    """On a flat road the components follow the textbook formulas."""
    parts = force_breakdown(_MASS, 25.0, 1.5, _CD, _AREA, "mixed")
    assert parts.rolling_resistance == pytest.approx(0.010 * _MASS * 9.81)
    assert parts.aerodynamic_drag == pytest.approx(0.5 * 1.225 * _CD * _AREA * 625.0)
    assert parts.acceleration_force == pytest.approx(_MASS * 1.5)
    assert parts.grade_resistance == 0.0


def test_tractive_force_is_sum_of_components() -> None:
    """Tractive force must equal the sum of the four contributions."""
    parts = force_breakdown(_MASS, 20.0, 0.8, _CD, _AREA, "urban", grade=4.0)
    expected = (
        parts.rolling_resistance
        + parts.aerodynamic_drag
        + parts.acceleration_force
        + parts.grade_resistance
    )
    result = tractive_force(_MASS, 20.0, 0.8, _CD, _AREA, "urban", grade=4.0)
    assert result == expected
    assert parts.total == expected


def test_components_non_negative_on_flat_road() -> None:
    """All components are >= 0 for non-negative speed and acceleration."""
    for speed in (0.0, 5.0, 30.0, 70.0):
        for accel in (0.0, 0.5, 4.0):
            parts = force_breakdown(_MASS, speed, accel, _CD, _AREA, "offroad")
            assert parts.rolling_resistance >= 0.0
            assert parts.aerodynamic_drag >= 0.0
            assert parts.acceleration_force >= 0.0
            assert parts.grade_resistance >= 0.0
            assert parts.total >= 0.0


def test_grade_splits_weight_between_rolling_and_climbing() -> None:
    """A grade reduces the normal force and adds a climbing term."""
    grade = 10.0
    angle = math.atan(grade / 100.0)
    assert rolling_resistance(_MASS, "highway", grade) == pytest.approx(
        0.008 * _MASS * 9.81 * math.cos(angle)
    )
    assert grade_resistance(_MASS, grade) == pytest.approx(
        _MASS * 9.81 * math.sin(angle)
    )
    assert grade_resistance(_MASS, -grade) < 0.0


def test_drag_is_even_in_speed() -> None:
    """Negative speed gives the same (positive) drag as positive speed."""
    assert aerodynamic_drag(-30.0, _CD, _AREA) == aerodynamic_drag(30.0, _CD, _AREA)


def test_drag_increases_with_drag_coefficient() -> None:
    """A higher Cd strictly increases drag at non-zero speed."""
    low = aerodynamic_drag(30.0, 0.25, _AREA)
    high = aerodynamic_drag(30.0, 0.30, _AREA)
    assert high > low


def test_unknown_terrain_falls_back_to_mixed() -> None:
    """Unrecognised terrain strings use the mixed coefficient."""
    mixed = tractive_force(_MASS, 15.0, 0.0, _CD, _AREA, "mixed")
    unknown = tractive_force(_MASS, 15.0, 0.0, _CD, _AREA, "moon-dust")
    assert unknown == mixed


def test_crr_table_values() -> None:
    """Terrain coefficients match the constant table."""
    assert CONSTANTS.crr(TerrainType.URBAN) == 0.012
    assert CONSTANTS.crr("highway") == 0.008
    assert CONSTANTS.crr("mixed") == 0.010
    assert CONSTANTS.crr("offroad") == 0.025
    assert CONSTANTS.crr(None) == 0.010


def test_acceleration_force() -> None:
    """Inertial force is mass times acceleration."""
    assert acceleration_force(1000.0, 2.0) == 2000.0


def test_default_grade_is_flat() -> None:
    """Omitting the grade is the same as passing 0 %."""
    assert tractive_force(_MASS, 10.0, 0.0, _CD, _AREA) == tractive_force(
        _MASS, 10.0, 0.0, _CD, _AREA, "mixed", 0.0
    )
