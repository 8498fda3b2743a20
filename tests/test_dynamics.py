"""Tests for the secondary dynamic limits."""

import pytest

from ev_engine.core.dynamics import DynamicsResult, vehicle_dynamics


def _sample_dynamics(**overrides) -> DynamicsResult:
    """Dynamics for the reference car (1575 kg total)."""
    params = dict(
        mass=1575.0,
        tire_radius=0.32,
        drag_coefficient=0.28,
        frontal_area=2.3,
        top_speed=180.0,
        accel_0_to_100=8.5,
        required_power=163,
    )
    params.update(overrides)
    return vehicle_dynamics(**params)


def test_reference_car_values() -> None:
    """The reference car reproduces the hand-computed limits."""
    result = _sample_dynamics()
    assert result.max_theoretical_speed == 64
    assert result.braking_distance == 48
    assert result.cornering_speed == 71
    assert result.power_to_weight == 103
    assert result.acceleration_ms2 == pytest.approx(3.27)


def test_power_to_weight_zero_without_power() -> None:
    """Without a motor rating the power-to-weight echo is 0."""
    assert _sample_dynamics(required_power=None).power_to_weight == 0


def test_drag_limited_speed_ignores_top_speed() -> None:
    """The drag-limited ceiling does not depend on the configured top speed."""
    assert (
        _sample_dynamics(top_speed=120.0).max_theoretical_speed
        == _sample_dynamics(top_speed=260.0).max_theoretical_speed
    )


def test_lower_drag_raises_ceiling() -> None:
    """A slipperier body raises the drag-limited speed."""
    assert (
        _sample_dynamics(drag_coefficient=0.20).max_theoretical_speed
        > _sample_dynamics(drag_coefficient=0.35).max_theoretical_speed
    )


def test_braking_and_cornering_are_fixed() -> None:
    """Braking and cornering use fixed deceleration / lateral limits."""
    light = _sample_dynamics(mass=900.0)
    heavy = _sample_dynamics(mass=2800.0)
    assert light.braking_distance == heavy.braking_distance
    assert light.cornering_speed == heavy.cornering_speed
