"""Tests for the power-curve generator."""

from ev_engine.core.power_curve import PowerCurve, power_curve


def _sample_curve(top_speed: float = 200.0, terrain_type: str = "mixed") -> PowerCurve:
    """Power curve for the reference car (1575 kg total)."""
    return power_curve(
        mass=1575.0,
        drag_coefficient=0.28,
        frontal_area=2.3,
        terrain_type=terrain_type,
        top_speed=top_speed,
    )


def test_samples_every_ten_kmh_up_to_top_speed() -> None:
    """A 200 km/h top speed gives 20 samples from 10 to 200 km/h."""
    points = list(_sample_curve())
    assert [p.speed for p in points] == list(range(10, 201, 10))
    assert len(points) == 20
    assert len(_sample_curve()) == 20


def test_non_multiple_top_speed_stops_below() -> None:
    """The last sample never exceeds the top speed."""
    points = list(_sample_curve(top_speed=185.0))
    assert points[-1].speed == 180


def test_power_non_negative_and_increasing() -> None:
    """Steady-state power is non-negative and grows with speed."""
    powers = [p.power for p in _sample_curve()]
    assert all(p >= 0 for p in powers)
    assert powers == sorted(powers)


def test_efficiency_step() -> None:
    """Low-speed efficiency applies below 50 km/h, average from 50 up."""
    by_speed = {p.speed: p.efficiency for p in _sample_curve()}
    assert by_speed[40] == 75
    assert by_speed[50] == 85
    assert by_speed[200] == 85


def test_reference_samples() -> None:
    """First samples match the hand-computed road load."""
    first = next(iter(_sample_curve()))
    assert first.speed == 10
    assert first.force == 158
    assert first.power == 0


def test_curve_is_restartable() -> None:
    """Iterating twice yields identical sequences."""
    curve = _sample_curve()
    assert list(curve) == list(curve)


def test_unknown_terrain_matches_mixed() -> None:
    """Unknown terrain falls back to mixed."""
    assert list(_sample_curve(terrain_type="ice")) == list(_sample_curve())


def test_to_frame() -> None:
    """The DataFrame has one row per sample and the expected columns."""
    frame = _sample_curve(top_speed=100.0).to_frame()
    assert list(frame.columns) == ["speed", "power", "efficiency", "force"]
    assert len(frame) == 10
    assert frame["speed"].iloc[-1] == 100
