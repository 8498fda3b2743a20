"""Tests for the full vehicle analysis and the comparison helpers."""

import math

import pytest

from ev_engine.core.analysis import analyse_vehicle, vehicle_power_curve
from ev_engine.core.comparison import (
    compare_vehicles,
    comparison_frame,
    normalise_metric,
    radar_scores,
    weighted_radar_frame,
)
from ev_engine.core.vehicle import VehicleSpec


def _sample_spec(**overrides) -> VehicleSpec:
    """The reference car: 1500 kg + 75 kg, 180 km/h, 8.5 s, 400 km."""
    return VehicleSpec(**overrides)


def test_reference_scenario() -> None:
    """End-to-end figures for the reference car."""
    result = analyse_vehicle(_sample_spec())
    assert result.total_weight == 1575.0
    assert result.motor_power.required_power == 163
    assert result.motor_power.required_torque == 104
    assert result.energy_consumption.battery_capacity == pytest.approx(2.5)
    assert result.energy_consumption.consumption_wh_km == 6
    assert result.vehicle_dynamics.power_to_weight == 103
    assert result.feasibility.power_to_weight == 103
    assert result.feasibility.range_efficiency == pytest.approx(160.0)
    assert result.feasibility.score == 100
    assert result.feasibility.rating == "Excellent"


def test_analysis_is_deterministic() -> None:
    """Repeated analysis returns equal results."""
    assert analyse_vehicle(_sample_spec()) == analyse_vehicle(_sample_spec())


def test_slow_vehicle_flagged() -> None:
    """A 15 s sprint is reported as slow."""
    result = analyse_vehicle(_sample_spec(acceleration_0_to_100=15.0))
    assert "Slow acceleration may not meet market expectations" in (
        result.feasibility.issues
    )
    assert result.feasibility.score <= 90


def test_terrain_fallback_end_to_end() -> None:
    """An unknown terrain string analyses exactly like mixed."""
    assert analyse_vehicle(_sample_spec(terrain_type="gravel?")) == analyse_vehicle(
        _sample_spec(terrain_type="mixed")
    )


def test_all_outputs_finite_across_domain() -> None:
    """Every numeric output is finite for a sweep of valid specs."""
    for mass in (300.0, 1500.0, 4000.0):
        for top in (40.0, 180.0, 320.0):
            for accel in (2.0, 30.0):
                for terrain in ("urban", "highway", "mixed", "offroad"):
                    result = analyse_vehicle(
                        _sample_spec(
                            mass=mass,
                            top_speed=top,
                            acceleration_0_to_100=accel,
                            terrain_type=terrain,
                            range_km=1.0,
                            additional_weight=0.0,
                        )
                    )
                    data = result.to_dict()
                    for section in data.values():
                        if not isinstance(section, dict):
                            assert math.isfinite(section)
                            continue
                        for value in section.values():
                            if isinstance(value, (int, float)):
                                assert math.isfinite(value)


def test_vehicle_power_curve_uses_spec() -> None:
    """A vehicle's power curve runs up to its top speed."""
    curve = list(vehicle_power_curve(_sample_spec(top_speed=120.0)))
    assert curve[-1].speed == 120


def test_to_dict_sections() -> None:
    """Export layout has the five result sections."""
    data = analyse_vehicle(_sample_spec()).to_dict()
    assert set(data) == {
        "totalWeight",
        "motorPower",
        "energyConsumption",
        "vehicleDynamics",
        "feasibilityAnalysis",
    }
    assert data["feasibilityAnalysis"]["issues"] == []


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def _fleet() -> list[VehicleSpec]:
    return [
        _sample_spec(name="City Car", mass=1200.0, top_speed=150.0, range_km=300.0),
        _sample_spec(
            name="Sport Car",
            mass=1800.0,
            top_speed=250.0,
            acceleration_0_to_100=4.5,
            drag_coefficient=0.25,
        ),
    ]


def test_compare_vehicles_rows() -> None:
    """One row per vehicle, carrying engine outputs and raw specs."""
    rows = compare_vehicles(_fleet())
    assert [row.name for row in rows] == ["City Car", "Sport Car"]
    assert rows[1].power > rows[0].power
    assert rows[0].weight == 1275.0
    assert rows[1].acceleration == 4.5


def test_comparison_limits() -> None:
    """Between one and four vehicles may be compared."""
    with pytest.raises(ValueError, match="At least one vehicle"):
        compare_vehicles([])
    with pytest.raises(ValueError, match="At most 4 vehicles"):
        compare_vehicles([_sample_spec()] * 5)


def test_comparison_frame_index() -> None:
    """The frame is indexed by vehicle name."""
    frame = comparison_frame(_fleet())
    assert list(frame.index) == ["City Car", "Sport Car"]
    assert "feasibility" in frame.columns


def test_radar_scores_capped() -> None:
    """Radar scores are capped at 100."""
    for scores in radar_scores(_fleet()):
        for value in (
            scores.power,
            scores.efficiency,
            scores.range,
            scores.performance,
            scores.feasibility,
        ):
            assert 0.0 <= value <= 100.0
    city = radar_scores(_fleet())[0]
    assert city.range == pytest.approx(60.0)


def test_normalise_metric() -> None:
    """Min-max scaling with inversion and weighting."""
    assert normalise_metric([0.0, 50.0, 100.0]) == [0, 50, 100]
    assert normalise_metric([0.0, 50.0, 100.0], inverted=True) == [100, 50, 0]
    assert normalise_metric([0.0, 50.0, 100.0], weight=5) == [0, 83, 100]
    assert normalise_metric([7.0, 7.0]) == [50, 50]
    with pytest.raises(ValueError):
        normalise_metric([1.0, 2.0], weight=6)


def test_duplicate_names_rejected() -> None:
    """Compared vehicles must be distinguishable by name."""
    with pytest.raises(ValueError, match="names must be unique"):
        compare_vehicles([_sample_spec(name="Twin"), _sample_spec(name="Twin")])
    with pytest.raises(ValueError, match="names must be unique"):
        comparison_frame([_sample_spec(name="Twin"), _sample_spec(name="Twin")])


def test_weighted_radar_frame_layout() -> None:
    """One row per vehicle and one column per radar axis."""
    frame = weighted_radar_frame(_fleet())
    assert list(frame.index) == ["City Car", "Sport Car"]
    assert list(frame.columns) == [
        "Range",
        "Power",
        "Speed",
        "Efficiency",
        "Energy Eff.",
        "Acceleration",
    ]
    assert frame.loc["Sport Car", "Range"] == 100
    assert frame.loc["City Car", "Range"] == 0
    assert frame.loc["Sport Car", "Power"] == 100
    assert frame.loc["Sport Car", "Speed"] == 100
    # Lower 0-100 time is better.
    assert frame.loc["Sport Car", "Acceleration"] == 100
    assert frame.loc["City Car", "Acceleration"] == 0
    # Same drivetrain efficiency for every vehicle.
    assert list(frame["Efficiency"]) == [50, 50]


def test_weighted_radar_frame_weights() -> None:
    """Weights scale each axis by weight / 3, capped at 100."""
    frame = weighted_radar_frame(
        _fleet(), {"range": 5, "acceleration": 1, "efficiency": 5}
    )
    assert frame.loc["Sport Car", "Range"] == 100
    assert frame.loc["Sport Car", "Acceleration"] == 33
    assert list(frame["Efficiency"]) == [83, 83]


def test_weighted_radar_frame_rejects_bad_weights() -> None:
    """Unknown metrics and weights outside 1-5 are rejected."""
    with pytest.raises(ValueError, match="Unknown radar metrics"):
        weighted_radar_frame(_fleet(), {"comfort": 3})
    with pytest.raises(ValueError, match="between 1 and 5"):
        weighted_radar_frame(_fleet(), {"range": 6})
