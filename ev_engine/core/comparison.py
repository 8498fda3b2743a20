"""Side-by-side comparison of up to four vehicle specifications."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from ev_engine.core.analysis import VehicleAnalysis, analyse_vehicle
from ev_engine.core.vehicle import VehicleSpec

MAX_COMPARED_VEHICLES: int = 4
NEUTRAL_WEIGHT: int = 3

# Reference values that map to a full radar score of 100.
RADAR_POWER_KW: float = 300.0
RADAR_CONSUMPTION_WH_KM: float = 250.0
RADAR_RANGE_KM: float = 500.0
RADAR_ACCELERATION_S: float = 15.0

# (key, axis label, lower is better) for the weighted radar.
WEIGHTED_METRICS: tuple[tuple[str, str, bool], ...] = (
    ("range", "Range", False),
    ("power", "Power", False),
    ("speed", "Speed", False),
    ("efficiency", "Efficiency", False),
    ("energy", "Energy Eff.", True),
    ("acceleration", "Acceleration", True),
)


@dataclass(frozen=True)
class ComparisonRow:
    """Headline figures for one compared vehicle."""

    name: str
    power: int
    battery: float
    consumption: int
    feasibility: int
    weight: float
    range: float
    top_speed: float
    acceleration: float


@dataclass(frozen=True)
class RadarScores:
    """0-100 radar scores for one compared vehicle."""

    vehicle: str
    power: float
    efficiency: float
    range: float
    performance: float
    feasibility: float


def _check_specs(specs: Sequence[VehicleSpec]) -> None:
    if not specs:
        raise ValueError("At least one vehicle is required for comparison.")
    if len(specs) > MAX_COMPARED_VEHICLES:
        raise ValueError(
            f"At most {MAX_COMPARED_VEHICLES} vehicles can be compared, "
            f"got {len(specs)}."
        )
    names = [spec.name for spec in specs]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Compared vehicle names must be unique, got {duplicates}.")


def _analyse_all(
    specs: Sequence[VehicleSpec],
) -> list[tuple[VehicleSpec, VehicleAnalysis]]:
    _check_specs(specs)
    return [(spec, analyse_vehicle(spec)) for spec in specs]


def compare_vehicles(specs: Sequence[VehicleSpec]) -> list[ComparisonRow]:
    """Analyse each spec and collect its headline figures.

    Raises:
        ValueError: If *specs* is empty, holds more than four vehicles or
            repeats a name.
    """
    rows: list[ComparisonRow] = []
    for spec, result in _analyse_all(specs):
        rows.append(
            ComparisonRow(
                name=spec.name,
                power=result.motor_power.required_power,
                battery=result.energy_consumption.battery_capacity,
                consumption=result.energy_consumption.consumption_wh_km,
                feasibility=result.feasibility.score,
                weight=result.total_weight,
                range=spec.range_km,
                top_speed=spec.top_speed,
                acceleration=spec.acceleration_0_to_100,
            )
        )
    return rows


def comparison_frame(specs: Sequence[VehicleSpec]) -> pd.DataFrame:
    """Comparison rows as a DataFrame indexed by vehicle name."""
    rows = compare_vehicles(specs)
    return pd.DataFrame([asdict(row) for row in rows]).set_index("name")


def radar_scores(specs: Sequence[VehicleSpec]) -> list[RadarScores]:
    """Score each vehicle on five 0-100 axes.

    ``Power = P / 300 kW``, ``Efficiency = 250 Wh/km / consumption``,
    ``Range = range / 500 km``, ``Performance = 15 s / t_0_100`` (each
    times 100 and capped at 100) and ``Feasibility`` = the feasibility
    score.
    """
    scores: list[RadarScores] = []
    for spec, result in _analyse_all(specs):
        consumption = result.energy_consumption.consumption_wh_km
        efficiency = (
            min(100.0, RADAR_CONSUMPTION_WH_KM / consumption * 100.0)
            if consumption > 0
            else 100.0
        )
        scores.append(
            RadarScores(
                vehicle=spec.name,
                power=min(
                    100.0, result.motor_power.required_power / RADAR_POWER_KW * 100.0
                ),
                efficiency=efficiency,
                range=min(100.0, spec.range_km / RADAR_RANGE_KM * 100.0),
                performance=min(
                    100.0, RADAR_ACCELERATION_S / spec.acceleration_0_to_100 * 100.0
                ),
                feasibility=float(result.feasibility.score),
            )
        )
    return scores


def normalise_metric(
    values: Sequence[float],
    inverted: bool = False,
    weight: int = NEUTRAL_WEIGHT,
) -> list[int]:
    """Min-max scale *values* to 0-100 with a 1-5 importance weight.

    A weight of 3 is neutral; the scaled value is multiplied by
    ``weight / 3`` and capped at 100.  For inverted metrics (lower is
    better) the scale is flipped.  If all values are equal every entry
    scores ``50 * weight / 3``.

    Raises:
        ValueError: If *weight* is outside 1-5 or *values* is empty.
    """
    if not 1 <= weight <= 5:
        raise ValueError("weight must be between 1 and 5.")
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        raise ValueError("values must not be empty.")

    factor: float = weight / NEUTRAL_WEIGHT
    low, high = float(data.min()), float(data.max())
    if high == low:
        return [int(np.floor(min(50.0 * factor, 100.0) + 0.5))] * int(data.size)

    scaled = (data - low) / (high - low) * 100.0
    if inverted:
        scaled = 100.0 - scaled
    scaled = np.minimum(scaled * factor, 100.0)
    return [int(v) for v in np.floor(scaled + 0.5)]


def weighted_radar_frame(
    specs: Sequence[VehicleSpec],
    weights: Mapping[str, int] | None = None,
) -> pd.DataFrame:
    """Relative radar scores, normalised across the compared vehicles.

    Each :data:`WEIGHTED_METRICS` axis is scaled with
    :func:`normalise_metric` over all *specs*, so the best vehicle on an
    axis scores 100 at neutral weight and the worst scores 0.  The raw
    metrics are target range, power-to-weight, top speed, drivetrain
    efficiency, consumption and the 0-100 time; the last two are
    inverted.

    Args:
        specs: One to four vehicles with unique names.
        weights: Optional 1-5 importance per metric key; missing keys use
            the neutral weight 3.

    Returns:
        DataFrame indexed by vehicle name with one column per axis label.

    Raises:
        ValueError: On an invalid vehicle list, an unknown metric key or a
            weight outside 1-5.
    """
    weights = dict(weights or {})
    unknown = set(weights) - {key for key, _, _ in WEIGHTED_METRICS}
    if unknown:
        raise ValueError(f"Unknown radar metrics: {sorted(unknown)}")

    analysed = _analyse_all(specs)
    raw: dict[str, list[float]] = {
        "range": [spec.range_km for spec, _ in analysed],
        "power": [result.feasibility.power_to_weight for _, result in analysed],
        "speed": [spec.top_speed for spec, _ in analysed],
        "efficiency": [
            result.energy_consumption.total_efficiency for _, result in analysed
        ],
        "energy": [
            result.energy_consumption.consumption_wh_km for _, result in analysed
        ],
        "acceleration": [spec.acceleration_0_to_100 for spec, _ in analysed],
    }

    columns: dict[str, list[int]] = {}
    for key, label, inverted in WEIGHTED_METRICS:
        columns[label] = normalise_metric(
            raw[key],
            inverted=inverted,
            weight=weights.get(key, NEUTRAL_WEIGHT),
        )
    return pd.DataFrame(columns, index=[spec.name for spec, _ in analysed])
