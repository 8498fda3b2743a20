"""Road-load power curve for charting."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterator

import pandas as pd

from ev_engine.core.constants import CONSTANTS, TerrainType
from ev_engine.core.forces import tractive_force
from ev_engine.core.units import kmh_to_ms, round_int

SPEED_STEP_KMH: int = 10
LOW_SPEED_THRESHOLD_KMH: float = 50.0


@dataclass(frozen=True)
class PowerCurvePoint:
    """One sample of the power curve.

    Attributes:
        speed: Speed in km/h.
        power: Steady-state road-load power in kW.
        efficiency: Assumed motor efficiency at this speed, in percent.
        force: Steady-state tractive force in N.
    """

    speed: int
    power: int
    efficiency: int
    force: int


@dataclass(frozen=True)
class PowerCurve:
    """Restartable sweep of steady-state power over speed.

    Iterating yields :class:`PowerCurvePoint` samples at 10, 20, ... km/h
    up to and including ``top_speed``.  Points are computed on demand and
    every iteration starts over.
    """

    mass: float
    drag_coefficient: float
    frontal_area: float
    terrain_type: TerrainType | str = TerrainType.MIXED
    top_speed: float = 200.0

    def speeds(self) -> range:
        """Sample speeds in km/h."""
        return range(SPEED_STEP_KMH, int(self.top_speed) + 1, SPEED_STEP_KMH)

    def __len__(self) -> int:
        return len(self.speeds())

    def __iter__(self) -> Iterator[PowerCurvePoint]:
        for speed in self.speeds():
            speed_ms: float = kmh_to_ms(speed)
            force: float = tractive_force(
                self.mass,
                speed_ms,
                0.0,
                self.drag_coefficient,
                self.frontal_area,
                self.terrain_type,
            )
            efficiency: float = (
                CONSTANTS.motor_efficiency["low_speed"]
                if speed < LOW_SPEED_THRESHOLD_KMH
                else CONSTANTS.motor_efficiency["average"]
            )
            yield PowerCurvePoint(
                speed=speed,
                power=round_int(force * speed_ms / 1000.0),
                efficiency=round_int(efficiency * 100.0),
                force=round_int(force),
            )

    def to_frame(self) -> pd.DataFrame:
        """Return the curve as a DataFrame with one row per sample."""
        return pd.DataFrame(
            [asdict(point) for point in self],
            columns=["speed", "power", "efficiency", "force"],
        )


def power_curve(
    mass: float,
    drag_coefficient: float,
    frontal_area: float,
    terrain_type: TerrainType | str = TerrainType.MIXED,
    top_speed: float = 200.0,
) -> PowerCurve:
    """Build the power curve for a vehicle.

    Args:
        mass: Total vehicle mass in kg.
        drag_coefficient: Cd.
        frontal_area: Frontal area in m^2.
        terrain_type: Terrain for rolling resistance.
        top_speed: Last sample speed in km/h (inclusive when a multiple of
            10).

    Returns:
        A :class:`PowerCurve`; iterate it for the samples.
    """
    return PowerCurve(
        mass=mass,
        drag_coefficient=drag_coefficient,
        frontal_area=frontal_area,
        terrain_type=terrain_type,
        top_speed=top_speed,
    )
