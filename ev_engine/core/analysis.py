"""Full analysis of one vehicle specification.

Runs the power, energy and dynamics models on the total vehicle mass
and feeds their outputs into the feasibility scorer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ev_engine.core.dynamics import DynamicsResult, vehicle_dynamics
from ev_engine.core.energy import EnergyResult, energy_consumption
from ev_engine.core.feasibility import FeasibilityResult, feasibility
from ev_engine.core.power import PowerResult, motor_power
from ev_engine.core.power_curve import PowerCurve, power_curve
from ev_engine.core.vehicle import VehicleSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VehicleAnalysis:
    """Every model output for one :class:`VehicleSpec`.

    Attributes:
        total_weight: Curb mass plus additional weight in kg.
        motor_power: Motor sizing.
        energy_consumption: Consumption and battery sizing.
        vehicle_dynamics: Dynamic limits.
        feasibility: Feasibility assessment.
    """

    total_weight: float
    motor_power: PowerResult
    energy_consumption: EnergyResult
    vehicle_dynamics: DynamicsResult
    feasibility: FeasibilityResult

    def to_dict(self) -> dict[str, Any]:
        """Nested export representation."""
        return {
            "totalWeight": self.total_weight,
            "motorPower": self.motor_power.to_dict(),
            "energyConsumption": self.energy_consumption.to_dict(),
            "vehicleDynamics": self.vehicle_dynamics.to_dict(),
            "feasibilityAnalysis": self.feasibility.to_dict(),
        }


def analyse_vehicle(spec: VehicleSpec) -> VehicleAnalysis:
    """Run every engine model for *spec*.

    Args:
        spec: A validated vehicle specification.

    Returns:
        :class:`VehicleAnalysis`.
    """
    total_mass: float = spec.total_mass

    power: PowerResult = motor_power(
        mass=total_mass,
        top_speed_kmh=spec.top_speed,
        accel_0_to_100_s=spec.acceleration_0_to_100,
        drag_coefficient=spec.drag_coefficient,
        frontal_area=spec.frontal_area,
        terrain_type=spec.terrain_type,
        tire_radius=spec.tire_radius,
    )
    energy: EnergyResult = energy_consumption(
        mass=total_mass,
        drag_coefficient=spec.drag_coefficient,
        frontal_area=spec.frontal_area,
        terrain_type=spec.terrain_type,
        range_km=spec.range_km,
        auxiliary_load=spec.auxiliary_load,
    )
    dynamics: DynamicsResult = vehicle_dynamics(
        mass=total_mass,
        tire_radius=spec.tire_radius,
        drag_coefficient=spec.drag_coefficient,
        frontal_area=spec.frontal_area,
        top_speed=spec.top_speed,
        accel_0_to_100=spec.acceleration_0_to_100,
        required_power=power.required_power,
    )
    assessment: FeasibilityResult = feasibility(
        required_power=power.required_power,
        battery_capacity=energy.battery_capacity,
        consumption_wh_km=energy.consumption_wh_km,
        mass=spec.mass,
        acceleration_0_to_100=spec.acceleration_0_to_100,
        drag_coefficient=spec.drag_coefficient,
        range_km=spec.range_km,
        additional_weight=spec.additional_weight,
    )

    logger.debug(
        "Analysed %s: %d kW, %.1f kWh, score %d",
        spec.name,
        power.required_power,
        energy.battery_capacity,
        assessment.score,
    )

    return VehicleAnalysis(
        total_weight=total_mass,
        motor_power=power,
        energy_consumption=energy,
        vehicle_dynamics=dynamics,
        feasibility=assessment,
    )


def vehicle_power_curve(spec: VehicleSpec) -> PowerCurve:
    """Power curve for *spec* at its total mass and top speed."""
    return power_curve(
        mass=spec.total_mass,
        drag_coefficient=spec.drag_coefficient,
        frontal_area=spec.frontal_area,
        terrain_type=spec.terrain_type,
        top_speed=spec.top_speed,
    )
