"""Core calculation modules for the EV performance engine."""

from ev_engine.core.analysis import (
    VehicleAnalysis,
    analyse_vehicle,
    vehicle_power_curve,
)
from ev_engine.core.comparison import (
    MAX_COMPARED_VEHICLES,
    WEIGHTED_METRICS,
    ComparisonRow,
    RadarScores,
    compare_vehicles,
    comparison_frame,
    normalise_metric,
    radar_scores,
    weighted_radar_frame,
)
from ev_engine.core.constants import (
    CONSTANTS,
    AuxiliaryLoad,
    PhysicalConstants,
    TerrainType,
)
from ev_engine.core.dynamics import DynamicsResult, vehicle_dynamics
from ev_engine.core.energy import (
    WLTC_PHASES,
    DriveCyclePhase,
    EnergyResult,
    drivetrain_efficiency,
    energy_consumption,
)
from ev_engine.core.feasibility import (
    PENALTY_RULES,
    FeasibilityResult,
    feasibility,
    rating_for,
)
from ev_engine.core.forces import (
    ForceBreakdown,
    acceleration_force,
    aerodynamic_drag,
    force_breakdown,
    grade_resistance,
    rolling_resistance,
    tractive_force,
)
from ev_engine.core.power import PowerResult, motor_power
from ev_engine.core.power_curve import PowerCurve, PowerCurvePoint, power_curve
from ev_engine.core.vehicle import FIELD_LIMITS, VehicleSpec

__all__ = [
    "AuxiliaryLoad",
    "CONSTANTS",
    "ComparisonRow",
    "DriveCyclePhase",
    "DynamicsResult",
    "EnergyResult",
    "FIELD_LIMITS",
    "FeasibilityResult",
    "ForceBreakdown",
    "MAX_COMPARED_VEHICLES",
    "PENALTY_RULES",
    "PhysicalConstants",
    "PowerCurve",
    "PowerCurvePoint",
    "PowerResult",
    "RadarScores",
    "TerrainType",
    "VehicleAnalysis",
    "VehicleSpec",
    "WEIGHTED_METRICS",
    "WLTC_PHASES",
    "acceleration_force",
    "aerodynamic_drag",
    "analyse_vehicle",
    "compare_vehicles",
    "comparison_frame",
    "drivetrain_efficiency",
    "energy_consumption",
    "feasibility",
    "force_breakdown",
    "grade_resistance",
    "motor_power",
    "normalise_metric",
    "power_curve",
    "radar_scores",
    "rating_for",
    "rolling_resistance",
    "tractive_force",
    "vehicle_dynamics",
    "vehicle_power_curve",
    "weighted_radar_frame",
]
