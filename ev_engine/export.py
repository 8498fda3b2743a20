"""JSON and plain-text export of an analysed vehicle."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pandas as pd

from ev_engine.core.analysis import VehicleAnalysis
from ev_engine.core.vehicle import VehicleSpec

logger = logging.getLogger(__name__)

ENGINEERING_NOTES: str = (
    "This report is generated using automotive engineering principles and "
    "WLTC-based energy consumption calculations.\n"
    "The calculations assume standard atmospheric conditions and typical "
    "motor/battery efficiencies.\n"
    "Results should be validated with detailed engineering analysis for "
    "production vehicles."
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def build_export_payload(
    spec: VehicleSpec,
    analysis: VehicleAnalysis,
    timestamp: datetime | None = None,
) -> dict[str, Any]:
    """Assemble the full spec + results record.

    Args:
        spec: The analysed specification.
        analysis: Its analysis.
        timestamp: Export time; defaults to now (UTC).

    Returns:
        Dict with ``timestamp``, ``vehicleSpecs``, ``results`` and a flat
        ``calculations`` summary.
    """
    stamp = timestamp or _now()
    return {
        "timestamp": stamp.isoformat(),
        "vehicleSpecs": spec.to_dict(),
        "results": analysis.to_dict(),
        "calculations": {
            "totalWeight": analysis.total_weight,
            "requiredPower": analysis.motor_power.required_power,
            "requiredTorque": analysis.motor_power.required_torque,
            "batteryCapacity": analysis.energy_consumption.battery_capacity,
            "energyConsumption": analysis.energy_consumption.consumption_wh_km,
            "feasibilityScore": analysis.feasibility.score,
        },
    }


def export_json(
    spec: VehicleSpec,
    analysis: VehicleAnalysis,
    timestamp: datetime | None = None,
) -> str:
    """Serialise :func:`build_export_payload` as indented JSON."""
    return json.dumps(
        build_export_payload(spec, analysis, timestamp), indent=2, ensure_ascii=False
    )


def metric_rows(
    spec: VehicleSpec, analysis: VehicleAnalysis
) -> list[tuple[str, float, str]]:
    """Flat (metric, value, unit) rows for tabular export."""
    power = analysis.motor_power
    energy = analysis.energy_consumption
    dynamics = analysis.vehicle_dynamics
    return [
        ("Vehicle Mass", spec.mass, "kg"),
        ("Additional Weight", spec.additional_weight, "kg"),
        ("Total Weight", analysis.total_weight, "kg"),
        ("Top Speed", spec.top_speed, "km/h"),
        ("Acceleration (0-100)", spec.acceleration_0_to_100, "s"),
        ("Range", spec.range_km, "km"),
        ("Tire Radius", spec.tire_radius, "m"),
        ("Drag Coefficient", spec.drag_coefficient, ""),
        ("Frontal Area", spec.frontal_area, "m²"),
        ("Required Power", power.required_power, "kW"),
        ("Required Torque", analysis.motor_power.required_torque, "Nm"),
        ("Battery Capacity", energy.battery_capacity, "kWh"),
        ("Energy Consumption", energy.consumption_wh_km, "Wh/km"),
        ("Drivetrain Efficiency", energy.total_efficiency, "%"),
        ("Power-to-Weight", analysis.feasibility.power_to_weight, "W/kg"),
        ("Max Theoretical Speed", dynamics.max_theoretical_speed, "km/h"),
        ("Braking Distance", dynamics.braking_distance, "m"),
        ("Feasibility Score", analysis.feasibility.score, "/100"),
    ]


def export_csv(spec: VehicleSpec, analysis: VehicleAnalysis) -> str:
    """Serialise :func:`metric_rows` as CSV with a Metric,Value,Unit header."""
    frame = pd.DataFrame(
        metric_rows(spec, analysis),
        columns=["Metric", "Value", "Unit"],
        dtype=object,
    )
    return frame.to_csv(index=False, lineterminator="\n")


def render_text_report(
    spec: VehicleSpec,
    analysis: VehicleAnalysis,
    generated: datetime | None = None,
) -> str:
    """Render the human-readable calculation report."""
    stamp = generated or _now()
    power = analysis.motor_power
    energy = analysis.energy_consumption
    dynamics = analysis.vehicle_dynamics
    assessment = analysis.feasibility

    if assessment.issues:
        issue_lines = [f"- {issue}" for issue in assessment.issues]
    else:
        issue_lines = ["No issues identified"]

    lines: list[str] = [
        "EV CALCULATOR REPORT",
        f"Generated: {stamp:%Y-%m-%d %H:%M:%S}",
        "",
        "VEHICLE SPECIFICATIONS:",
        f"- Vehicle Name: {spec.name}",
        f"- Vehicle Mass: {spec.mass:g} kg",
        f"- Additional Weight: {spec.additional_weight:g} kg",
        f"- Total Weight: {analysis.total_weight:g} kg",
        f"- Top Speed: {spec.top_speed:g} km/h",
        f"- 0-100 km/h Acceleration: {spec.acceleration_0_to_100:g} seconds",
        f"- Range: {spec.range_km:g} km",
        f"- Tire Radius: {spec.tire_radius:g} m",
        f"- Drag Coefficient: {spec.drag_coefficient:g}",
        f"- Frontal Area: {spec.frontal_area:g} m²",
        f"- Terrain Type: {spec.terrain_type.value}",
        f"- Auxiliary Load: {spec.auxiliary_load.value}",
        "",
        "CALCULATED RESULTS:",
        f"- Required Motor Power: {power.required_power} kW",
        f"- Required Torque: {power.required_torque} Nm",
        f"- Battery Capacity: {energy.battery_capacity:g} kWh",
        f"- Energy Consumption: {energy.consumption_wh_km} Wh/km",
        f"- Power-to-Weight Ratio: {assessment.power_to_weight} W/kg",
        f"- Feasibility Score: {assessment.score}/100",
        f"- Feasibility Rating: {assessment.rating}",
        "",
        "VEHICLE DYNAMICS:",
        f"- Maximum Theoretical Speed: {dynamics.max_theoretical_speed} km/h",
        f"- Braking Distance (100-0 km/h): {dynamics.braking_distance} m",
        f"- Cornering Speed (50m radius): {dynamics.cornering_speed} km/h",
        "",
        "FEASIBILITY ANALYSIS:",
        *issue_lines,
        "",
        "ENGINEERING NOTES:",
        ENGINEERING_NOTES,
    ]
    return "\n".join(lines) + "\n"


def default_export_name(extension: str, timestamp: datetime | None = None) -> str:
    """File name such as ``ev-calculator-report-2026-10-18.txt``."""
    stamp = timestamp or _now()
    stem = (
        "ev-calculator-data"
        if extension in ("json", "csv")
        else "ev-calculator-report"
    )
    return f"{stem}-{stamp:%Y-%m-%d}.{extension}"


def write_export(path: Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote export to %s", path)
    return path
