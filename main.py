"""CLI entrypoint for the EV Performance Engine."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ev_engine import __version__
from ev_engine.config import load_presets
from ev_engine.core.analysis import analyse_vehicle, vehicle_power_curve
from ev_engine.core.vehicle import VehicleSpec
from ev_engine.export import (
    export_csv,
    export_json,
    render_text_report,
    write_export,
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "preset",
        nargs="?",
        default="regular",
        help="Preset id from data/vehicle_presets.yaml (default: regular).",
    )
    parser.add_argument("--json", type=Path, help="Write a JSON export here.")
    parser.add_argument("--csv", type=Path, help="Write a CSV metric table here.")
    parser.add_argument("--report", type=Path, help="Write a text report here.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Analyse one preset vehicle and print the results."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"EV Performance Engine v{__version__}")
    print("=" * 56)

    # -- Load presets ---------------------------------------------------------
    presets = load_presets()
    print(f"\nPresets: {', '.join(presets)}")
    if args.preset not in presets:
        print(f"Unknown preset '{args.preset}'.", file=sys.stderr)
        return 2
    spec: VehicleSpec = presets[args.preset]

    print(f"\nVehicle : {spec.name}")
    print(f"Mass    : {spec.total_mass:g} kg ({spec.additional_weight:g} kg payload)")
    print(f"Terrain : {spec.terrain_type.value} / aux {spec.auxiliary_load.value}")
    print("-" * 56)

    # -- Analyse --------------------------------------------------------------
    result = analyse_vehicle(spec)
    power = result.motor_power
    energy = result.energy_consumption
    dynamics = result.vehicle_dynamics
    assessment = result.feasibility

    print(f"\n  {'Required power':<24} {power.required_power:>8} kW")
    print(f"  {'Required torque':<24} {power.required_torque:>8} Nm")
    print(f"  {'Battery capacity':<24} {energy.battery_capacity:>8.1f} kWh")
    print(f"  {'Consumption':<24} {energy.consumption_wh_km:>8} Wh/km")
    print(f"  {'Max theoretical speed':<24} {dynamics.max_theoretical_speed:>8} km/h")
    print(f"  {'Braking 100-0':<24} {dynamics.braking_distance:>8} m")
    print(f"  {'Feasibility':<24} {assessment.score:>8} ({assessment.rating})")
    for issue in assessment.issues:
        print(f"    - {issue}")

    # -- Power curve ----------------------------------------------------------
    print(f"\n  {'Speed':>5}  {'Power (kW)':>10}  {'Force (N)':>9}  {'Eff (%)':>7}")
    print(f"  {'-----':>5}  {'----------':>10}  {'---------':>9}  {'-------':>7}")
    for point in vehicle_power_curve(spec):
        print(
            f"  {point.speed:5d}  {point.power:10d}  "
            f"{point.force:9d}  {point.efficiency:7d}"
        )

    # -- Exports --------------------------------------------------------------
    if args.json:
        write_export(args.json, export_json(spec, result))
        print(f"\nJSON export written to {args.json}")
    if args.report:
        write_export(args.report, render_text_report(spec, result))
        print(f"Report written to {args.report}")
    if args.csv:
        write_export(args.csv, export_csv(spec, result))
        print(f"CSV export written to {args.csv}")

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
