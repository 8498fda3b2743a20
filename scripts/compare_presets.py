#!/usr/bin/env python
"""Analyse every vehicle preset and write a ranked comparison.

This script:

1. Loads ``data/vehicle_presets.yaml``.
2. Analyses each preset with the engine.
3. Saves the results to ``results/preset_comparison.json``.
4. Prints a summary ranked by feasibility score.

Usage
-----
::

    python scripts/compare_presets.py
"""

from __future__ import annotations

import json
import logging
import os
import sys

# Ensure the project root is on the import path.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from ev_engine.config import load_presets  # noqa: E402
from ev_engine.core.analysis import analyse_vehicle  # noqa: E402

RESULTS_DIR: str = os.path.join(_project_root, "results")
OUTPUT_PATH: str = os.path.join(RESULTS_DIR, "preset_comparison.json")


def main() -> None:
    """Analyse all presets and save a ranked comparison."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    print("=" * 60)
    print("PRESET COMPARISON")
    print("=" * 60)
    print()

    # -- Step 1: Load presets -------------------------------------------------
    presets = load_presets()
    print(f"[1/3] Loaded {len(presets)} presets.")

    # -- Step 2: Analyse ------------------------------------------------------
    print("[2/3] Analysing presets")
    output: dict[str, object] = {}
    for key, spec in presets.items():
        result = analyse_vehicle(spec)
        output[key] = {"vehicleSpecs": spec.to_dict(), "results": result.to_dict()}

    # -- Step 3: Save ---------------------------------------------------------
    os.makedirs(RESULTS_DIR, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as fh:
        json.dump(output, fh, indent=2, sort_keys=True)
    print(f"[3/3] Results saved to {OUTPUT_PATH}")
    print()

    # -- Ranked summary -------------------------------------------------------
    ranked = sorted(
        output.items(),
        key=lambda item: item[1]["results"]["feasibilityAnalysis"]["score"],
        reverse=True,
    )
    for rank, (key, entry) in enumerate(ranked, start=1):
        results = entry["results"]
        print(
            f"  {rank}. {entry['vehicleSpecs']['name']:<16s}  "
            f"score: {results['feasibilityAnalysis']['score']:3d}  "
            f"power: {results['motorPower']['requiredPower']:4d} kW  "
            f"battery: {results['energyConsumption']['batteryCapacity']:6.1f} kWh"
        )
    print()
    print("Comparison complete.")


if __name__ == "__main__":
    main()
