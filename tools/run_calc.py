#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/run_calc.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from coolcalc_core import (  # noqa: E402
    breakdown_frame,
    build_payload,
    calculate,
    load_catalog,
    load_form_file,
    write_csv,
    write_json,
)
from coolcalc_core.catalog import ROOM_TYPES  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(
        description="Calculate the refrigeration load of a cold room, freezer or blast freezer."
    )
    ap.add_argument(
        "--room-type",
        required=True,
        help=f"Room type: {', '.join(ROOM_TYPES)} (aliases: coldroom, blastfreezer).",
    )
    ap.add_argument(
        "--input",
        default=None,
        help="YAML/JSON form file. Missing fields take the room-type defaults.",
    )
    ap.add_argument("--data-dir", default=None, help="Reference data directory (YAML tables).")
    ap.add_argument("--json-out", default=None, help="Write the full report as JSON.")
    ap.add_argument("--csv-out", default=None, help="Write the load breakdown as CSV.")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING).",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load_catalog(args.data_dir)
        form = load_form_file(args.input) if args.input else {}
        result = calculate(args.room_type, form, catalog)
    except (OSError, ValueError, TypeError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    json_path = None
    csv_path = None
    if args.json_out:
        json_path = write_json(build_payload(result), args.json_out)
    if args.csv_out:
        csv_path = write_csv(breakdown_frame(result), args.csv_out)

    summary = result.summary
    print("OK")
    print("room_type:", result.room_type)
    print("volume_m3:", round(result.geometry.volume, 3))
    print("temperature_difference:", round(result.temperature_difference, 3))
    for comp in result.components():
        print(f"load: {comp.group}.{comp.component} kw= {round(comp.kw, 6)}")
    print("total_kw:", round(summary.total_kw, 6))
    print("safety_margin_kw:", round(summary.safety_margin_kw, 6))
    print("final_kw:", round(summary.final_kw, 6))
    print("final_tr:", round(summary.final_tr, 6))
    print("btu_hr:", round(summary.btu_hr, 2))
    print("daily_energy_kwh:", round(summary.daily_energy_kwh, 3))
    print("storage_utilization_pct:", round(result.storage.utilization, 2))
    if json_path is not None:
        print("json:", str(json_path))
    if csv_path is not None:
        print("csv:", str(csv_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
