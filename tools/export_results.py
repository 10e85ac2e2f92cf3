#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
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


def _room_type_from_form(form: dict, override: str | None) -> str:
    if override:
        return override
    room_type = form.get("room_type") or form.get("roomType")
    if not room_type:
        raise ValueError("room type not given: use --room-type or set room_type in the input file")
    return str(room_type)


def main() -> int:
    ap = argparse.ArgumentParser(
        description="Export a load calculation report (JSON payload or CSV breakdown)."
    )
    ap.add_argument("--input", required=True, help="YAML/JSON form file.")
    ap.add_argument(
        "--room-type",
        default=None,
        help="Room type; defaults to the room_type key of the input file.",
    )
    ap.add_argument("--format", choices=("json", "csv"), default="json", help="Output format.")
    ap.add_argument("--out", required=True, help="Output path.")
    ap.add_argument("--data-dir", default=None, help="Reference data directory (YAML tables).")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        form = load_form_file(args.input)
        room_type = _room_type_from_form(form, args.room_type)
        result = calculate(room_type, form, load_catalog(args.data_dir))
    except (OSError, ValueError, TypeError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.format == "json":
        out_path = write_json(build_payload(result), args.out)
        rows = len(result.components())
    else:
        frame = breakdown_frame(result)
        out_path = write_csv(frame, args.out)
        rows = len(frame)

    print("OK")
    print("room_type:", result.room_type)
    print("format:", args.format)
    print("rows:", rows)
    print("final_kw:", round(result.summary.final_kw, 6))
    print("out:", str(out_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
