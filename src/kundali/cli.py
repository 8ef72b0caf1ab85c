#!/usr/bin/env python3
"""
Command-line access to the chart and dasha engine.

Usage examples:
  # Chart for a place from the built-in city table (UTC date/time)
  kundali chart --date 1990-04-15 --time 01:00 --place Hyderabad

  # Chart for explicit coordinates
  kundali chart --date 1990-04-15 --time 01:00 --lat 17.385 --lon 78.4867

  # Mahadashas, then drill down into Kuja and Kuja - Rahu
  kundali dasha --moon 54.5 --birth 1990-04-15T01:00:00Z
  kundali dasha --moon 54.5 --birth 1990-04-15T01:00:00Z --lord Kuja
  kundali dasha --moon 54.5 --birth 1990-04-15T01:00:00Z --lord Kuja --sub-lord Rahu
"""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from .config import get_engine_config
from .dasha import compute_antardashas, compute_mahadashas, compute_pratyantardashas
from .errors import KundaliError
from .facade import compute_chart_for_details
from .logging import setup_logging
from .models import BirthDetails, DashaRequest


def _chart(args: argparse.Namespace) -> dict:
    details = BirthDetails(
        date=args.date,
        time=args.time,
        place=args.place,
        latitude=args.lat,
        longitude=args.lon,
    )
    return compute_chart_for_details(details).to_dict()


def _dasha(args: argparse.Namespace) -> list[dict]:
    req = DashaRequest(
        moon_longitude=args.moon,
        birth=args.birth,
        lord=args.lord,
        sub_lord=args.sub_lord,
    )

    mahadashas = compute_mahadashas(req.moon_longitude, req.birth)
    if req.level == 1:
        return [p.to_dict() for p in mahadashas]

    maha = next(p for p in mahadashas if p.lord == req.lord)
    antardashas = compute_antardashas(maha.lord, maha.start)
    if req.level == 2:
        return [p.to_dict() for p in antardashas]

    antar = next(p for p in antardashas if p.lord == req.sub_lord)
    return [
        p.to_dict()
        for p in compute_pratyantardashas(maha.lord, antar.lord, antar.start)
    ]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Vedic chart and Vimshottari dasha engine")
    sub = ap.add_subparsers(dest="command", required=True)

    chart = sub.add_parser("chart", help="Compute a sidereal birth chart")
    chart.add_argument("--date", required=True, help="Birth date YYYY-MM-DD (UTC)")
    chart.add_argument("--time", default="00:00", help="Birth time HH:MM[:SS] (UTC)")
    chart.add_argument("--place", default="", help="Place name (built-in city table)")
    chart.add_argument("--lat", type=float, default=None, help="Latitude in degrees")
    chart.add_argument("--lon", type=float, default=None, help="Longitude in degrees")
    chart.set_defaults(handler=_chart)

    dasha = sub.add_parser("dasha", help="Compute Vimshottari dasha periods")
    dasha.add_argument("--moon", type=float, required=True, help="Moon sidereal longitude")
    dasha.add_argument("--birth", required=True, help="Birth instant, ISO-8601")
    dasha.add_argument("--lord", default=None, help="Mahadasha lord to expand")
    dasha.add_argument("--sub-lord", default=None, help="Antardasha lord to expand")
    dasha.set_defaults(handler=_dasha)

    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = get_engine_config()
    # stdout carries the JSON result
    setup_logging(cfg.log_level, format_json=cfg.log_json, stream=sys.stderr)

    try:
        result = args.handler(args)
    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except KundaliError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
