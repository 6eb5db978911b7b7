#!/usr/bin/env python3
"""
Generate soroban flash-drill sets from the command line.

Prints the sets as JSON. With --report, also prints how many sets were
dropped and how many attempts each produced set needed, and replays every
set through the drill checker.

Usage:
  cd backend
  python scripts/generate_drills.py --magnitude hundreds --sets 20 --rows 5
  python scripts/generate_drills.py --magnitude units --sets 5 --rows 1 --seed 42
"""

import argparse
import json
import logging
import os
import random
import sys

# Allow running from backend/ directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from soroban.drills import MAGNITUDE_REGISTRY, contract_for
from soroban.engine.assembler import DEFAULT_MODE
from soroban.services.session import clamp_rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Soroban flash-drill generator — prints drill sets as JSON"
    )
    parser.add_argument(
        "--magnitude",
        default="units",
        choices=list(MAGNITUDE_REGISTRY),
        help="Number of columns to drill",
    )
    parser.add_argument("--sets", type=int, default=5, help="Number of sets to request")
    parser.add_argument("--rows", type=int, default=10, help="Numbers per set (1-50)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument("--mode", default=DEFAULT_MODE, help="Reserved; has no effect")
    parser.add_argument("--report", action="store_true", help="Include drop/attempt stats")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.sets < 0:
        print("--sets must be >= 0", file=sys.stderr)
        return 2

    contract = contract_for(args.magnitude)
    rows = clamp_rows(args.rows)
    rng = random.Random(args.seed)
    report = contract.generate(args.sets, rows, rng, args.mode)

    out: dict = {"sets": [s.to_dict() for s in report.sets]}
    if args.report:
        issues = {
            i: contract.validate(s, rows)
            for i, s in enumerate(report.sets)
        }
        out["report"] = {
            "magnitude": args.magnitude,
            "rows": rows,
            "requested": report.requested,
            "dropped": report.dropped,
            "attempts": report.attempts,
            "failures": report.failures,
            "issues": {str(i): v for i, v in issues.items() if v},
        }

    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
