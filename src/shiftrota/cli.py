from __future__ import annotations

import argparse
import json
from typing import Any, Dict

from pydantic import ValidationError

from shiftrota.engine import (
    calculate_person_stats,
    generate_assignment,
    stats_to_dict_list,
)
from shiftrota.io.excel_export import export_to_csv, export_to_excel
from shiftrota.io.roster_loader import load_roster
from shiftrota.models.errors import ConfigurationError
from shiftrota.models.slot import CATALOGS, get_catalog
from shiftrota.models.validated import ValidatedSettings
from shiftrota.utils.logging_setup import setup_logging
from shiftrota.utils.structured_logging import bind_context, configure_structlog


def _build_settings(args: argparse.Namespace) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {"catalog": args.catalog}
    if args.day_headcount is not None:
        cfg["day_headcount"] = args.day_headcount
    if args.night_headcount is not None:
        cfg["night_headcount"] = args.night_headcount
    if args.cap is not None:
        cfg["weekly_cap"] = args.cap
    if args.iterations is not None:
        cfg["max_iterations"] = args.iterations
    if args.seed is not None:
        cfg["seed"] = args.seed
    return cfg


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Weekly shift assignment")
    p.add_argument("--roster", required=True, help="Roster CSV (name + one column per day)")
    p.add_argument("--catalog", choices=sorted(CATALOGS), default="six-hour")
    p.add_argument("--day-headcount", type=int, help="People per day-period slot (default: 1)")
    p.add_argument("--night-headcount", type=int, help="People per night-period slot (default: 1)")
    p.add_argument("--cap", type=int, help="Max slots per person per week (default: 10)")
    p.add_argument("--iterations", type=int, help="Max repair passes (default: 5)")
    p.add_argument("--seed", type=int, help="Shuffle remaining ties with this seed")
    p.add_argument("--log-file", default=None, help="Also log to this file")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--json", dest="json_out", action="store_true", help="JSON output")
    p.add_argument("--xlsx", default=None, help="Also write an Excel workbook to this path")
    p.add_argument("--csv", dest="csv_out", default=None, help="Also write assignments as CSV")
    args = p.parse_args(argv)

    level = {0: "WARNING", 1: "INFO"}.get(args.verbose, "DEBUG")
    setup_logging(level=level, log_file=args.log_file)
    configure_structlog(json_output=args.json_out)
    bind_context(roster=str(args.roster))

    try:
        validated = ValidatedSettings(**_build_settings(args))
    except ValidationError as e:
        p.error(str(e))

    catalog = get_catalog(validated.catalog)
    settings = validated.to_dataclass()
    roster = load_roster(args.roster)

    try:
        assignment = generate_assignment(roster, catalog, settings)
    except ConfigurationError as e:
        p.error(str(e))

    stats = calculate_person_stats(assignment, roster, catalog)

    if args.xlsx:
        export_to_excel(assignment, roster, catalog, args.xlsx, settings=settings)
    if args.csv_out:
        export_to_csv(assignment, args.csv_out)

    if args.json_out:
        print(json.dumps({
            "settings": validated.model_dump(),
            "summary": assignment.summary(),
            "assignments": assignment.to_records(),
            "people": stats_to_dict_list(stats),
        }, ensure_ascii=False, indent=2))
    else:
        print(assignment.to_matrix(catalog).to_string())
        print()
        print("Summary:")
        for k, v in assignment.summary().items():
            print(f" - {k}: {v}")
        print("Per person:")
        for s in stats:
            print(f" - {s.name}: {s.assigned}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
