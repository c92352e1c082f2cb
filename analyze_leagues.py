#!/usr/bin/env python3
"""
Sleeper League Analyzer CLI

Grades each league's most recent draft, previews a week's matchups
(with a Game of the Week) and summarizes the week once it is scored.
League ids come from --league-id or data/analyzer_config.json.

Usage:
    python analyze_leagues.py --league-id 123456789012345678
    python analyze_leagues.py --league-id 1234,5678 --week 3 --output reports/week_3.json
"""

import argparse
import logging
import re
import sys
from pathlib import Path

from league_analyzer import LeagueAnalyzer, get_config, load_config
from league_analyzer.constants import MAX_LEAGUES
from league_analyzer.logging_config import setup_logging
from league_analyzer.report import format_report, report_to_dict
from league_analyzer.utils import save_json


def parse_league_ids(values: list[str]) -> list[str]:
    """Split on commas, semicolons, pipes or whitespace; dedupe and cap at four."""
    ids: list[str] = []
    for value in values:
        for part in re.split(r'[\s,;|]+', value):
            if part and part not in ids:
                ids.append(part)
    return ids[:MAX_LEAGUES]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sleeper league draft grades, previews and summaries")
    parser.add_argument(
        "--league-id", "-l",
        action="append",
        default=[],
        help="Sleeper league id (repeatable, or a comma/space separated list; up to 4)",
    )
    parser.add_argument(
        "--week", "-w",
        type=int,
        default=None,
        help="Week to preview/summarize (defaults to the current NFL week)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to analyzer config JSON (defaults to data/analyzer_config.json)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the combined JSON report to this path",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a timestamped log under logs/",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )

    args = parser.parse_args(argv)

    setup_logging(level=logging.WARNING if args.quiet else logging.INFO, log_to_file=args.log_file)

    try:
        config = load_config(args.config) if args.config else get_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Could not load config: {e}")
        return 1

    league_ids = parse_league_ids(args.league_id) or config.league_ids
    if not league_ids:
        print("No leagues configured. Pass --league-id or set league_ids in the config.")
        return 1

    analyzer = LeagueAnalyzer(config)
    reports = analyzer.analyze_leagues(league_ids, args.week)

    if not args.quiet:
        for report in reports:
            print("\n" + "=" * 60)
            print("\n".join(format_report(report)))

    if args.output:
        output_path = Path(args.output)
        save_json(output_path, {'leagues': [report_to_dict(r) for r in reports]})
        print(f"Report written: {output_path}")

    failed = [r for r in reports if not r.ok]
    if failed and len(failed) == len(reports):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
