"""Command-line interface for printing the Pokemon type dashboard."""

from __future__ import annotations

import argparse
import json
import sys

from poke_dash.config import Settings
from poke_dash.data.type_chart import effectiveness_symbol
from poke_dash.models import DerivedStatistics
from poke_dash.presentation import statistics_payload
from poke_dash.services import CatalogFetchError, DashboardService

SECTIONS = ("all", "summary", "distribution", "combinations", "rankings", "matrix")
LOAD_ERROR_MESSAGE = "Error loading Pokemon data. Please try again later."
TOP_RANKED = 5


def _humanize_statistics(stats: DerivedStatistics, section: str = "all") -> str:
    lines: list[str] = []

    def show(name: str) -> bool:
        return section in ("all", name)

    if show("summary"):
        summary = stats.summary
        lines.append("Summary:")
        lines.append(f"  Total Pokemon: {summary.total_creatures}")
        lines.append(f"  Total Types: {summary.total_types}")
        lines.append(f"  Type Combinations: {summary.combination_count}")
        lines.append(f"  Avg Base EXP: {summary.average_base_experience}")
        lines.append("")

    if show("distribution"):
        lines.append("Type distribution:")
        if not stats.type_distribution:
            lines.append("  (no data)")
        for share in stats.type_distribution:
            lines.append(f"  - {share.type}: {share.count} Pokemon ({share.percentage:.1f}%)")
        lines.append("")

    if show("combinations"):
        lines.append("Popular type combinations:")
        if not stats.type_combinations:
            lines.append("  (no data)")
        for combo in stats.type_combinations:
            lines.append(f"  - {combo.combination_key}: {combo.count}")
        lines.append("")

    if show("rankings"):
        rankings = stats.type_rankings
        lines.append("Best offensive types:")
        for index, ranking in enumerate(rankings.by_offense[:TOP_RANKED], start=1):
            lines.append(
                f"  #{index} {ranking.type}: super effective vs "
                f"{ranking.super_effective_count} types"
            )
        lines.append("Most vulnerable types:")
        for index, ranking in enumerate(rankings.by_vulnerability[:TOP_RANKED], start=1):
            lines.append(f"  #{index} {ranking.type}: weak to {ranking.weak_to_count} types")
        lines.append("")

    if show("matrix"):
        matrix = stats.effectiveness_matrix
        lines.append("Type effectiveness (attacking rows vs defending columns):")
        header = "".join(f"{name[:3]:>5}" for name in matrix.type_names)
        lines.append(f"{'':>10}{header}")
        for attacker, values in matrix.rows():
            cells = "".join(f"{effectiveness_symbol(value):>5}" for value in values)
            lines.append(f"{attacker:>10}{cells}")

    return "\n".join(lines).strip()


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pokemon type analytics dashboard")
    parser.add_argument(
        "--section",
        choices=SECTIONS,
        default="all",
        help="Only print one part of the dashboard (default: all)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the derived statistics as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)

    _debug_print(args.debug, f"Arguments parsed: {args}")
    settings = Settings.from_env()
    _debug_print(args.debug, f"Settings: {settings}")
    service = DashboardService.from_settings(
        settings,
        debug_logger=(lambda msg: _debug_print(args.debug, msg)),
    )
    try:
        snapshot = service.snapshot()
    except CatalogFetchError as exc:
        _debug_print(args.debug, f"Catalog fetch failed: {exc}")
        sys.stderr.write(LOAD_ERROR_MESSAGE + "\n")
        return 1
    _debug_print(args.debug, "Dashboard snapshot ready")

    if args.json:
        payload = statistics_payload(snapshot.statistics)
        if args.section != "all":
            key = {
                "distribution": "type_distribution",
                "combinations": "type_combinations",
                "rankings": "type_rankings",
                "matrix": "effectiveness_matrix",
            }.get(args.section, args.section)
            payload = {key: payload[key]}
        json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print(_humanize_statistics(snapshot.statistics, args.section))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
