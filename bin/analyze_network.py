#!/usr/bin/env python3
"""
Board Network Analysis CLI

Builds the relationship network of a board roster, lays it out in 3D and
reports influencers, isolated members, clusters and structural risks.

Pipeline:
    1. Graph Building   → pairwise relationship scoring, clusters, metrics
    2. Layout           → force-directed, circular, hierarchical or cluster
    3. Analysis         → influencers, bridges, opportunities, risk patterns
       (or a free-text question routed to the matching finding)

Usage:
    python bin/analyze_network.py roster.yaml
    python bin/analyze_network.py roster.json --layout hierarchical -o output/network.json
    python bin/analyze_network.py roster.yaml --query "Who are the key influencers?"
    python bin/analyze_network.py --list-layouts
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json
import logging
from typing import Any, Dict

from boardnet.application.container import Container
from boardnet.application.services.display_service import Colors, DisplayService
from boardnet.config.settings import Settings
from boardnet.domain.config.layouts import LayoutType, list_layouts


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with clear grouping."""
    parser = argparse.ArgumentParser(
        prog="analyze_network",
        description="Relationship network analysis for board rosters.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s roster.yaml                           Build, lay out and analyze
  %(prog)s roster.yaml --layout cluster          Use the cluster layout
  %(prog)s roster.yaml -Q "any risks?"           Answer a question
  %(prog)s roster.yaml -o out/network.json       Export snapshot and analysis
  %(prog)s --list-layouts                        Show available layouts
""",
    )

    parser.add_argument("roster", nargs="?", help="Roster file (JSON or YAML)")

    # --- Analysis ---
    analysis = parser.add_argument_group("Analysis")
    analysis.add_argument(
        "--layout", "-l",
        choices=[lt.value for lt in LayoutType],
        default=LayoutType.FORCE_DIRECTED.value,
        help="Layout algorithm (default: force-directed)",
    )
    analysis.add_argument(
        "--query", "-Q",
        metavar="TEXT",
        help="Ask a question about the network instead of printing the full analysis",
    )
    analysis.add_argument(
        "--list-layouts",
        action="store_true",
        help="List available layouts and exit",
    )

    # --- Output ---
    output = parser.add_argument_group("Output")
    output.add_argument("--output", "-o", metavar="FILE", help="Export results to JSON file")
    output.add_argument("--json", action="store_true", help="Print results as JSON to stdout")
    output.add_argument("--quiet", "-q", action="store_true", help="Suppress console display")
    output.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


# ---------------------------------------------------------------------------
# Analysis Logic
# ---------------------------------------------------------------------------

def run_analysis(args: argparse.Namespace, container: Container) -> Dict[str, Any]:
    """
    Execute the pipeline for the parsed CLI arguments.

    Returns a dict with the laid-out snapshot and either the analysis result
    or the query response, ready for display and export.
    """
    service = container.network_service()

    snapshot = service.generate_from_repository()
    snapshot = service.apply_layout(snapshot, args.layout)

    results: Dict[str, Any] = {"layout": args.layout, "snapshot": snapshot}
    if args.query:
        results["query"] = service.process_network_voice_query(args.query, snapshot)
    else:
        results["analysis"] = service.analyze_network(snapshot)
    return results


def to_serializable(results: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value.to_dict() if hasattr(value, "to_dict") else value
        for key, value in results.items()
    }


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # --list-layouts: informational, then exit
    if args.list_layouts:
        print(list_layouts())
        return 0

    if not args.roster:
        parser.error("a roster file is required")

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(DisplayService.colored(f"Error: {exc}", Colors.RED), file=sys.stderr)
        return 1

    # Logging setup
    log_level = (
        logging.DEBUG if args.verbose
        else logging.WARNING if args.quiet
        else getattr(logging, settings.log_level, logging.INFO)
    )
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    container = Container.from_settings(settings, roster_path=args.roster)
    display = container.display_service()

    try:
        results = run_analysis(args, container)

        # Export to file if requested
        if args.output:
            path = container.result_exporter().export_json(to_serializable(results), args.output)
            if not args.quiet:
                print(display.colored(
                    f"\n✓ Results exported to: {path}",
                    display.Colors.GREEN,
                ))

        # Display to stdout
        if args.json:
            print(json.dumps(to_serializable(results), indent=2, default=str))
        elif not args.quiet:
            display.print_header(f"Board Network: {Path(args.roster).name}")
            display.display_network_summary(results["snapshot"])
            display.display_layout(list(results["snapshot"].nodes), args.layout)
            if "query" in results:
                display.display_query_response(results["query"])
            else:
                display.display_analysis(results["analysis"])

        return 0

    except Exception as exc:
        print(display.colored(f"Error: {exc}", display.Colors.RED), file=sys.stderr)
        if args.verbose:
            logging.exception("Analysis failed")
        return 1

    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
