"""Command-line interface for the flight ranking and route query system."""

import argparse
import logging
import json
import sys
from itertools import islice
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.catalog import FlightCatalog
from data.generators.sample_network import generate_sample_flights, print_flight_table
from models import FlightQueryError, PathResult, SimplePath, SystemSettings
from models.settings import DEFAULT_MAX_CITIES
from ranking import SortCriterion

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def build_catalog(settings: SystemSettings) -> FlightCatalog:
    """Create a catalog loaded with the sample flights."""
    logger.info("Loading sample flights...")
    catalog = FlightCatalog(settings)
    catalog.load(generate_sample_flights())
    return catalog


def run_list(catalog: FlightCatalog) -> Dict[str, Any]:
    """Print all flights in loading order."""
    print_flight_table(catalog.ranking)
    return {"flights": [f.to_dict() for f in catalog.ranking]}


def run_sort(
    catalog: FlightCatalog,
    criterion: SortCriterion,
    descending: bool = False
) -> Dict[str, Any]:
    """Rank flights by one criterion and print them."""
    logger.info(f"Sorting flights by {criterion.value}...")
    result = catalog.ranking.sort_by(criterion, descending=descending)

    print_flight_table(catalog.ranking)
    print(
        f"[{result.algorithm}] {result.comparisons} comparisons, "
        f"{result.swaps} swaps"
    )

    return {
        "sort": result.to_dict(),
        "flights": [f.to_dict() for f in catalog.ranking]
    }


def run_cheapest(catalog: FlightCatalog, start: str, end: str) -> Dict[str, Any]:
    """Find and print the cheapest path between two cities."""
    result = catalog.routes.cheapest_path(start, end)
    print_path_result(result)
    return {"cheapest_path": result.to_dict()}


def run_paths(
    catalog: FlightCatalog,
    start: str,
    end: str,
    limit: Optional[int] = None
) -> Dict[str, Any]:
    """Enumerate and print simple paths between two cities."""
    paths: List[SimplePath] = list(
        islice(catalog.routes.enumerate_all_simple_paths(start, end), limit)
    )

    print(f">>> Simple paths from {start} to {end}:")
    if not paths:
        print("  (none)")
    for p in paths:
        print(f"  {' -> '.join(p.path)} | Total price: {p.total_cost:.0f}")

    if limit is not None and len(paths) == limit:
        logger.info(f"Stopped after {limit} paths")

    return {
        "start": start,
        "end": end,
        "paths": [p.to_dict() for p in paths]
    }


def print_path_result(result: PathResult) -> None:
    """Print a cheapest-path result."""
    if not result.reachable:
        print(f"No route from {result.start} to {result.end}.")
        return

    print(f">>> Cheapest route: {result.total_cost:.0f}")
    print(f"Path: {' -> '.join(result.path)}")


def write_output(payload: Dict[str, Any], output_file: str) -> None:
    """Save a command result as JSON."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(payload, f, indent=2)
    logger.info(f"Result saved to {output_file}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Rank flights and query cheapest routes between cities"
    )

    parser.add_argument(
        "--max-cities",
        type=int,
        default=DEFAULT_MAX_CITIES,
        help=f"Route graph city capacity (default: {DEFAULT_MAX_CITIES})"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for result JSON"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show all flights")

    sort_parser = subparsers.add_parser("sort", help="Rank flights")
    sort_parser.add_argument(
        "criterion",
        choices=[c.value for c in SortCriterion],
        help="Sort key"
    )
    sort_parser.add_argument(
        "--descending",
        action="store_true",
        help="Most punctual first (on-time only)"
    )

    cheapest_parser = subparsers.add_parser("cheapest", help="Cheapest route (Dijkstra)")
    cheapest_parser.add_argument("start", help="Departure city")
    cheapest_parser.add_argument("end", help="Arrival city")

    paths_parser = subparsers.add_parser("paths", help="All simple routes (DFS)")
    paths_parser.add_argument("start", help="Departure city")
    paths_parser.add_argument("end", help="Arrival city")
    paths_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of paths to print"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(args.log_level, args.log_file)

    try:
        settings = SystemSettings(
            max_cities=args.max_cities,
            on_time_descending=getattr(args, "descending", False),
            max_enumerated_paths=getattr(args, "limit", None)
        )
        catalog = build_catalog(settings)

        if args.command == "list":
            payload = run_list(catalog)
        elif args.command == "sort":
            payload = run_sort(
                catalog,
                SortCriterion(args.criterion),
                descending=settings.on_time_descending
            )
        elif args.command == "cheapest":
            payload = run_cheapest(catalog, args.start, args.end)
        else:
            payload = run_paths(
                catalog,
                args.start,
                args.end,
                limit=settings.max_enumerated_paths
            )
    except (FlightQueryError, ValueError) as e:
        logger.error(f"Query failed: {e}")
        print(f"Error: {e}")
        return 1

    # Save result if requested
    if args.output:
        write_output(payload, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
