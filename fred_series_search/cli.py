"""Command line entry point for FRED series discovery."""

import argparse
import logging
import sys

from fred_series_search.errors import FredError
from fred_series_search.models import SearchOptions
from fred_series_search.models.options import (
    FILTER_VARIABLES,
    ORDER_BY_FIELDS,
    SEARCH_TYPES,
    SORT_ORDERS,
)
from fred_series_search.tools import (
    get_high_frequency_indicators,
    get_series_info,
    search_series,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search FRED economic series")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search series by text, tags or filters")
    search.add_argument("search_text", nargs="?", help="Free-text query")
    search.add_argument("--search-type", choices=SEARCH_TYPES)
    search.add_argument("--tags", dest="tag_names", help="Comma-separated tags to require")
    search.add_argument(
        "--exclude-tags", dest="exclude_tag_names", help="Comma-separated tags to exclude"
    )
    search.add_argument("--limit", type=int)
    search.add_argument("--offset", type=int)
    search.add_argument("--order-by", choices=ORDER_BY_FIELDS)
    search.add_argument("--sort-order", choices=SORT_ORDERS)
    search.add_argument("--filter-variable", choices=FILTER_VARIABLES)
    search.add_argument("--filter-value")

    high_frequency = subparsers.add_parser(
        "high-frequency", help="Most popular Daily and Weekly indicators"
    )
    high_frequency.add_argument(
        "--limit",
        type=int,
        default=100,
        help="Number of indicators to show (default: 100)",
    )

    series = subparsers.add_parser("series", help="Show details for one series")
    series.add_argument("series_id", help="FRED series ID, e.g. DGS10")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "search":
            options = SearchOptions(
                search_text=args.search_text,
                search_type=args.search_type,
                tag_names=args.tag_names,
                exclude_tag_names=args.exclude_tag_names,
                limit=args.limit,
                offset=args.offset,
                order_by=args.order_by,
                sort_order=args.sort_order,
                filter_variable=args.filter_variable,
                filter_value=args.filter_value,
            )
            content = search_series(options)
        elif args.command == "high-frequency":
            content = get_high_frequency_indicators(args.limit)
        else:
            content = get_series_info(args.series_id)
    except FredError as e:
        print(f"Error: {e}")
        sys.exit(1)

    for block in content:
        print(block["text"])


if __name__ == "__main__":
    main()
