"""
FirstGov Search - CLI Entry Point

Usage:
  # Search and print every hit
  python main.py search "uncle sam"

  # Start at the 100th match, 50 hits per page, stop after 120 records
  python main.py search commerce --begin-at 100 --per-page 50 --limit 120

  # Restrict to specific domains
  python main.py search export --option pl=domain --option domain=osec.doc.gov+itd.doc.gov
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv
load_dotenv()


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("firstgov_search")


def parse_option(text: str):
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {text!r}")
    return key, value


def parse_args():
    parser = argparse.ArgumentParser(
        description="FirstGov Search: query the FirstGov.gov federal search portal"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Run a query and print the hits")
    search_parser.add_argument("query", help="Free-text query")
    search_parser.add_argument(
        "--begin-at", type=int, default=None, help="Start at this match number (1-based)"
    )
    search_parser.add_argument(
        "--per-page", type=int, default=None, help="Hits per page, max 100 (default: 20)"
    )
    search_parser.add_argument(
        "--format", choices=["detailed", "brief"], default=None, help="Result format"
    )
    search_parser.add_argument(
        "--match",
        choices=["all", "any", "phrase", "name", "urls"],
        default=None,
        help="How the keywords must match (default: all)",
    )
    search_parser.add_argument(
        "--option",
        type=parse_option,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra site option, may be repeated",
    )
    search_parser.add_argument(
        "--limit", type=int, default=None, help="Stop after this many records"
    )

    return parser.parse_args()


def build_options(args) -> dict:
    options = dict(args.option)
    if args.begin_at is not None:
        options["begin_at"] = args.begin_at
    if args.per_page is not None:
        options["nr"] = args.per_page
    if args.format is not None:
        options["de"] = args.format
    if args.match is not None:
        options["mt0"] = args.match
    return options


async def run_search(query: str, options: dict, limit=None) -> int:
    from firstgov_search.infrastructure.config import Config
    from firstgov_search.infrastructure.container import Container

    config = Config.from_env()
    container = Container(config)
    session = container.new_session(query, options)

    logger.info(f"Searching FirstGov for {query!r} with options={options}")
    records = await session.results(limit=limit)

    print("\n" + "=" * 70)
    print(f"Approximate result count: {session.approximate_result_count}")
    print(f"Pages fetched: {session.pages_fetched} | records: {len(records)}")
    print("=" * 70)
    for i, record in enumerate(records, start=1):
        if record.is_brief:
            print(f"{i:4d}. {record.title}")
            print(f"      {record.url}")
            continue
        score = f"{record.score}%" if record.score is not None else "-"
        print(f"{i:4d}. [{score}] {record.title}")
        print(f"      {record.url}")
        print(f"      {record.description}")

    if session.last_fetch is not None and not session.last_fetch.success:
        print(f"\n⚠ Last fetch failed: {session.last_fetch.error}")
    return len(records)


def main():
    args = parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "search":
        asyncio.run(run_search(args.query, build_options(args), args.limit))


if __name__ == "__main__":
    sys.exit(main())
