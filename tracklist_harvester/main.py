"""Main orchestrator for the tracklist harvester."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from .config import (
    API_BASE_URL,
    DEFAULT_CATALOG_FILE,
    DEFAULT_CHECKPOINT_FILE,
    DEFAULT_OUTPUT_DIR,
    RATE_LIMIT_BURST,
    REQUESTS_PER_SECOND,
)
from .output import TracklistWriter
from .pipeline import CatalogError, CrawlDriver, ShowPipeline, load_catalog
from .report import count_tracks, log_counts
from .scrapers import EpisodeFetcher, TokenBucket, TracklistFetcher, create_session
from .state import CheckpointStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="NTS show tracklist harvester")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    crawl = subparsers.add_parser("crawl", help="Fetch tracklists for every show")
    crawl.add_argument("--catalog", default=DEFAULT_CATALOG_FILE, help="Mixtape catalog JSON")
    crawl.add_argument("--output", default=DEFAULT_OUTPUT_DIR, help="Output folder")
    crawl.add_argument("--checkpoint", default=DEFAULT_CHECKPOINT_FILE, help="Checkpoint file")
    crawl.add_argument("--api-base", default=API_BASE_URL, help="API base URL")
    crawl.add_argument(
        "--rate",
        type=float,
        default=REQUESTS_PER_SECOND,
        help="Maximum requests per second",
    )

    count = subparsers.add_parser("count", help="Count harvested tracks")
    count.add_argument("--output", default=DEFAULT_OUTPUT_DIR, help="Output folder")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("a command is required (crawl or count)")
    return args


def build_driver(args: argparse.Namespace) -> CrawlDriver:
    """Wire fetchers, local state and the pipeline from CLI options."""
    rate_limiter = TokenBucket(rate=args.rate, capacity=RATE_LIMIT_BURST)
    session = create_session()
    episode_fetcher = EpisodeFetcher(rate_limiter, session=session, base_url=args.api_base)
    tracklist_fetcher = TracklistFetcher(rate_limiter, session=session, base_url=args.api_base)

    checkpoint = CheckpointStore(Path(args.checkpoint))
    checkpoint.load()

    pipeline = ShowPipeline(
        episode_fetcher,
        tracklist_fetcher,
        checkpoint,
        TracklistWriter(Path(args.output)),
    )
    return CrawlDriver(pipeline)


def run_crawl(args: argparse.Namespace) -> int:
    logger.info("=" * 60)
    logger.info("Starting Tracklist Harvester")
    logger.info("=" * 60)

    try:
        mixtapes = load_catalog(Path(args.catalog))
    except CatalogError as e:
        logger.error(str(e))
        return 1

    driver = build_driver(args)
    totals = driver.run(mixtapes)

    logger.info("=" * 60)
    logger.info(f"Shows attempted: {totals.attempted}")
    logger.info(f"Tracks written this run: {totals.tracks_written}")
    logger.info("=" * 60)
    return 0


def run_count(args: argparse.Namespace) -> int:
    output_dir = Path(args.output)
    if not output_dir.is_dir():
        logger.error(f"Output folder does not exist: {output_dir}")
        return 1
    log_counts(count_tracks(output_dir))
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Main orchestration function."""
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "count":
        return run_count(args)
    return run_crawl(args)


if __name__ == "__main__":
    sys.exit(main())
