"""Catalog loading and the sequential crawl over every show."""

import json
import logging
from pathlib import Path
from typing import List

from ..models import Mixtape, Show
from .show import RunTotals, ShowPipeline

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the input catalog cannot be read or has the wrong shape."""

    pass


def load_catalog(catalog_file: Path) -> List[Mixtape]:
    """
    Parse the mixtape catalog.

    Expected format::

        {"results": [{"mixtape_alias": "...",
                      "credits": [{"name": "...", "path": "..."}]}]}

    Raises:
        CatalogError: If the file is missing, not JSON, or misses a field
    """
    try:
        with open(catalog_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise CatalogError(f"Cannot read catalog {catalog_file}: {e}") from e

    try:
        mixtapes = []
        for entry in data["results"]:
            credits = [
                Show(name=credit["name"], path=credit["path"])
                for credit in entry["credits"]
            ]
            mixtapes.append(Mixtape(alias=entry["mixtape_alias"], credits=credits))
    except (KeyError, TypeError) as e:
        raise CatalogError(f"Malformed catalog {catalog_file}: missing {e}") from e

    return mixtapes


class CrawlDriver:
    """Run the show pipeline over a catalog, strictly in input order."""

    def __init__(self, pipeline: ShowPipeline):
        self.pipeline = pipeline

    def run(self, mixtapes: List[Mixtape]) -> RunTotals:
        totals = RunTotals()
        total_shows = sum(len(mixtape.credits) for mixtape in mixtapes)
        logger.info(f"Catalog: {len(mixtapes)} mixtapes, {total_shows} shows")

        failed_shows = []
        show_index = 0
        for mixtape in mixtapes:
            logger.info(f"Mixtape: {mixtape.alias}")
            self.pipeline.writer.mixtape_dir(mixtape.alias).mkdir(
                parents=True, exist_ok=True
            )

            for show in mixtape.credits:
                result = self.pipeline.process_show(
                    show, mixtape.alias, show_index, total_shows, totals
                )
                if not result.succeeded:
                    failed_shows.append(show.name)
                show_index += 1

        logger.info("All shows processed")
        logger.info(
            f"Processed: {totals.processed}, skipped: {totals.skipped}, "
            f"failed: {totals.failed}, tracks written: {totals.tracks_written}"
        )
        if failed_shows:
            logger.warning(
                f"{len(failed_shows)} shows failed and will be retried on the next run: "
                f"{', '.join(failed_shows)}"
            )
        return totals
