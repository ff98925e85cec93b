from .driver import CatalogError, CrawlDriver, load_catalog
from .show import RunTotals, ShowPipeline, ShowResult, ShowState

__all__ = [
    "CatalogError",
    "CrawlDriver",
    "load_catalog",
    "RunTotals",
    "ShowPipeline",
    "ShowResult",
    "ShowState",
]
