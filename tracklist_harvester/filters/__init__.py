from .deduplication import DedupStore, merge_tracks

__all__ = ["DedupStore", "merge_tracks"]
