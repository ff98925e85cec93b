from .counter import ShowCount, TrackCounts, count_tracks, log_counts

__all__ = ["ShowCount", "TrackCounts", "count_tracks", "log_counts"]
