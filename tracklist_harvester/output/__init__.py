from .writer import TracklistWriter, sanitize_show_name

__all__ = ["TracklistWriter", "sanitize_show_name"]
