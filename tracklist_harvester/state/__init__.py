from .checkpoint import CheckpointStore

__all__ = ["CheckpointStore"]
