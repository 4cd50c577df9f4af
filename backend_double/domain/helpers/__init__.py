"""Domain helper functions."""

from .operation_markers import fallible, is_fallible, stream_type, streams
from .type_projection import coerce, conforms, describe

__all__ = [
    # Operation markers
    "fallible",
    "streams",
    "is_fallible",
    "stream_type",
    # Type projection
    "conforms",
    "describe",
    "coerce",
]
