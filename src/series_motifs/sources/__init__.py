"""Series sources: ordered, fully materialised record sequences for a scan."""

from .base import SeriesPoint, SeriesSource, SeriesSpec
from .registry import list_sources, make_source, register_source, unregister_source

__all__ = [
    "SeriesPoint",
    "SeriesSource",
    "SeriesSpec",
    "list_sources",
    "make_source",
    "register_source",
    "unregister_source",
]
