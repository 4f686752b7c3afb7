"""Record projections.

Projections extract one attribute from a raw record: the value compared
between windows, the index reported in occurrences, or metadata carried along.
The helpers here target `SeriesPoint` records produced by series sources.
"""

from __future__ import annotations
from typing import Any, Callable, Dict

from ..errors import InvalidConfiguration
from ..sources.base import SeriesPoint


def quantize(decimals: int = 4) -> Callable[[float], int]:
    """Map a float to an int at fixed decimal precision to absorb float noise."""
    if decimals < 0:
        raise InvalidConfiguration(f"precision must be >= 0, got {decimals}")
    scale = 10 ** decimals

    def _quantize(value: float) -> int:
        return int(round(value * scale))
    return _quantize


def point_index(point: SeriesPoint) -> Any:
    return point.index


def point_value(point: SeriesPoint) -> float:
    return point.value


def no_meta(point: SeriesPoint) -> None:
    return None


def point_raw_value(point: SeriesPoint) -> float:
    """Metadata projection carrying the unquantised value."""
    return point.value


def quantized_value(decimals: int = 4) -> Callable[[SeriesPoint], int]:
    """Value projection for SeriesPoint records."""
    q = quantize(decimals)

    def _value(point: SeriesPoint) -> int:
        return q(point.value)
    return _value


_META: Dict[str, Callable[[SeriesPoint], Any]] = {
    "none": no_meta,
    "value": point_raw_value,
}


def make_meta(name: str) -> Callable[[SeriesPoint], Any]:
    if name not in _META:
        raise InvalidConfiguration(f"Unknown meta projection: {name}. Available: {sorted(_META)}")
    return _META[name]
