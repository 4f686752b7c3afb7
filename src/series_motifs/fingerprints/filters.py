"""Window acceptance filters.

A filter is a predicate over the projected values of one candidate window.
It runs before hashing; windows it rejects are neither hashed nor recorded.

Filters are configured by name in the `fingerprint.filters` list of a scan
config, either as a bare name or as a mapping with arguments:

    filters:
      - reject_constant
      - {name: min_distinct, n: 3}
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence, Union

from ..errors import InvalidConfiguration

SequenceFilter = Callable[[Sequence[Any]], bool]


def accept_all(values: Sequence[Any]) -> bool:
    return True


def reject_constant(values: Sequence[Any]) -> bool:
    """Reject windows where every value is the same (flat lines)."""
    return len(set(values)) > 1


def reject_all_zero(values: Sequence[Any]) -> bool:
    return any(v != 0 for v in values)


def min_distinct(n: int) -> SequenceFilter:
    """Accept windows holding at least `n` distinct values."""
    n = int(n)

    def _filter(values: Sequence[Any]) -> bool:
        return len(set(values)) >= n
    return _filter


def min_range(span: float) -> SequenceFilter:
    """Accept windows whose max - min is at least `span` (in projected units)."""

    def _filter(values: Sequence[Any]) -> bool:
        return (max(values) - min(values)) >= span
    return _filter


def all_of(*filters: SequenceFilter) -> SequenceFilter:
    """Combine filters; a window must pass every one of them."""
    if not filters:
        return accept_all
    if len(filters) == 1:
        return filters[0]

    def _filter(values: Sequence[Any]) -> bool:
        return all(f(values) for f in filters)
    return _filter


_SIMPLE: Dict[str, SequenceFilter] = {
    "accept_all": accept_all,
    "reject_constant": reject_constant,
    "reject_all_zero": reject_all_zero,
}

_FACTORIES: Dict[str, Callable[..., SequenceFilter]] = {
    "min_distinct": min_distinct,
    "min_range": min_range,
}


def list_filters() -> List[str]:
    return sorted(list(_SIMPLE) + list(_FACTORIES))


def make_filter(entry: Union[str, Dict[str, Any]]) -> SequenceFilter:
    """Build one filter from a config entry (name or {name: ..., **kwargs})."""
    if isinstance(entry, str):
        name, kwargs = entry, {}
    elif isinstance(entry, dict) and "name" in entry:
        kwargs = {k: v for k, v in entry.items() if k != "name"}
        name = entry["name"]
    else:
        raise InvalidConfiguration(f"Filter entry must be a name or a mapping with 'name': {entry!r}")

    if name in _SIMPLE:
        if kwargs:
            raise InvalidConfiguration(f"Filter '{name}' takes no arguments, got {sorted(kwargs)}")
        return _SIMPLE[name]
    if name in _FACTORIES:
        try:
            return _FACTORIES[name](**kwargs)
        except TypeError as e:
            raise InvalidConfiguration(f"Bad arguments for filter '{name}': {e}") from e
    raise InvalidConfiguration(f"Unknown filter: {name}. Available: {list_filters()}")


def make_filters(entries: Sequence[Union[str, Dict[str, Any]]]) -> SequenceFilter:
    """Build the combined filter for a `fingerprint.filters` list."""
    return all_of(*[make_filter(e) for e in entries or []])
