"""Source registry.

Sources are configured by `kind` in the `series` section of a scan config.
New kinds can be registered at runtime without modifying this file.
"""

from __future__ import annotations
from typing import Callable, Dict

from .base import SeriesSource, SeriesSpec
from .local_table import LocalTableSource
from .synthetic import RepeatedRandomSource, SincSource, SineSource

SourceFactory = Callable[[SeriesSpec], SeriesSource]

_STATIC_REGISTRY: Dict[str, SourceFactory] = {
    "sine": SineSource,
    "sinc": SincSource,
    "repeated_random": RepeatedRandomSource,
    "local_table": LocalTableSource,
}

_DYNAMIC_REGISTRY: Dict[str, SourceFactory] = {}


def register_source(kind: str, factory: SourceFactory) -> None:
    """Register a new source kind.

    Example:
        from series_motifs.sources import SeriesSpec, register_source

        register_source("my_sensor", lambda spec: MySensorSource(spec))
    """
    if kind in _STATIC_REGISTRY or kind in _DYNAMIC_REGISTRY:
        raise ValueError(f"Source kind '{kind}' is already registered. Use a different name.")
    _DYNAMIC_REGISTRY[kind] = factory


def unregister_source(kind: str) -> None:
    """Unregister a dynamically registered source."""
    _DYNAMIC_REGISTRY.pop(kind, None)


def list_sources() -> Dict[str, str]:
    """List all registered sources (static + dynamic)."""
    all_sources = {kind: "static" for kind in _STATIC_REGISTRY}
    all_sources.update({kind: "dynamic" for kind in _DYNAMIC_REGISTRY})
    return all_sources


def make_source(spec: SeriesSpec) -> SeriesSource:
    if spec.kind in _STATIC_REGISTRY:
        return _STATIC_REGISTRY[spec.kind](spec)
    if spec.kind in _DYNAMIC_REGISTRY:
        return _DYNAMIC_REGISTRY[spec.kind](spec)
    available = list(_STATIC_REGISTRY) + list(_DYNAMIC_REGISTRY)
    raise ValueError(
        f"Unknown source kind: {spec.kind}. "
        f"Available: {available}. "
        f"Register dynamically with register_source()"
    )
