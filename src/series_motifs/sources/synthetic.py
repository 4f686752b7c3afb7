"""Synthetic series for demos and tests.

- sine: sin(2*pi*x/period), periodic so every window recurs
- sinc: sin(t)/t, no repeated windows
- repeated_random: a block of uniform random values repeated `repeats` times
"""

from __future__ import annotations
from datetime import timedelta
from typing import Any, Dict, List

import numpy as np

from .base import SeriesPoint, SeriesSource, SeriesSpec


def _points(spec: SeriesSpec, xs: np.ndarray, values: np.ndarray) -> List[SeriesPoint]:
    start = spec.start_time()
    step = spec.step_seconds
    return [
        SeriesPoint(start + timedelta(seconds=int(x) * step), float(v))
        for x, v in zip(xs, values)
    ]


class SineSource(SeriesSource):
    kind = "sine"

    def metadata(self) -> Dict[str, Any]:
        return {**super().metadata(), "length": self.spec.length, "period": self.spec.period}

    def load(self) -> List[SeriesPoint]:
        xs = np.arange(self.spec.length)
        return _points(self.spec, xs, np.sin(2.0 * np.pi * xs / self.spec.period))


class SincSource(SeriesSource):
    kind = "sinc"

    def metadata(self) -> Dict[str, Any]:
        return {**super().metadata(), "length": self.spec.length, "period": self.spec.period}

    def load(self) -> List[SeriesPoint]:
        half = self.spec.length // 2
        xs = np.arange(-half, self.spec.length - half)
        # np.sinc(u) = sin(pi*u)/(pi*u) with sinc(0) == 1; u = t/pi = 2x/period
        return _points(self.spec, xs, np.sinc(2.0 * xs / self.spec.period))


class RepeatedRandomSource(SeriesSource):
    kind = "repeated_random"

    def metadata(self) -> Dict[str, Any]:
        return {
            **super().metadata(),
            "length": self.spec.length,
            "repeats": self.spec.repeats,
            "seed": self.spec.seed,
        }

    def load(self) -> List[SeriesPoint]:
        rng = np.random.default_rng(self.spec.seed)
        block = rng.random(self.spec.length)
        values = np.tile(block, max(1, self.spec.repeats))
        return _points(self.spec, np.arange(len(values)), values)
