"""Hashing utilities.

Window digests are unsigned 64-bit integers computed with BLAKE2b over a
per-value key that follows `==`:
- numbers compare across types (1 == 1.0 == Decimal("1.00") == np.int64(1)),
  so they are keyed by exact integer or float value
- str / bytes are keyed by content
- anything else is keyed by its own `hash()`

Numeric, str and bytes keys are stable across processes. Keys taken from
`hash()` are only stable within one process (str-containing tuples, for
instance, are salted by PYTHONHASHSEED).

Run configs are fingerprinted with SHA-256 so manifests can be matched to
the config that produced them.
"""

from __future__ import annotations
import hashlib
import json
import numbers
from typing import Any, Dict, Hashable, Iterable


def _number_key(v: numbers.Number) -> bytes:
    if isinstance(v, numbers.Complex) and not isinstance(v, numbers.Real):
        if v.imag != 0:
            return b"h" + hash(v).to_bytes(8, "big", signed=True)
        v = v.real
    if isinstance(v, numbers.Integral):
        return b"i" + str(int(v)).encode("ascii")
    try:
        i = int(v)
        if i == v:
            return b"i" + str(i).encode("ascii")
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        f = float(v)
        if f == v:
            return b"f" + repr(f).encode("ascii")
    except (TypeError, ValueError, OverflowError):
        pass
    # NaN, or a Decimal/Fraction no float represents exactly
    return b"h" + hash(v).to_bytes(8, "big", signed=True)


def value_key(v: Hashable) -> bytes:
    """Byte key of one window value; values that compare equal share a key."""
    if isinstance(v, str):
        return b"s" + v.encode("utf-8", "surrogatepass")
    if isinstance(v, bytes):
        return b"b" + v
    if isinstance(v, numbers.Number):
        return _number_key(v)
    return b"h" + hash(v).to_bytes(8, "big", signed=True)


def hash_sequence(values: Iterable[Hashable]) -> int:
    """Fold a running hash state over `values` in order and return a 64-bit digest."""
    h = hashlib.blake2b(digest_size=8)
    for v in values:
        key = value_key(v)
        # length prefix keeps element boundaries
        h.update(len(key).to_bytes(8, "big"))
        h.update(key)
    return int.from_bytes(h.digest(), "big")


def config_digest(cfg: Dict[str, Any]) -> str:
    """SHA-256 hex digest of a JSON-serialisable config, independent of key order."""
    blob = json.dumps(cfg, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()
