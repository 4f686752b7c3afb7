"""Error types raised by series_motifs."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a fingerprinter or scan is configured with unusable values."""
