"""series_motifs

Sliding-window fingerprinting for ordered data series: find repeated
sub-sequences ("motifs") by hashing fixed-size windows and grouping windows
whose digests match.

Public API surface:
- series_motifs.fingerprints.Fingerprinter : the windowed fingerprinting engine
- series_motifs.sources : add/extend series sources
- series_motifs.pipeline.scan.scan_series : run a configured scan
- series_motifs.cli.main : CLI entrypoint
"""
__all__ = ["__version__"]
__version__ = "0.1.0"
