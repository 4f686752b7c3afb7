"""Run outputs: occurrence tables, manifests and summary reports."""
