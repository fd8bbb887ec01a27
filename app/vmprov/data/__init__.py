"""Bundled data files for vmprov."""
