"""Bundled data files for sysclean."""
