"""sysclean - junk file cleanup, large file ranking and memory reclamation."""

__version__ = "1.0.0"
