"""Core runtime services for sysclean.

Configuration, logging, cancellation, background tasks, the progress
indicator, the system monitor and memory reclamation.
"""
