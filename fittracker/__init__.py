"""Fitness tracker: parse step and workout records and report distance, speed and calories."""

__version__ = "0.1.0"