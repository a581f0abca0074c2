"""Conversions between effect size metrics."""

from .odds_ratio import convert_d2or, convert_or2d  # noqa: F401
