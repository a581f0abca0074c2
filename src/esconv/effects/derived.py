"""Adapters from Cohen's d to derived metrics, plus confidence bounds.

These follow Lipsey & Wilson (2001) and Wilson's formulas for the
Practical Meta-Analysis Effect Size Calculator:

- Hedges' g: ``g = d * (1 - 3 / (4N - 9))``
- Cohen's f: ``f = d / 2``
- eta squared: ``eta2 = d^2 / (d^2 + 4)``

Confidence bounds use the normal approximation ``es +/- z * sqrt(v)``.
"""

import math
from typing import Optional

from scipy import stats

from ..config.settings import settings


def hedges_g(d: float, totaln: int) -> float:
    """Apply the small-sample bias correction to Cohen's d."""
    return d * (1 - 3 / (4 * totaln - 9))


def cohens_f(d: float) -> float:
    return d / 2


def eta_squared(d: float) -> float:
    return d ** 2 / (d ** 2 + 4)


def z_critical(level: Optional[float] = None) -> float:
    """Two-sided standard normal quantile for a confidence level."""
    if level is None:
        level = settings.ci_level
    if not 0.0 < level < 1.0:
        raise ValueError(f"Confidence level must be in (0, 1), got {level}")
    return float(stats.norm.ppf(1 - (1 - level) / 2))


def lower_d(es: float, v: float, level: Optional[float] = None) -> float:
    return es - z_critical(level) * math.sqrt(v)


def upper_d(es: float, v: float, level: Optional[float] = None) -> float:
    return es + z_critical(level) * math.sqrt(v)
