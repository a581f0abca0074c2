"""esconv: effect size conversions for meta-analysis.

Converts odds ratios into standardized mean differences (Cohen's d,
Cox's d, Hedges' g) and variance-explained metrics (Cohen's f, eta
squared), propagating the variance so that the results can be pooled
with inverse-variance weights.

Example:
    >>> from esconv import convert_or2d
    >>> result = convert_or2d(3.56, se=0.91)
    >>> round(result.es, 3)
    0.7
"""

from .convert.odds_ratio import convert_d2or, convert_or2d  # noqa: F401
from .core.errors import EsconvError, MissingInputError  # noqa: F401
from .core.models import ConversionInput, EffectSizeResult, EffectSizeType  # noqa: F401
from .effects.generic import esc_generic  # noqa: F401
from .io.table import combine_results, convert_table  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "convert_or2d",
    "convert_d2or",
    "esc_generic",
    "combine_results",
    "convert_table",
    "ConversionInput",
    "EffectSizeResult",
    "EffectSizeType",
    "EsconvError",
    "MissingInputError",
]
