"""Resolution of optional numeric inputs before a conversion runs."""

from typing import Any, Optional

import pandas as pd

from .errors import MissingInputError
from .models import EffectSizeType

MISSING_UNCERTAINTY = "Either standard error or variance must be specified."

_DEFAULT_INFO = {
    EffectSizeType.D: "effect size OR to effect size d",
    EffectSizeType.COX_D: "effect size OR to effect size Cox d",
    EffectSizeType.G: "effect size OR to effect size Hedges' g",
    EffectSizeType.F: "effect size OR to effect size Cohen's f",
    EffectSizeType.ETA: "effect size OR to effect size eta squared",
    EffectSizeType.LOGIT: "effect size d to effect size logits",
    EffectSizeType.OR: "effect size d to effect size OR",
    EffectSizeType.COX_LOGIT: "effect size d to effect size Cox logits",
    EffectSizeType.COX_OR: "effect size d to effect size Cox OR",
}


def is_missing(value: Any) -> bool:
    """Return True for None, NaN and pandas NA values."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Non-scalar input is never treated as missing
        return False


def resolve_variance(se: Any = None, v: Any = None) -> float:
    """Resolve the variance from a standard error or a variance.

    A usable standard error always wins over a separately supplied
    variance. Raises :class:`MissingInputError` when neither is usable.
    """
    if not is_missing(se):
        if float(se) < 0:
            raise ValueError(f"Standard error must be non-negative, got {se}")
        variance = float(se) ** 2
    elif not is_missing(v):
        variance = float(v)
    else:
        raise MissingInputError(MISSING_UNCERTAINTY)
    if variance < 0:
        raise ValueError(f"Variance must be non-negative, got {variance}")
    return variance


def normalize_totaln(totaln: Any) -> Optional[int]:
    """Normalize a total sample size; missing or NaN becomes None.

    Fractional and non-positive sizes raise ``ValueError``.
    """
    if is_missing(totaln):
        return None
    if isinstance(totaln, float) and not totaln.is_integer():
        raise ValueError(f"totaln must be a whole number, got {totaln}")
    if totaln <= 0:
        raise ValueError(f"totaln must be positive, got {totaln}")
    return int(totaln)


def default_info(es_type: EffectSizeType) -> str:
    """Description used when the caller does not supply one."""
    return _DEFAULT_INFO[es_type]
