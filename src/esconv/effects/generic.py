"""Assembly of effect size results.

Every converter funnels through :func:`assemble_result`, so results
from different conversions share one shape and can be combined into
a single table for pooling.
"""

import math
from typing import Iterable, Optional, Union

from ..core.models import EffectSizeResult, EffectSizeType
from ..core.normalization import is_missing
from .derived import lower_d, upper_d


def assemble_result(
    es: float,
    v: float,
    *,
    measure: str,
    totaln: Optional[int] = None,
    info: Optional[str] = None,
    study: Optional[str] = None,
    notices: Iterable[str] = (),
    level: Optional[float] = None,
) -> EffectSizeResult:
    """Package an estimate and its variance with bounds and weight."""
    return EffectSizeResult(
        es=es,
        se=math.sqrt(v),
        var=v,
        ci_lo=lower_d(es, v, level),
        ci_hi=upper_d(es, v, level),
        # A zero variance gives an unbounded weight
        w=1 / v if v > 0 else math.inf,
        totaln=totaln,
        measure=measure,
        info=info,
        study=study,
        notices=tuple(notices),
    )


def esc_generic(
    es: Optional[float],
    v: Optional[float],
    es_type: Union[str, EffectSizeType],
    grp1n: Optional[int] = None,
    grp2n: Optional[int] = None,
    info: Optional[str] = None,
    study: Optional[str] = None,
    notices: Iterable[str] = (),
) -> EffectSizeResult:
    """Build a result from an already computed effect size and variance.

    ``totaln`` is the sum of both group sizes when both are known. If
    either ``es`` or ``v`` is missing the result is the missing sentinel:
    every numeric field is None and only the labels are kept.
    """
    measure = es_type.value if isinstance(es_type, EffectSizeType) else str(es_type)
    if is_missing(grp1n) or is_missing(grp2n):
        totaln = None
    else:
        totaln = int(grp1n) + int(grp2n)

    if is_missing(es) or is_missing(v):
        return EffectSizeResult(
            totaln=totaln,
            measure=measure,
            info=info,
            study=study,
            notices=tuple(notices),
        )
    return assemble_result(
        float(es),
        float(v),
        measure=measure,
        totaln=totaln,
        info=info,
        study=study,
        notices=notices,
    )
