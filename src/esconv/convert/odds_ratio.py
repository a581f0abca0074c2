"""Conversions between odds ratios and standardized mean differences.

An odds ratio is moved onto the d scale by dividing its log by the
standard deviation of the logistic distribution, ``pi / sqrt(3)``
(Hasselblad & Hedges), or by Cox's empirically calibrated constant
1.65. The variance of the log odds is scaled by the squared constant.

The standard error or variance passed in must be on the log-odds
scale, even though ``or_`` itself is the exponentiated ratio.

References:
    Lipsey MW, Wilson DB. 2001. Practical meta-analysis. Thousand Oaks,
    Calif: Sage Publications.

    Wilson DB. 2016. Formulas Used by the "Practical Meta-Analysis
    Effect Size Calculator". Unpublished manuscript: George Mason
    University.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Union

from ..core.errors import MissingInputError
from ..core.models import FORWARD_TYPES, REVERSE_TYPES, EffectSizeResult, EffectSizeType
from ..core.normalization import default_info, normalize_totaln, resolve_variance
from ..effects.derived import cohens_f, eta_squared, hedges_g
from ..effects.generic import assemble_result, esc_generic
from ..utils.logging import get_logger

logger = get_logger(__name__)

LOGIT_SD = math.pi / math.sqrt(3)
LOGIT_VAR = (math.pi ** 2) / 3
COX_CONSTANT = 1.65

MISSING_TOTALN_G = "Total sample size (totaln) is needed to calculate Hedges' g."

_MEASURE = {
    EffectSizeType.COX_D: "cox d",
    EffectSizeType.LOGIT: "logit",
    EffectSizeType.OR: "or",
    EffectSizeType.COX_LOGIT: "cox log",
    EffectSizeType.COX_OR: "cox or",
}


def _measure(es_type: EffectSizeType) -> str:
    return _MEASURE.get(es_type, es_type.value)


def _warn(message: str, es_type: EffectSizeType, study: Optional[str]) -> None:
    logger.warning(message, extra={"extra": {"es_type": es_type.value, "study": study}})


def _missing_result(
    es_type: EffectSizeType, exc: MissingInputError, study: Optional[str]
) -> EffectSizeResult:
    _warn(str(exc), es_type, study)
    return esc_generic(es=None, v=None, es_type=_measure(es_type), notices=(str(exc),))


def convert_or2d(
    or_: float,
    se: Optional[float] = None,
    v: Optional[float] = None,
    totaln: Any = None,
    es_type: Union[str, EffectSizeType] = EffectSizeType.D,
    info: Optional[str] = None,
    study: Optional[str] = None,
) -> EffectSizeResult:
    """Convert an odds ratio into d, Cox's d, Hedges' g, Cohen's f or eta squared.

    Args:
        or_: The odds ratio. Must be positive; ``math.log`` raises a
            ``ValueError`` otherwise.
        se: Standard error of the log odds. Takes precedence over ``v``.
        v: Variance of the log odds.
        totaln: Total sample size, required for Hedges' g.
        es_type: One of ``d``, ``cox_d``, ``g``, ``f`` or ``eta``.
        info: Free-text description; generated from ``es_type`` if None.
        study: Study label.

    Returns:
        The converted effect size. If neither ``se`` nor ``v`` is usable
        the result has every numeric field set to None and carries a
        notice instead of raising.
    """
    es_type = EffectSizeType.parse(es_type)
    if es_type not in FORWARD_TYPES:
        raise ValueError(f"Cannot convert an odds ratio to {es_type.value!r}")

    try:
        variance = resolve_variance(se, v)
    except MissingInputError as exc:
        return _missing_result(es_type, exc, study)

    totaln = normalize_totaln(totaln)
    if info is None:
        info = default_info(es_type)
    notices: List[str] = []

    log_or = math.log(or_)
    measure = _measure(es_type)
    if es_type is EffectSizeType.COX_D:
        es = log_or / COX_CONSTANT
        variance = variance / COX_CONSTANT ** 2
    else:
        es = log_or / LOGIT_SD
        variance = variance / LOGIT_VAR

        if es_type is EffectSizeType.G:
            if totaln is None:
                _warn(MISSING_TOTALN_G, es_type, study)
                notices.append(MISSING_TOTALN_G)
                # Uncorrected value is returned, so label it as d
                measure = EffectSizeType.D.value
            else:
                es = hedges_g(es, totaln)
        elif es_type is EffectSizeType.F:
            es = cohens_f(es)
        elif es_type is EffectSizeType.ETA:
            es = eta_squared(es)

    return assemble_result(
        es,
        variance,
        measure=measure,
        totaln=totaln,
        info=info,
        study=study,
        notices=notices,
    )


def convert_d2or(
    d: float,
    se: Optional[float] = None,
    v: Optional[float] = None,
    totaln: Any = None,
    es_type: Union[str, EffectSizeType] = EffectSizeType.LOGIT,
    info: Optional[str] = None,
    study: Optional[str] = None,
) -> EffectSizeResult:
    """Convert Cohen's d back to log odds or an odds ratio.

    ``logit`` and ``cox_logit`` return log odds. ``or`` and ``cox_or``
    exponentiate the estimate and its confidence bounds, while ``se``,
    ``var`` and ``w`` stay on the log-odds scale so the result can be
    pooled like any other.
    """
    es_type = EffectSizeType.parse(es_type)
    if es_type not in REVERSE_TYPES:
        raise ValueError(f"Cannot convert d to {es_type.value!r}")

    try:
        variance = resolve_variance(se, v)
    except MissingInputError as exc:
        return _missing_result(es_type, exc, study)

    totaln = normalize_totaln(totaln)
    if info is None:
        info = default_info(es_type)

    if es_type in (EffectSizeType.LOGIT, EffectSizeType.OR):
        es = d * LOGIT_SD
        variance = variance * LOGIT_VAR
    else:
        es = d * COX_CONSTANT
        variance = variance * COX_CONSTANT ** 2

    result = assemble_result(
        es,
        variance,
        measure=_measure(es_type),
        totaln=totaln,
        info=info,
        study=study,
    )
    if es_type in (EffectSizeType.OR, EffectSizeType.COX_OR):
        result = result.model_copy(
            update={
                "es": math.exp(result.es),
                "ci_lo": math.exp(result.ci_lo),
                "ci_hi": math.exp(result.ci_hi),
            }
        )
    return result
