"""Core domain models for effect size conversions."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EffectSizeType(str, Enum):
    """Target metrics a conversion can produce.

    The first five are produced from an odds ratio, the remaining four
    are produced from Cohen's d when converting back to the log-odds
    scale.
    """

    D = "d"
    COX_D = "cox_d"
    G = "g"
    F = "f"
    ETA = "eta"
    LOGIT = "logit"
    OR = "or"
    COX_LOGIT = "cox_logit"
    COX_OR = "cox_or"

    @classmethod
    def parse(cls, value: Union[str, "EffectSizeType"]) -> "EffectSizeType":
        """Parse a metric name, accepting ``cox.d`` style spellings."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace(".", "_").replace(" ", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown effect size type: {value!r}") from None


_ALIASES = {
    "cox_log": "cox_logit",
    "hedges_g": "g",
    "cohens_d": "d",
    "cohens_f": "f",
    "eta_squared": "eta",
}

FORWARD_TYPES = frozenset(
    {EffectSizeType.D, EffectSizeType.COX_D, EffectSizeType.G, EffectSizeType.F, EffectSizeType.ETA}
)
REVERSE_TYPES = frozenset(
    {EffectSizeType.LOGIT, EffectSizeType.OR, EffectSizeType.COX_LOGIT, EffectSizeType.COX_OR}
)


class EffectSizeResult(BaseModel):
    """Effect size with its uncertainty, ready for pooling.

    Numeric fields are ``None`` when the conversion could not be
    computed. ``notices`` holds the non-fatal diagnostics raised while
    converting (missing uncertainty, missing sample size).
    """

    model_config = ConfigDict(frozen=True)

    es: Optional[float] = None
    se: Optional[float] = Field(None, ge=0.0)
    var: Optional[float] = Field(None, ge=0.0)
    ci_lo: Optional[float] = None
    ci_hi: Optional[float] = None
    w: Optional[float] = None
    totaln: Optional[int] = None
    measure: str
    info: Optional[str] = None
    study: Optional[str] = None
    notices: Tuple[str, ...] = ()

    @property
    def is_missing(self) -> bool:
        return self.es is None

    def to_dict(self) -> Dict[str, Any]:
        """Export using the field names shared by every conversion."""
        return {
            "es": self.es,
            "se": self.se,
            "var": self.var,
            "ci.lo": self.ci_lo,
            "ci.hi": self.ci_hi,
            "w": self.w,
            "totaln": self.totaln,
            "measure": self.measure,
            "info": self.info,
            "study": self.study,
        }


class ConversionInput(BaseModel):
    """One odds ratio reported by a study, with whatever uncertainty it gives.

    The standard error and variance are both on the log-odds scale even
    though ``odds_ratio`` itself is exponentiated.
    """

    odds_ratio: float
    se: Optional[float] = None
    var: Optional[float] = None
    totaln: Optional[int] = Field(None, gt=0)
    es_type: EffectSizeType = EffectSizeType.D
    info: Optional[str] = None
    study: Optional[str] = None

    @field_validator("totaln", mode="before")
    @classmethod
    def _nan_totaln(cls, v: Any) -> Any:
        """NaN sample sizes count as not reported."""
        if isinstance(v, float) and math.isnan(v):
            return None
        return v

    @field_validator("es_type", mode="before")
    @classmethod
    def _parse_es_type(cls, v: Any) -> EffectSizeType:
        return EffectSizeType.parse(v)

    def convert(self) -> EffectSizeResult:
        from ..convert.odds_ratio import convert_or2d

        return convert_or2d(
            self.odds_ratio,
            se=self.se,
            v=self.var,
            totaln=self.totaln,
            es_type=self.es_type,
            info=self.info,
            study=self.study,
        )
