"""Tabular input and output for batches of conversions.

``combine_results`` lays out converted effect sizes one study per row,
in the column layout pooling code expects. ``convert_table`` reads
odds ratios from a data frame and converts every row.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from ..config.settings import settings
from ..convert.odds_ratio import convert_or2d
from ..core.models import EffectSizeResult, EffectSizeType
from ..core.normalization import is_missing
from ..utils.logging import get_logger

logger = get_logger(__name__)

COMBINED_COLUMNS = ["study", "es", "weight", "sample.size", "se", "var", "ci.lo", "ci.hi", "measure"]


def _num(value: Optional[float]) -> float:
    return np.nan if value is None else value


def combine_results(results: Iterable[EffectSizeResult]) -> pd.DataFrame:
    """Combine results into a data frame, one row per study.

    Studies without a label are named ``Study 1``, ``Study 2`` and so on
    by their position.
    """
    rows = []
    for i, result in enumerate(results, start=1):
        rows.append({
            "study": result.study if result.study is not None else f"Study {i}",
            "es": _num(result.es),
            "weight": _num(result.w),
            "sample.size": _num(result.totaln),
            "se": _num(result.se),
            "var": _num(result.var),
            "ci.lo": _num(result.ci_lo),
            "ci.hi": _num(result.ci_hi),
            "measure": result.measure,
        })
    return pd.DataFrame(rows, columns=COMBINED_COLUMNS)


def _cell(row: pd.Series, column: Optional[str]):
    if column is None or column not in row.index:
        return None
    value = row[column]
    return None if is_missing(value) else value


def convert_table(
    df: pd.DataFrame,
    or_col: str = "or",
    se_col: Optional[str] = "se",
    var_col: Optional[str] = "var",
    totaln_col: Optional[str] = "totaln",
    study_col: Optional[str] = "study",
    es_type: Union[str, EffectSizeType] = EffectSizeType.D,
) -> List[EffectSizeResult]:
    """Convert every odds ratio in ``df``.

    Only ``or_col`` has to exist; the other columns are used when
    present. Rows without uncertainty produce missing results that keep
    the row's study label; rows without an odds ratio raise
    ``ValueError``.
    """
    if or_col not in df.columns:
        raise KeyError(f"Column {or_col!r} not found; available: {list(df.columns)}")
    es_type = EffectSizeType.parse(es_type)

    results: List[EffectSizeResult] = []
    for idx, row in df.iterrows():
        odds_ratio = _cell(row, or_col)
        if odds_ratio is None:
            raise ValueError(f"Row {idx}: odds ratio is missing")
        study = _cell(row, study_col)
        label = str(study) if study is not None else None
        result = convert_or2d(
            float(odds_ratio),
            se=_cell(row, se_col),
            v=_cell(row, var_col),
            totaln=_cell(row, totaln_col),
            es_type=es_type,
            study=label,
        )
        if result.is_missing and label is not None:
            # Keep the row identifiable in the combined table
            result = result.model_copy(update={"study": label})
        results.append(result)
    n_missing = sum(1 for r in results if r.is_missing)
    logger.info(f"Converted {len(results)} odds ratios to {es_type.value} ({n_missing} without uncertainty)")
    return results


def read_table(path: Path) -> pd.DataFrame:
    return pd.read_csv(path)


def write_table(df: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, float_format=settings.csv_float_format)
    logger.info(f"Wrote {len(df)} rows to {path}")
    return path
