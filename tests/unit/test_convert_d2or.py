"""Unit tests for converting d back to log odds and odds ratios."""

import math

import pytest

from esconv.convert.odds_ratio import convert_d2or, convert_or2d


class TestConvertD2Or:
    """Tests for convert_d2or."""

    def test_logit(self) -> None:
        result = convert_d2or(0.5, se=0.2)
        assert result.es == pytest.approx(0.5 * math.pi / math.sqrt(3))
        assert result.var == pytest.approx(0.04 * math.pi ** 2 / 3)
        assert result.measure == "logit"
        assert result.info == "effect size d to effect size logits"

    def test_odds_ratio_exponentiated(self) -> None:
        """Test es and bounds are exponentiated, variance stays on log scale."""
        logit = convert_d2or(0.5, se=0.2, es_type="logit")
        odds = convert_d2or(0.5, se=0.2, es_type="or")
        assert odds.es == pytest.approx(math.exp(logit.es))
        assert odds.ci_lo == pytest.approx(math.exp(logit.ci_lo))
        assert odds.ci_hi == pytest.approx(math.exp(logit.ci_hi))
        assert odds.var == pytest.approx(logit.var)
        assert odds.w == pytest.approx(logit.w)
        assert odds.measure == "or"

    def test_cox(self) -> None:
        log = convert_d2or(0.5, v=0.04, es_type="cox_logit")
        assert log.es == pytest.approx(0.5 * 1.65)
        assert log.var == pytest.approx(0.04 * 1.65 ** 2)
        assert log.measure == "cox log"
        odds = convert_d2or(0.5, v=0.04, es_type="cox.or")
        assert odds.es == pytest.approx(math.exp(0.5 * 1.65))
        assert odds.measure == "cox or"

    def test_inverse_of_or2d(self) -> None:
        """Test converting an OR to d and back recovers the OR."""
        d = convert_or2d(3.56, se=0.91)
        back = convert_d2or(d.es, v=d.var, es_type="or")
        assert back.es == pytest.approx(3.56)
        assert back.se == pytest.approx(0.91)

    def test_missing_uncertainty(self) -> None:
        result = convert_d2or(0.5)
        assert result.is_missing
        assert result.measure == "logit"
        assert len(result.notices) == 1

    def test_forward_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cannot convert d"):
            convert_d2or(0.5, se=0.2, es_type="g")
