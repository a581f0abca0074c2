"""Tests for runtime settings and log formatting."""

import json
import logging

import pytest

from esconv.config.settings import Settings, settings
from esconv.effects.generic import assemble_result
from esconv.utils.logging import ContextFormatter, JSONFormatter, TEXT_FORMAT, build_formatter


def make_record(extra=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="esconv.convert.odds_ratio",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Either standard error or variance must be specified.",
        args=(),
        exc_info=None,
    )
    if extra is not None:
        record.extra = extra
    return record


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        s = Settings()
        assert s.ci_level == 0.95
        assert s.log_format in ("json", "text")

    def test_ci_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESCONV_CI_LEVEL", "0.9")
        assert Settings().ci_level == 0.9

    def test_ci_level_bounds(self) -> None:
        with pytest.raises(ValueError):
            Settings(ci_level=1.5)

    def test_log_format_pattern(self) -> None:
        with pytest.raises(ValueError):
            Settings(log_format="xml")

    def test_ci_level_changes_interval_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the configured level drives ci.lo/ci.hi of every result."""
        wide = assemble_result(0.5, 0.04, measure="d")
        monkeypatch.setattr(settings, "ci_level", 0.9)
        narrow = assemble_result(0.5, 0.04, measure="d")
        assert narrow.ci_hi - narrow.ci_lo == pytest.approx(2 * 1.644854 * 0.2, abs=1e-5)
        assert narrow.ci_hi - narrow.ci_lo < wide.ci_hi - wide.ci_lo
        # Variance and weight do not depend on the level
        assert narrow.var == wide.var
        assert narrow.w == wide.w


class TestFormatters:
    """Tests for the JSON and text formatters."""

    def test_json_formatter_merges_context(self) -> None:
        line = JSONFormatter().format(make_record({"es_type": "g", "study": "Smith 2010"}))
        data = json.loads(line)
        assert data["level"] == "WARNING"
        assert data["logger"] == "esconv.convert.odds_ratio"
        assert data["message"].startswith("Either standard error")
        assert data["es_type"] == "g"
        assert data["study"] == "Smith 2010"

    def test_json_formatter_skips_empty_context(self) -> None:
        data = json.loads(JSONFormatter().format(make_record({"es_type": "d", "study": None})))
        assert "study" not in data
        data = json.loads(JSONFormatter().format(make_record()))
        assert "es_type" not in data

    def test_text_formatter_appends_context(self) -> None:
        line = ContextFormatter(TEXT_FORMAT).format(make_record({"es_type": "cox_d", "study": "Lee"}))
        assert "WARNING" in line
        assert line.endswith("[es_type=cox_d study=Lee]")

    def test_text_formatter_without_context(self) -> None:
        line = ContextFormatter(TEXT_FORMAT).format(make_record())
        assert line.endswith("must be specified.")

    def test_build_formatter(self) -> None:
        assert isinstance(build_formatter("json"), JSONFormatter)
        assert isinstance(build_formatter("text"), ContextFormatter)
