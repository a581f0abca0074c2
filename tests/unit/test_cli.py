"""Tests for the esconv command-line interface."""

import pandas as pd
from typer.testing import CliRunner

from esconv import __version__
from esconv.cli.main import app

runner = CliRunner()


class TestOr2dCommand:
    """Tests for ``esconv or2d``."""

    def test_converts(self) -> None:
        result = runner.invoke(app, ["or2d", "3.56", "--se", "0.91"])
        assert result.exit_code == 0
        assert "0.2517" in result.output
        assert "effect size OR to effect size d" in result.output

    def test_cox(self) -> None:
        result = runner.invoke(app, ["or2d", "3.56", "--se", "0.91", "--es-type", "cox_d"])
        assert result.exit_code == 0
        assert "cox d" in result.output

    def test_missing_uncertainty_warns(self) -> None:
        result = runner.invoke(app, ["or2d", "2.0"])
        assert result.exit_code == 0
        assert "NA" in result.output
        assert "Either standard error" in result.output

    def test_invalid_odds_ratio(self) -> None:
        result = runner.invoke(app, ["or2d", "0", "--se", "0.5"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_es_type(self) -> None:
        result = runner.invoke(app, ["or2d", "2.0", "--se", "0.5", "--es-type", "omega"])
        assert result.exit_code == 1


class TestD2orCommand:
    def test_converts_to_or(self) -> None:
        result = runner.invoke(app, ["d2or", "0.5", "--se", "0.2", "--es-type", "or"])
        assert result.exit_code == 0
        assert "effect size d to effect size OR" in result.output


class TestBatchCommand:
    """Tests for ``esconv batch``."""

    def test_batch_writes_output(self, tmp_path) -> None:
        source = tmp_path / "studies.csv"
        pd.DataFrame({
            "study": ["A", "B", "C"],
            "or": [3.56, 1.2, 0.7],
            "se": [0.91, None, 0.3],
            "var": [None, None, None],
            "totaln": [40, 60, None],
        }).to_csv(source, index=False)
        out = tmp_path / "converted.csv"

        result = runner.invoke(app, ["batch", str(source), "--es-type", "g", "-o", str(out)])

        assert result.exit_code == 0
        assert out.exists()
        converted = pd.read_csv(out)
        assert list(converted["study"]) == ["A", "B", "C"]
        assert converted["es"].isna().tolist() == [False, True, False]
        assert list(converted["measure"]) == ["g", "g", "d"]

    def test_batch_missing_column(self, tmp_path) -> None:
        source = tmp_path / "bad.csv"
        pd.DataFrame({"odds": [2.0], "se": [0.5]}).to_csv(source, index=False)
        result = runner.invoke(app, ["batch", str(source)])
        assert result.exit_code == 1


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output
