"""CLI application using Typer for effect size conversions."""

from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config.settings import settings
from ..convert.odds_ratio import convert_d2or, convert_or2d
from ..core.models import EffectSizeResult
from ..core.normalization import is_missing
from ..io.table import combine_results, convert_table, read_table, write_table
from ..utils.logging import get_logger

app = typer.Typer(
    name="esconv",
    help="Convert odds ratios to standardized effect sizes for meta-analysis",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _fmt(value: Optional[float]) -> str:
    return "NA" if value is None else f"{value:.4f}"


def _print_result(result: EffectSizeResult) -> None:
    table = Table(title="Effect size")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("es", _fmt(result.es))
    table.add_row("se", _fmt(result.se))
    table.add_row("var", _fmt(result.var))
    table.add_row("ci.lo", _fmt(result.ci_lo))
    table.add_row("ci.hi", _fmt(result.ci_hi))
    table.add_row("w", _fmt(result.w))
    table.add_row("totaln", str(result.totaln) if result.totaln is not None else "NA")
    table.add_row("measure", result.measure)
    if result.info:
        table.add_row("info", result.info)
    if result.study:
        table.add_row("study", result.study)
    console.print(table)
    _print_notices(result.notices)


def _print_notices(notices: Iterable[str]) -> None:
    for notice in notices:
        console.print(f"[yellow]Warning: {notice}[/yellow]")


@app.command()
def or2d(
    odds_ratio: float = typer.Argument(..., help="Odds ratio (exponentiated, must be > 0)"),
    se: Optional[float] = typer.Option(None, "--se", help="Standard error of the log odds"),
    var: Optional[float] = typer.Option(None, "--var", "-v", help="Variance of the log odds"),
    totaln: Optional[int] = typer.Option(None, "--totaln", "-n", help="Total sample size"),
    es_type: str = typer.Option(settings.default_es_type, "--es-type", "-t", help="d, cox_d, g, f or eta"),
    info: Optional[str] = typer.Option(None, "--info", help="Description of the conversion"),
    study: Optional[str] = typer.Option(None, "--study", help="Study label"),
) -> None:
    """Convert a single odds ratio."""
    try:
        result = convert_or2d(odds_ratio, se=se, v=var, totaln=totaln, es_type=es_type, info=info, study=study)
    except ValueError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1)
    _print_result(result)


@app.command()
def d2or(
    d: float = typer.Argument(..., help="Cohen's d"),
    se: Optional[float] = typer.Option(None, "--se", help="Standard error of d"),
    var: Optional[float] = typer.Option(None, "--var", "-v", help="Variance of d"),
    totaln: Optional[int] = typer.Option(None, "--totaln", "-n", help="Total sample size"),
    es_type: str = typer.Option("logit", "--es-type", "-t", help="logit, or, cox_logit or cox_or"),
    info: Optional[str] = typer.Option(None, "--info", help="Description of the conversion"),
    study: Optional[str] = typer.Option(None, "--study", help="Study label"),
) -> None:
    """Convert Cohen's d to log odds or an odds ratio."""
    try:
        result = convert_d2or(d, se=se, v=var, totaln=totaln, es_type=es_type, info=info, study=study)
    except ValueError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1)
    _print_result(result)


@app.command()
def batch(
    input_csv: Path = typer.Argument(..., help="CSV file with one odds ratio per row", exists=True),
    es_type: str = typer.Option(settings.default_es_type, "--es-type", "-t", help="d, cox_d, g, f or eta"),
    or_col: str = typer.Option("or", "--or-col", help="Column with odds ratios"),
    se_col: str = typer.Option("se", "--se-col", help="Column with standard errors of the log odds"),
    var_col: str = typer.Option("var", "--var-col", help="Column with variances of the log odds"),
    totaln_col: str = typer.Option("totaln", "--totaln-col", help="Column with total sample sizes"),
    study_col: str = typer.Option("study", "--study-col", help="Column with study labels"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the combined table to this CSV"),
) -> None:
    """
    Convert every odds ratio in a CSV file.

    Only the odds ratio column is required. Rows lacking both a
    standard error and a variance are kept as missing rows.

    Examples:
        esconv batch studies.csv --es-type g -o converted.csv
    """
    console.print(f"[bold blue]Converting odds ratios to {es_type}[/bold blue]")
    try:
        df = read_table(input_csv)
        results = convert_table(
            df,
            or_col=or_col,
            se_col=se_col,
            var_col=var_col,
            totaln_col=totaln_col,
            study_col=study_col,
            es_type=es_type,
        )
    except (KeyError, ValueError) as exc:
        logger.error(f"Batch conversion of {input_csv} failed: {exc}")
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1)

    combined = combine_results(results)
    table = Table(title=f"{len(combined)} studies")
    for column in combined.columns:
        table.add_column(column, justify="left" if column in ("study", "measure") else "right")
    for _, row in combined.iterrows():
        table.add_row(*[
            str(row[c]) if c in ("study", "measure") else _fmt(None if is_missing(row[c]) else row[c])
            for c in combined.columns
        ])
    console.print(table)
    for result in results:
        _print_notices(f"{result.study or 'unnamed study'}: {n}" for n in result.notices)

    if output is not None:
        write_table(combined, output)
        console.print(f"[green]✓ Converted table saved to {output}[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    console.print(f"esconv v{__version__}")


if __name__ == "__main__":
    app()
