from typing import Optional
import json
import pathlib
import typer
import yaml
from pydantic import ValidationError
from .config import load_config, AppConfig
from .errors import TallyError
from .logging import setup_logging
from .reporter import Reporter
from .runners.runner import TestRunner, RunResult
from .reporters.console import ConsoleReporter
from .reporters.junit import JUnitReporter
from .reporters.json_summary import JSONReporter

app = typer.Typer(add_completion=False, help="testtally - record and summarize pass/fail/skip outcomes of test runs")

def _exit_for(result: RunResult):
    typer.echo(f"Done. {result.passed} passed, {result.failed} failed, {result.skipped} skipped.")
    raise typer.Exit(code=0 if result.summary.is_clean else 1)

@app.command()
def run(
    suite: str = typer.Argument(..., help="Check suite to run, e.g. environment, or a dotted module path"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    output_dir: Optional[str] = typer.Option(None, "--out", "-o", help="Directory for JSON summaries"),
    list_tests: bool = typer.Option(False, "--list", help="List checks without running"),
    junit: Optional[str] = typer.Option(None, "--junit", help="Write JUnit XML to this path"),
    json_out: bool = typer.Option(False, "--json", help="Write summary.json under the output directory"),
    chart: Optional[str] = typer.Option(None, "--chart", help="Write an outcome bar chart (PNG) to this path"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
):
    try:
        cfg: AppConfig = load_config(config, log_level=log_level)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        typer.echo(f"config: {e}", err=True)
        raise typer.Exit(code=2)
    setup_logging(cfg.log_level)
    runner = TestRunner(cfg)

    if list_tests:
        for t in runner.discover(suite):
            typer.echo(t.id)
        raise typer.Exit(code=0)

    try:
        result = runner.run(suite)
    except TallyError as e:
        typer.echo(f"{suite}: {e}", err=True)
        raise typer.Exit(code=2)
    ConsoleReporter().emit(result)
    if junit: JUnitReporter(path=junit).emit(result)
    if json_out: JSONReporter(output_dir or cfg.output_dir).emit(result)
    if chart:
        # matplotlib is slow to import; only pay for it when asked
        from .reporters.chart import ChartReporter
        ChartReporter(chart).emit(result)
    _exit_for(result)

@app.command()
def tally(
    path: str = typer.Argument(..., help="YAML or JSON list of {name, outcome, detail} records"),
    junit: Optional[str] = typer.Option(None, "--junit", help="Write JUnit XML to this path"),
    json_stdout: bool = typer.Option(False, "--json-out", help="Print the summary as JSON instead of a report"),
):
    """Summarize outcomes recorded by another test runner."""
    try:
        records = yaml.safe_load(pathlib.Path(path).read_text()) or []
    except (OSError, yaml.YAMLError) as e:
        typer.echo(f"{path}: cannot read outcomes: {e}", err=True)
        raise typer.Exit(code=2)
    if not isinstance(records, list):
        typer.echo(f"{path}: expected a list of records", err=True)
        raise typer.Exit(code=2)
    reporter = Reporter(pathlib.Path(path).stem)
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            typer.echo(f"record {i}: expected a mapping, got {rec!r}", err=True)
            raise typer.Exit(code=2)
        try:
            detail = rec.get("detail")
            reporter.record(rec.get("name", ""), rec.get("outcome", ""), None if detail is None else str(detail))
        except TallyError as e:
            typer.echo(f"record {i}: {e}", err=True)
            raise typer.Exit(code=2)
    result = RunResult(suite=reporter.name, cases=reporter.cases, summary=reporter.summarize())
    if json_stdout:
        typer.echo(json.dumps({"suite": result.suite, **result.summary.to_dict()}, indent=2))
    else:
        ConsoleReporter().emit(result)
    if junit: JUnitReporter(path=junit).emit(result)
    raise typer.Exit(code=0 if result.summary.is_clean else 1)

if __name__ == "__main__":
    app()
