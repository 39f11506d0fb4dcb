from __future__ import annotations

import runpy
from pathlib import Path

import typer

app = typer.Typer(name="tinyunit", help="Run minimal unit-test scripts")


@app.command()
def run(
    script: str = typer.Argument(help="Python script that registers tests"),
    config: str | None = typer.Option(None, help="Path to tinyunit YAML config"),
    format: list[str] = typer.Option(
        [], "--format", "-f", help="Reporter to enable: text, json, junit or html"
    ),
    output_dir: str | None = typer.Option(
        None, help="Directory for report files (overrides config)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run the tests registered by a single script and report the results."""
    import tinyunit
    from pydantic import ValidationError

    from tinyunit.config import HarnessConfig, load_config
    from tinyunit.errors import ConfigError
    from tinyunit.verbose import configure_logging, debug_log_path

    script_path = Path(script)
    if not script_path.exists():
        typer.echo(f"Error: script not found: {script}", err=True)
        raise typer.Exit(2)

    try:
        if config is not None:
            harness_config = load_config(Path(config))
        else:
            harness_config = HarnessConfig()
        if format:
            harness_config = harness_config.model_copy(
                update={
                    "reporters": HarnessConfig(reporters=format).reporters,
                }
            )
        if output_dir is not None:
            harness_config = harness_config.model_copy(
                update={"output_dir": output_dir}
            )
    except (ConfigError, ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    logger = configure_logging(harness_config, verbose=verbose)
    logger.debug(f"Running script {script_path}")
    harness = tinyunit.reset_harness(harness_config, logger=logger)

    runpy.run_path(str(script_path), run_name="__main__")
    summary = harness.finish()

    typer.echo(
        f"{summary.tests} tests, {summary.passed} passed, {summary.failed} failed"
    )
    for path in harness.output_paths():
        typer.echo(f"Report: {path}")
    if not verbose:
        typer.echo(f"Debug log: {debug_log_path(harness_config)}")

    if not summary.all_passed:
        raise typer.Exit(1)


EXAMPLE_CONFIG = """\
default_module: Common
output_dir: tinyunit-results
reporters:
  - text
  - type: html
    path: tinyunit-results/report.html
"""

EXAMPLE_SCRIPT = '''\
import tinyunit


def add(a, b):
    return a + b


tinyunit.module("Math")

tinyunit.test("adds", lambda a: a.equal(add(2, 2), 4, "basic"))
'''


@app.command()
def init(
    dir: str = typer.Option(
        "tinyunit", "--dir", help="Directory to initialize the test project in"
    ),
):
    """Initialize a project with an example config and test script."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    config_file = project_dir / "tinyunit.yaml"
    if config_file.exists():
        typer.echo(f"tinyunit.yaml already exists in {dir}, skipping.")
        return

    config_file.write_text(EXAMPLE_CONFIG)
    (project_dir / "test_example.py").write_text(EXAMPLE_SCRIPT)

    typer.echo(f"Initialized test project in {dir}:")
    typer.echo("  tinyunit.yaml    - example config")
    typer.echo("  test_example.py  - example test script")


@app.command()
def version():
    """Print the installed version."""
    from tinyunit import __version__

    typer.echo(__version__)
