from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import typer

from scriptunit.config import FORMAT_EXTENSIONS

app = typer.Typer(
    name="scriptunit", help="Assertions and structured test reports for scripts"
)


def _forwarded_options(
    format: str | None, output: str | None, quiet: bool
) -> list[str]:
    args: list[str] = []
    if format is not None:
        args.append(f"--format={format}")
    if output is not None:
        args.append(f"--output={output}")
    if quiet:
        args.append("--quiet")
    return args


@app.command()
def example(
    format: str | None = typer.Option(
        None, "--format", "-f", help="Report format: none, json, yaml, csv, junit"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Report file path ('-' for stdout)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress console output"),
):
    """Run the bundled example checks."""
    from scriptunit.example import run_example

    status = run_example(_forwarded_options(format, output, quiet))
    raise typer.Exit(status)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def run(
    ctx: typer.Context,
    script: str = typer.Argument(help="Path to a Python check script"),
    format: str | None = typer.Option(
        None, "--format", "-f", help="Report format: none, json, yaml, csv, junit"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Report file path ('-' for stdout)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress console output"),
):
    """Run a check script, forwarding report options and any extra arguments."""
    script_path = Path(script)
    if not script_path.is_file():
        typer.echo(f"Error: check script not found: {script}", err=True)
        raise typer.Exit(1)

    cmd = [
        sys.executable,
        str(script_path),
        *_forwarded_options(format, output, quiet),
        *ctx.args,
    ]
    result = subprocess.run(cmd, check=False)
    raise typer.Exit(result.returncode)


@app.command()
def clean(
    dir: str = typer.Option(".", "--dir", help="Directory holding generated results"),
):
    """Remove generated test-results-* report files."""
    directory = Path(dir)
    extensions = sorted(set(FORMAT_EXTENSIONS.values()))
    removed = 0
    for extension in extensions:
        for path in sorted(directory.glob(f"test-results*.{extension}")):
            if path.is_file():
                path.unlink()
                typer.echo(f"Removed {path}")
                removed += 1
    typer.echo(f"Clean complete: {removed} file(s) removed.")
