"""CLI entry point for siteify."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import ContextManager

import click

from siteify import __version__
from siteify.compile.batch import BatchConfig, select_health_files, siteify_all
from siteify.compile.frontmatter import slugify
from siteify.core.config import ConfigManager
from siteify.core.exceptions import SiteifyError
from siteify.core.run_log import run_log_context
from siteify.format.lint_runner import LintRunner


def _load_config(project_root: Path | None = None) -> ConfigManager:
    """Load .env and YAML config; exit with a message (no traceback) if it is invalid."""
    config = ConfigManager(project_root=project_root)
    try:
        config.load()
    except SiteifyError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)
    return config


def _log_context(log_file: Path | None, verbose: bool) -> ContextManager:
    if log_file is None:
        return contextlib.nullcontext()
    return run_log_context(log_file.resolve(), verbose=verbose)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """siteify: build-time helpers for the documentation website."""
    pass


@main.command("compile")
@click.argument("files", nargs=-1)
@click.option("--source-dir", type=click.Path(path_type=Path, file_okay=False), help="Directory holding the health files (default: project root).")
@click.option("--output-dir", type=click.Path(path_type=Path, file_okay=False), help="Collection directory to write to (default: collections/_docs).")
@click.option("--continue-on-error", is_flag=True, help="Keep going when a health file is missing instead of aborting the run.")
@click.option("--log-file", type=click.Path(path_type=Path, dir_okay=False), help="Also write the run log to this file.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose run log (DEBUG level).")
def compile_cmd(
    files: tuple[str, ...],
    source_dir: Path | None,
    output_dir: Path | None,
    continue_on_error: bool,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """Copy health files into the docs collection with generated frontmatter.

    FILES restricts the run to the given health files; names without configured
    overrides get the derived defaults only.
    """
    config = _load_config()
    cfg = config.config
    health_files = select_health_files(files, cfg.health_files) if files else cfg.health_files
    batch_config = BatchConfig(
        source_dir=source_dir.resolve() if source_dir else config.source_dir,
        output_dir=output_dir.resolve() if output_dir else config.output_dir,
        permalink_prefix=cfg.permalink_prefix,
        stop_on_failure=cfg.batch.stop_on_failure and not continue_on_error,
    )
    with _log_context(log_file, verbose):
        try:
            result = siteify_all(health_files, batch_config)
        except SiteifyError as e:
            click.echo(str(e), err=True)
            raise SystemExit(1)

    for r in result.results:
        suffix = "" if r.changed else " (unchanged)"
        click.echo(f"Wrote {r.destination}{suffix}")
    if not result.success:
        for err in result.errors:
            click.echo(f"Skipped {err.filename}: {err.message}", err=True)
        raise SystemExit(1)


@main.command("list")
def list_files() -> None:
    """List the configured health files and where they are published."""
    config = _load_config()
    cfg = config.config
    click.echo("Health files:")
    for hf in cfg.health_files:
        permalink = hf.overrides.get("permalink", f"{cfg.permalink_prefix}{slugify(hf.filename)}/")
        click.echo(f"  {hf.filename}: {permalink}")


@main.command()
@click.option("--log-file", type=click.Path(path_type=Path, dir_okay=False), help="Also write the run log to this file.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose run log (DEBUG level).")
def lint(log_file: Path | None, verbose: bool) -> None:
    """Run the configured lint commands and exit with their status."""
    config = _load_config()
    cfg = config.config
    runner = LintRunner(cfg.lint.commands, cwd=config.project_root, timeout=cfg.lint.timeout)
    with _log_context(log_file, verbose):
        code = runner.run()
    raise SystemExit(code)


if __name__ == "__main__":
    main()
