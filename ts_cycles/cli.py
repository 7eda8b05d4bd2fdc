"""Click CLI with find and imports subcommands."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import click

from ts_cycles import __version__
from ts_cycles.analysis import ImportTracker, ModuleResolver
from ts_cycles.config import load_project_config
from ts_cycles.errors import TsCyclesError
from ts_cycles.extractor import get_extractor
from ts_cycles.models import AnalysisConfig, ParserKind
from ts_cycles.pipeline import run_find_cycles
from ts_cycles.reporter import format_report, report_to_dict

_PARSER_CHOICES = [kind.value for kind in ParserKind]

_tsconfig_argument = click.argument(
    "tsconfig", type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """ts-cycles: Report import cycles in a TypeScript project."""


@cli.command()
@_tsconfig_argument
@click.option("--apply-aliases", is_flag=True, help="Resolve imports through compilerOptions.paths")
@click.option("--parser", type=click.Choice(_PARSER_CHOICES), default=ParserKind.TREESITTER.value,
              show_default=True, help="Import extractor")
@click.option("--include-tests", is_flag=True, help="Analyse *.spec.ts / *.test.ts files too")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def find(tsconfig: Path, apply_aliases: bool, parser: str, include_tests: bool, as_json: bool, verbose: bool):
    """Find strongly connected components among the project's modules."""
    _configure_logging(verbose)
    config = AnalysisConfig(
        tsconfig_path=tsconfig,
        apply_aliases=apply_aliases,
        parser=ParserKind(parser),
        include_tests=include_tests,
    )

    try:
        report, project_root = run_find_cycles(config)
    except TsCyclesError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(report_to_dict(report, project_root), indent=2))
        return

    for line in format_report(report, project_root):
        if line.startswith("Found strongly connected component of size"):
            click.echo(click.style(line, fg="red"))
        else:
            click.echo(line)


@cli.command()
@_tsconfig_argument
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--apply-aliases", is_flag=True, help="Resolve imports through compilerOptions.paths")
@click.option("--parser", type=click.Choice(_PARSER_CHOICES), default=ParserKind.TREESITTER.value,
              show_default=True, help="Import extractor")
def imports(tsconfig: Path, file: Path, apply_aliases: bool, parser: str):
    """List the resolved imports of a single file."""
    _configure_logging(False)
    try:
        project = load_project_config(tsconfig)
        resolver = ModuleResolver(
            project.project_root, project.aliases,
            apply_aliases=apply_aliases, base_dir=project.base_dir,
        )
        tracker = ImportTracker(resolver, get_extractor(ParserKind(parser)))
        resolved = tracker.get_imports(file)
    except TsCyclesError as e:
        raise click.ClickException(str(e))

    if not resolved:
        click.echo("No project imports found.")
        return
    for module in resolved:
        click.echo(os.path.relpath(module, project.project_root))


if __name__ == "__main__":
    cli()
