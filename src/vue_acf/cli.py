"""vue-acf CLI: Typer-based entry point for generating ACF field groups."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError

from vue_acf.config import DEFAULT_DEST_DIR, DEFAULT_EXTENSION, DEFAULT_SOURCE_DIR, ParseConfig
from vue_acf.engine import PipelineResult, run_pipeline
from vue_acf.serialization.io import render_field_group

app = typer.Typer(
    name="vue-acf",
    help="Generate ACF field-group JSON from Vue component props.",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


def _setup_logging(verbose: bool = False) -> None:
    logger = logging.getLogger("vue_acf")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(asctime)s] [vue-acf] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def _fail(message: str) -> NoReturn:
    """Print *message* in red on stderr and exit with status 1."""
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _build_config(component: str, source_dir: Path, dest_dir: str | Path, extension: str) -> ParseConfig:
    try:
        return ParseConfig(component=component, source_dir=source_dir, dest_dir=dest_dir, extension=extension)
    except ValidationError as exc:
        _fail(f"Invalid options: {exc.errors()[0]['msg']}")


def _run(config: ParseConfig, *, dry_run: bool) -> PipelineResult:
    result = asyncio.run(run_pipeline(config, dry_run=dry_run))
    if result.error is not None:
        _fail(result.error.detail)
    return result


_COMPONENT_OPTION = typer.Option(..., "--component", "-c", help="The camel case name of the component to parse.")
_DIR_OPTION = typer.Option(
    DEFAULT_SOURCE_DIR,
    "--dir",
    help="The directory to search for components (w/o trailing slash). Defaults to current working directory.",
)
_EXT_OPTION = typer.Option(DEFAULT_EXTENSION, "--ext", help="Component source file extension.")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log each pipeline stage to stderr.")


@app.command()
def parse(
    component: str = _COMPONENT_OPTION,
    source_dir: Path = _DIR_OPTION,
    dest_dir: str = typer.Option(
        DEFAULT_DEST_DIR,
        "--dest",
        help="The destination directory to save the json files to (w/o trailing slash). Defaults to ./acf-json.",
    ),
    extension: str = _EXT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Parse a component and write its ACF field group.

    The group is written to <dest>/group_<component>_component.json,
    replacing any existing file.

    Examples:

        vue-acf parse -c HeroBanner

        vue-acf parse -c HeroBanner --dir src/components --dest wp-content/themes/site/acf-json
    """
    _setup_logging(verbose)
    config = _build_config(component, source_dir, dest_dir, extension)
    result = _run(config, dry_run=False)
    typer.secho(f"{dest_dir}/{result.output_path.name} created", fg=typer.colors.GREEN)


@app.command()
def show(
    component: str = _COMPONENT_OPTION,
    source_dir: Path = _DIR_OPTION,
    extension: str = _EXT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print a component's ACF field group as JSON without writing it.

    Examples:

        vue-acf show -c HeroBanner --dir src/components
    """
    _setup_logging(verbose)
    config = _build_config(component, source_dir, DEFAULT_DEST_DIR, extension)
    result = _run(config, dry_run=True)
    typer.echo(render_field_group(result.group), nl=False)


if __name__ == "__main__":
    app()
