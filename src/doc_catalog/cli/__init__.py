from __future__ import annotations

import logging
from typing import Optional

import typer

from ..app.core.logging import setup_logging
from ..app.settings import get_catalog_settings
from ..documents.registry import DocumentRegistry, get_registry, render_entry
from ..documents.samples import load_samples
from ..exceptions import OutOfRangeError
from .menu import INFO_HEADER, run_menu, show_all

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Browse the in-memory document catalog.",
)


def _registry(ctx: typer.Context) -> DocumentRegistry:
    return ctx.obj["registry"]


@app.callback()
def main(
        ctx: typer.Context,
        no_samples: bool = typer.Option(False, "--no-samples", help="Start with an empty catalog"),
        log_level: Optional[str] = typer.Option(None, help="Override LOG_LEVEL / CATALOG_LOG_LEVEL"),
):
    settings = get_catalog_settings()
    try:
        setup_logging(level=log_level or settings.log_level, fmt=settings.log_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    registry = get_registry()
    if settings.load_samples and not no_samples and len(registry) == 0:
        added = load_samples(registry)
        logger.info("Loaded %d sample documents into %s", added, settings.name)
    ctx.obj = {"registry": registry}


@app.command("list")
def list_documents(ctx: typer.Context):
    """Show every document in the catalog."""
    show_all(_registry(ctx))


@app.command("show")
def show_document(
        ctx: typer.Context,
        number: int = typer.Argument(..., help="1-based document number"),
):
    """Show one document by its number."""
    try:
        entry = _registry(ctx).get_entry(number - 1)
    except OutOfRangeError as exc:
        logger.debug("show %d rejected: %s", number, exc, extra={"doc_index": exc.index})
        typer.echo("Invalid document number! Try again.", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_entry(entry, header=INFO_HEADER))


@app.command("menu")
def menu(ctx: typer.Context):
    """Run the interactive numbered menu."""
    run_menu(_registry(ctx))


__all__ = ["app"]
