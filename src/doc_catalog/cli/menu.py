"""Interactive numbered menu over a document registry.

The loop reads one line per prompt through an injectable ``read`` callable
(``None`` means end of input) and writes through ``echo``, so it can be
driven from a terminal or scripted in tests.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

import typer

from ..documents.registry import DocumentRegistry, render_entry
from ..exceptions import InputFormatError, OutOfRangeError

logger = logging.getLogger(__name__)

MENU = "\n".join(
    [
        "",
        "Document catalog:",
        "1. Show all documents",
        "2. Show a specific document",
        "3. Exit",
    ]
)

INFO_HEADER = "Document info"

_NUMBER = re.compile(r"^[+-]?\d+$")

Reader = Callable[[str], Optional[str]]


def parse_number(raw: str) -> int:
    text = raw.strip()
    if not _NUMBER.match(text):
        raise InputFormatError(raw)
    return int(text)


def read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def show_all(registry: DocumentRegistry, echo: Callable[[str], None] = typer.echo) -> None:
    entries = registry.list_all()
    if not entries:
        echo("No documents.")
        return
    echo("All documents:")
    for entry in entries:
        echo("")
        echo(render_entry(entry))


def show_one(registry: DocumentRegistry, number: int, echo: Callable[[str], None] = typer.echo) -> bool:
    """Print the document with 1-based ``number``; False if there is none."""
    try:
        entry = registry.get_entry(number - 1)
    except OutOfRangeError as exc:
        logger.debug("Rejected document number %d: %s", number, exc, extra={"doc_index": exc.index})
        echo("Invalid document number! Try again.")
        return False
    echo(render_entry(entry, header=INFO_HEADER))
    return True


def run_menu(
    registry: DocumentRegistry,
    *,
    read: Reader = read_line,
    echo: Callable[[str], None] = typer.echo,
) -> None:
    while True:
        echo(MENU)
        choice = read("Choose an action: ")
        if choice is None:
            break
        choice = choice.strip()

        if choice == "1":
            show_all(registry, echo)
        elif choice == "2":
            raw = read("Document number: ")
            if raw is None:
                break
            try:
                number = parse_number(raw)
            except InputFormatError:
                echo("Input error! Enter a valid number.")
                continue
            show_one(registry, number, echo)
        elif choice == "3":
            break
        else:
            echo("Invalid choice! Try again.")

    logger.debug("Menu loop finished")


__all__ = ["MENU", "INFO_HEADER", "parse_number", "read_line", "show_all", "show_one", "run_menu"]
