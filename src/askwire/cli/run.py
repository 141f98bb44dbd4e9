"""CLI command: askwire run -- ask the questions of a definition file."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from askwire.cli.loader import load_questions
from askwire.config import CLEANUP_MODES, AskConfig
from askwire.core import ask
from askwire.errors import AskwireError, DefinitionError, PromptAborted
from askwire.model.question import Choice


def _jsonable(value: Any) -> Any:
    if isinstance(value, Choice):
        return value.value
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


@click.command()
@click.argument("questions_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write answers to this file instead of stdout")
@click.option(
    "--reconvert/--no-reconvert",
    default=True,
    help="Re-convert input read after a failed validation (--no-reconvert re-checks the rejected value)",
)
@click.option(
    "--cleanup-errors",
    type=click.Choice(CLEANUP_MODES),
    default="log",
    help="What to do when a prompt fails to clean up",
)
@click.option("--max-attempts", type=click.IntRange(min=1), default=None, help="Give up after N answers per question")
def run(
    questions_file: str,
    output: str | None,
    reconvert: bool,
    cleanup_errors: str,
    max_attempts: int | None,
) -> None:
    """Ask every question in QUESTIONS_FILE and print the answers as JSON."""
    try:
        questions = load_questions(Path(questions_file))
    except DefinitionError as exc:
        click.echo(f"Definition error: {exc}", err=True)
        sys.exit(2)

    config = AskConfig(
        reconvert=reconvert,
        cleanup_errors=cleanup_errors,
        max_attempts=max_attempts,
    )
    answers: dict[str, Any] = {}
    try:
        ask(questions, answers, config=config)
    except PromptAborted as exc:
        click.echo(f"Aborted: {exc}", err=True)
        sys.exit(1)
    except AskwireError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    text = json.dumps(answers, indent=2, default=_jsonable)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(f"Answers written to {output}", err=True)
    else:
        click.echo(text)
