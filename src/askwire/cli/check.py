"""CLI command: askwire check -- validate a definition file without asking."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from askwire.cli.loader import load_questions
from askwire.errors import DefinitionError


@click.command()
@click.argument("questions_file", type=click.Path(exists=True, dir_okay=False))
def check(questions_file: str) -> None:
    """Load QUESTIONS_FILE and list its questions without prompting.

    Exits with code 0 if the definitions are valid, or code 2 otherwise.
    """
    path = Path(questions_file)
    try:
        questions = load_questions(path)
    except DefinitionError as exc:
        click.echo(f"Definition error: {exc}", err=True)
        sys.exit(2)

    for question in questions:
        extras = []
        if question.convert is not None:
            extras.append("convert")
        if question.validate is not None:
            extras.append("validate")
        suffix = f" ({', '.join(extras)})" if extras else ""
        click.echo(f"  - {question.name}: {type(question.prompt).__name__}{suffix}")

    click.echo(f"\nOK: {path.name} defines {len(questions)} question(s)")
