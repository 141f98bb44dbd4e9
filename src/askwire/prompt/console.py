"""Console prompts: read answers at the terminal via click."""

from __future__ import annotations

from typing import Any, Sequence

import click

from askwire.errors import InvalidAnswer, PromptAborted
from askwire.model.question import Choice
from askwire.prompt.accelerators import match_option


class _ConsolePrompt:
    """Shared error reporting and input handling for terminal prompts."""

    def __init__(self, message: str, help: str = "") -> None:
        self.message = message
        self.help = help

    def error(self, err: Exception) -> None:
        click.secho(f"Sorry, your reply was invalid: {err}", fg="red", err=True)
        if self.help:
            click.secho(f"  {self.help}", fg="cyan", err=True)

    def cleanup(self, value: Any) -> None:
        pass

    def _read(self, text: str, default: str = "", **kwargs: Any) -> str:
        try:
            return click.prompt(
                text, default=default, show_default=bool(default), **kwargs
            )
        except click.Abort as exc:
            raise PromptAborted(f"input aborted: {self.message}", cause=exc) from exc


class Input(_ConsolePrompt):
    """Free-text input. Empty input yields *default*."""

    def __init__(self, message: str, default: str = "", help: str = "") -> None:
        super().__init__(message, help=help)
        self.default = default

    def prompt(self) -> str:
        return self._read(self.message, default=self.default)


class Password(_ConsolePrompt):
    """Hidden input; the typed text is never echoed."""

    def prompt(self) -> str:
        return self._read(self.message, hide_input=True)

    def cleanup(self, value: Any) -> None:
        click.echo(f"{self.message}: {'*' * len(str(value or ''))}")


class Confirm(_ConsolePrompt):
    """Yes/no question returning a bool."""

    def __init__(self, message: str, default: bool = False, help: str = "") -> None:
        super().__init__(message, help=help)
        self.default = default

    def prompt(self) -> bool:
        try:
            return click.confirm(self.message, default=self.default)
        except click.Abort as exc:
            raise PromptAborted(f"input aborted: {self.message}", cause=exc) from exc


class Select(_ConsolePrompt):
    """Pick one option from a numbered menu.

    ``prompt`` returns what the user typed; pass :meth:`to_choice` as the
    question's converter to turn it into a :class:`Choice` and have unknown
    entries re-prompted.
    """

    def __init__(
        self,
        message: str,
        options: Sequence[str],
        default: str | None = None,
        help: str = "",
    ) -> None:
        super().__init__(message, help=help)
        if not options:
            raise ValueError("Select needs at least one option")
        if default is not None and default not in options:
            raise ValueError(f"default {default!r} is not one of the options")
        self.options = list(options)
        self.default = default

    def prompt(self) -> str:
        click.echo(self.message)
        for number, option in enumerate(self.options, start=1):
            click.echo(f"  {number}) {option}")
        return self._read("  Choice", default=self.default or "")

    def to_choice(self, raw: Any) -> Choice:
        if isinstance(raw, Choice):
            return raw
        return match_option(str(raw), self.options)

    def cleanup(self, value: Any) -> None:
        try:
            choice = self.to_choice(value)
        except InvalidAnswer:
            return
        click.echo(f"{self.message} {choice.value}")


class MultiSelect(Select):
    """Pick any number of options, entered comma separated."""

    def __init__(
        self,
        message: str,
        options: Sequence[str],
        default: Sequence[str] = (),
        help: str = "",
    ) -> None:
        _ConsolePrompt.__init__(self, message, help=help)
        if not options:
            raise ValueError("MultiSelect needs at least one option")
        unknown = [d for d in default if d not in options]
        if unknown:
            raise ValueError(f"defaults not among the options: {', '.join(unknown)}")
        self.options = list(options)
        self.default = ", ".join(default)

    def to_choices(self, raw: Any) -> list[Choice]:
        if isinstance(raw, list):
            return [self.to_choice(item) for item in raw]
        picked: list[Choice] = []
        for part in str(raw).split(","):
            if not part.strip():
                continue
            choice = match_option(part, self.options)
            if choice not in picked:
                picked.append(choice)
        return picked

    def cleanup(self, value: Any) -> None:
        try:
            choices = self.to_choices(value)
        except InvalidAnswer:
            return
        click.echo(f"{self.message} {', '.join(c.value for c in choices)}")
