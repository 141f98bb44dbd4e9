"""Option matching for select-style prompts: numbers, labels and accelerator keys."""

from __future__ import annotations

import re

from askwire.errors import InvalidAnswer
from askwire.model.question import Choice

_ACCELERATOR_PATTERNS = (
    re.compile(r"^\[([a-zA-Z0-9])\]\s*(.*)"),  # [K] label
    re.compile(r"^([a-zA-Z0-9])\)\s*(.*)"),  # K) label
    re.compile(r"^([a-zA-Z0-9])\s*-\s+(.*)"),  # K - label
)


def parse_accelerator(label: str) -> tuple[str, str]:
    """Split an option label into its accelerator key and display text.

    Returns ``("", label)`` when the label carries no accelerator.
    """
    label = label.strip()
    for pattern in _ACCELERATOR_PATTERNS:
        m = pattern.match(label)
        if m:
            return m.group(1), m.group(2).strip()
    return "", label


def match_option(raw: str, options: list[str]) -> Choice:
    """Resolve user input against *options*.

    Tried in order: 1-based option number, exact option text, accelerator
    key, display text (both case-insensitive). Raises :class:`InvalidAnswer`
    when nothing matches.
    """
    text = raw.strip()
    if not text:
        raise InvalidAnswer("please pick an option")

    if text.isdigit():
        number = int(text)
        if 1 <= number <= len(options):
            return Choice(value=options[number - 1], index=number - 1)

    lowered = text.lower()
    for index, option in enumerate(options):
        if option == text:
            return Choice(value=option, index=index)

    for index, option in enumerate(options):
        key, clean = parse_accelerator(option)
        if key and key.lower() == lowered:
            return Choice(value=option, index=index)
        if clean.lower() == lowered or option.strip().lower() == lowered:
            return Choice(value=option, index=index)

    raise InvalidAnswer(f"{text!r} is not one of the options")
