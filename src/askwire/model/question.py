"""Question model: the units of input collected by a sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from askwire.prompt.base import Prompt

# Both signal a bad answer by raising ValueError (see askwire.errors.InvalidAnswer).
Validator = Callable[[Any], object]
Converter = Callable[[Any], Any]


@dataclass
class Question:
    """One answer to collect: where it goes, how to ask, how to check it."""

    name: str
    prompt: Prompt
    validate: Validator | None = None
    convert: Converter | None = None


@dataclass(frozen=True)
class Choice:
    """An option picked from a select-style prompt."""

    value: str
    index: int

    def __str__(self) -> str:
        return self.value
