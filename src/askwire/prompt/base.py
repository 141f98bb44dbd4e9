"""Prompt protocol definition."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Prompt(Protocol):
    """Protocol for objects that can read one raw answer from the user.

    ``prompt`` may be called several times for the same question, once per
    retry. ``error`` reports a rejected answer before the next ``prompt``
    call. ``cleanup`` is called once per question with the last raw value.
    Any of them signals failure by raising.
    """

    def prompt(self) -> Any: ...

    def error(self, err: Exception) -> None: ...

    def cleanup(self, value: Any) -> None: ...
