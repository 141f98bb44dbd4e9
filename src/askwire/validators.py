"""Reusable validators. Each raises InvalidAnswer for a rejected value."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from askwire.errors import InvalidAnswer
from askwire.model.question import Validator


def required(value: Any) -> None:
    """Reject None, blank strings and empty collections."""
    if value is None:
        raise InvalidAnswer("Value is required")
    if isinstance(value, str):
        if not value.strip():
            raise InvalidAnswer("Value is required")
    elif isinstance(value, Sized) and len(value) == 0:
        raise InvalidAnswer("Value is required")


def _length(value: Any) -> int:
    if isinstance(value, Sized):
        return len(value)
    raise InvalidAnswer(f"cannot measure the length of {type(value).__name__}")


def min_length(length: int) -> Validator:
    def validate(value: Any) -> None:
        if _length(value) < length:
            raise InvalidAnswer(f"value is too short. Min length is {length}")

    return validate


def max_length(length: int) -> Validator:
    def validate(value: Any) -> None:
        if _length(value) > length:
            raise InvalidAnswer(f"value is too long. Max length is {length}")

    return validate


def one_of(*allowed: Any) -> Validator:
    def validate(value: Any) -> None:
        if value not in allowed:
            choices = ", ".join(repr(a) for a in allowed)
            raise InvalidAnswer(f"{value!r} is not one of {choices}")

    return validate


def compose(*validators: Validator) -> Validator:
    """Run *validators* in order; the first rejection wins."""

    def validate(value: Any) -> None:
        for validator in validators:
            validator(value)

    return validate
