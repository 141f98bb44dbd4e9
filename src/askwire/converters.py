"""Reusable converters. Each raises InvalidAnswer for input it cannot convert."""

from __future__ import annotations

from typing import Any

from askwire.binder import parse_bool
from askwire.errors import InvalidAnswer
from askwire.model.question import Converter


def to_int(raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidAnswer(f"{raw!r} is not a whole number") from None


def to_float(raw: Any) -> float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    try:
        return float(str(raw).strip())
    except ValueError:
        raise InvalidAnswer(f"{raw!r} is not a number") from None


def to_bool(raw: Any) -> bool:
    try:
        return parse_bool(raw)
    except ValueError:
        raise InvalidAnswer(f"{raw!r} is not yes or no") from None


def split_list(sep: str = ",") -> Converter:
    """Split delimited text into a list of stripped, non-empty items."""

    def convert(raw: Any) -> list[str]:
        if isinstance(raw, (list, tuple)):
            return [str(item) for item in raw]
        return [part.strip() for part in str(raw).split(sep) if part.strip()]

    return convert
