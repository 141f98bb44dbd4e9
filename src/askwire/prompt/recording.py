"""RecordingPrompt: wraps another prompt and records every exchange."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from askwire.prompt.base import Prompt


@dataclass(frozen=True)
class Exchange:
    """One recorded call: ``kind`` is "answer", "error" or "cleanup"."""

    kind: str
    value: Any


class RecordingPrompt:
    """Prompt decorator that records all calls made through it.

    Every call is forwarded to the inner prompt first; only calls that
    return normally are recorded.
    """

    def __init__(self, inner: Prompt) -> None:
        self._inner = inner
        self._records: list[Exchange] = []

    def prompt(self) -> Any:
        answer = self._inner.prompt()
        self._records.append(Exchange("answer", answer))
        return answer

    def error(self, err: Exception) -> None:
        self._inner.error(err)
        self._records.append(Exchange("error", err))

    def cleanup(self, value: Any) -> None:
        self._inner.cleanup(value)
        self._records.append(Exchange("cleanup", value))

    def transcript(self) -> list[Exchange]:
        """Return the list of all recorded exchanges."""
        return list(self._records)

    def answers(self) -> list[Any]:
        return [r.value for r in self._records if r.kind == "answer"]

    def clear(self) -> None:
        """Clear the recording history."""
        self._records.clear()
