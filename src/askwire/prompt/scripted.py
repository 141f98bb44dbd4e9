"""ScriptedPrompt: replays canned answers without user interaction."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

from askwire.errors import PromptAborted


class ScriptedPrompt:
    """Prompt that answers from a fixed script.

    Each ``prompt()`` call consumes the next scripted entry. An entry that is
    an exception instance is raised instead of returned, which makes it easy
    to script input failures. Reported errors and cleanup values are kept
    for inspection.
    """

    def __init__(self, answers: Iterable[Any]) -> None:
        self._answers: deque[Any] = deque(answers)
        self.prompts = 0
        self.errors: list[Exception] = []
        self.cleaned: list[Any] = []

    def prompt(self) -> Any:
        self.prompts += 1
        if not self._answers:
            raise PromptAborted("scripted answers exhausted")
        answer = self._answers.popleft()
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def error(self, err: Exception) -> None:
        self.errors.append(err)

    def cleanup(self, value: Any) -> None:
        self.cleaned.append(value)

    @property
    def remaining(self) -> int:
        return len(self._answers)
