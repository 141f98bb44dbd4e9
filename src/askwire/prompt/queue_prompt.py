"""QueuePrompt: reads answers from a queue fed by another thread."""

from __future__ import annotations

import queue
from typing import Any

from askwire.errors import PromptAborted


class QueuePrompt:
    """Prompt that uses a thread-safe queue pair for answers and errors.

    Answers are read from answer_queue; rejected answers are reported on
    error_queue so the feeding side (a UI thread, a bot) can show them.
    With a timeout, an empty answer queue raises :class:`PromptAborted`.
    """

    def __init__(
        self,
        answer_queue: queue.Queue[Any] | None = None,
        error_queue: queue.Queue[Exception] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.answer_queue: queue.Queue[Any] = answer_queue or queue.Queue()
        self.error_queue: queue.Queue[Exception] = error_queue or queue.Queue()
        self._timeout = timeout

    def prompt(self) -> Any:
        try:
            return self.answer_queue.get(timeout=self._timeout)
        except queue.Empty:
            raise PromptAborted(
                f"no answer received within {self._timeout} seconds"
            ) from None

    def error(self, err: Exception) -> None:
        self.error_queue.put(err)

    def cleanup(self, value: Any) -> None:
        pass

    def respond(self, answer: Any) -> None:
        """Convenience method for the answering side to submit an answer."""
        self.answer_queue.put(answer)

    def pending_error(self, timeout: float | None = None) -> Exception | None:
        """Convenience method to retrieve a reported error, if any."""
        try:
            return self.error_queue.get(timeout=timeout)
        except queue.Empty:
            return None
