"""CallbackPrompt: delegates reading an answer to a user-supplied function."""

from __future__ import annotations

from typing import Any, Callable


class CallbackPrompt:
    """Prompt whose answers come from a callback.

    ``on_error`` and ``on_cleanup`` are optional; without them reported
    errors and cleanup are no-ops.
    """

    def __init__(
        self,
        callback: Callable[[], Any],
        on_error: Callable[[Exception], None] | None = None,
        on_cleanup: Callable[[Any], None] | None = None,
    ) -> None:
        self._callback = callback
        self._on_error = on_error
        self._on_cleanup = on_cleanup

    def prompt(self) -> Any:
        return self._callback()

    def error(self, err: Exception) -> None:
        if self._on_error is not None:
            self._on_error(err)

    def cleanup(self, value: Any) -> None:
        if self._on_cleanup is not None:
            self._on_cleanup(value)
