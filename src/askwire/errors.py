"""Error hierarchy for askwire."""
from __future__ import annotations


class AskwireError(Exception):
    """Base error for all askwire errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(AskwireError):
    """The sequence was started without a usable destination."""


class BindError(AskwireError):
    """An answer could not be stored into the answer container."""

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        target: object = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.name = name
        self.target = target


class TooManyAttemptsError(AskwireError):
    """A question was re-prompted more often than the configured cap allows."""

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        attempts: int = 0,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.name = name
        self.attempts = attempts


class PromptAborted(AskwireError):
    """The user (or the answer source) stopped providing input."""


class InvalidAnswer(ValueError):
    """Raised by validators and converters to request another answer.

    Subclasses :class:`ValueError`, so plain ``ValueError`` raised by
    callables such as ``int`` is treated the same way.
    """


class DefinitionError(AskwireError):
    """A question definition file is malformed."""
