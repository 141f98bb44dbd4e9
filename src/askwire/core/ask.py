"""Question sequencer: ask questions in order, retrying rejected answers.

Each question goes through the same steps::

    prompt -> convert (retry until it converts) -> validate (retry until
    it passes) -> cleanup -> bind

Converters and validators reject an answer by raising ``ValueError``; the
prompt reports it with ``error()`` and is asked again. Any other exception,
from the prompt, its error reporting or the binder, aborts the whole
sequence unchanged. Answers bound before the failure stay bound.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from askwire.binder import bind
from askwire.config import DEFAULT_CONFIG, AskConfig
from askwire.errors import ConfigurationError, TooManyAttemptsError
from askwire.model.question import Converter, Question, Validator
from askwire.prompt.base import Prompt

logger = logging.getLogger(__name__)

Binder = Callable[[Any, str, Any], None]


class _Attempt:
    """Tracks the raw input of one question across retries."""

    def __init__(self, question: Question, config: AskConfig) -> None:
        self.question = question
        self.config = config
        self.prompts = 0
        self.raw: Any = None

    def read(self) -> Any:
        self.prompts += 1
        self.raw = self.question.prompt.prompt()
        return self.raw

    def retry(self, invalid: ValueError) -> Any:
        """Report *invalid* to the user and read a replacement answer."""
        name = self.question.name
        cap = self.config.max_attempts
        if cap is not None and self.prompts >= cap:
            raise TooManyAttemptsError(
                f"no acceptable answer for {name or 'question'!r} "
                f"after {self.prompts} attempt(s): {invalid}",
                name=name,
                attempts=self.prompts,
                cause=invalid,
            )
        logger.info("answer for %r rejected (attempt %d): %s", name, self.prompts, invalid)
        self.question.prompt.error(invalid)
        return self.read()


def _convert(attempt: _Attempt, convert: Converter) -> Any:
    while True:
        try:
            return convert(attempt.raw)
        except ValueError as invalid:
            attempt.retry(invalid)


def _validate(attempt: _Attempt, validate: Validator, converted: Any) -> Any:
    convert = attempt.question.convert
    while True:
        try:
            validate(converted)
            return converted
        except ValueError as invalid:
            raw = attempt.retry(invalid)
        if attempt.config.reconvert:
            converted = _convert(attempt, convert) if convert is not None else raw


def _cleanup(prompt: Prompt, raw: Any, name: str, mode: str) -> None:
    try:
        prompt.cleanup(raw)
    except Exception:
        if mode == "raise":
            raise
        if mode == "log":
            logger.warning("cleanup failed for %r", name, exc_info=True)


def ask(
    questions: Iterable[Question],
    container: Any,
    *,
    config: AskConfig | None = None,
    binder: Binder = bind,
) -> None:
    """Ask every question in order and bind each accepted answer into *container*.

    Raises :class:`ConfigurationError` before prompting anything when
    *container* is None. Every other failure propagates as raised.
    """
    if container is None:
        raise ConfigurationError("no destination to record answers")
    config = config or DEFAULT_CONFIG

    for question in questions:
        logger.debug("asking %r", question.name)
        attempt = _Attempt(question, config)
        converted = attempt.read()

        if question.convert is not None:
            converted = _convert(attempt, question.convert)

        if question.validate is not None:
            converted = _validate(attempt, question.validate, converted)

        _cleanup(question.prompt, attempt.raw, question.name, config.cleanup_errors)

        binder(container, question.name, converted)
        logger.debug(
            "bound %r after %d prompt(s)", question.name, attempt.prompts
        )


def ask_one(
    prompt: Prompt,
    container: Any,
    validate: Validator | None = None,
    convert: Converter | None = None,
    *,
    config: AskConfig | None = None,
    binder: Binder = bind,
) -> None:
    """Ask a single unnamed question; see :func:`ask`."""
    ask(
        [Question(name="", prompt=prompt, validate=validate, convert=convert)],
        container,
        config=config,
        binder=binder,
    )
