"""askwire - ask a sequence of questions and collect validated answers."""

from askwire.binder import AnswerRef, Settable, bind
from askwire.config import AskConfig
from askwire.core import ask, ask_one
from askwire.errors import (
    AskwireError,
    BindError,
    ConfigurationError,
    DefinitionError,
    InvalidAnswer,
    PromptAborted,
    TooManyAttemptsError,
)
from askwire.model import Choice, Question

__version__ = "0.1.0"

__all__ = [
    "ask",
    "ask_one",
    "Question",
    "Choice",
    "AnswerRef",
    "Settable",
    "bind",
    "AskConfig",
    "AskwireError",
    "BindError",
    "ConfigurationError",
    "DefinitionError",
    "InvalidAnswer",
    "PromptAborted",
    "TooManyAttemptsError",
]
