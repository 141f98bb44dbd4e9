"""askwire model layer -- public type re-exports."""

from askwire.model.question import Choice, Converter, Question, Validator

__all__ = [
    "Question",
    "Validator",
    "Converter",
    "Choice",
]
