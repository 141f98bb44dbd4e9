"""Question sequencing entry points."""

from askwire.core.ask import ask, ask_one

__all__ = ["ask", "ask_one"]
