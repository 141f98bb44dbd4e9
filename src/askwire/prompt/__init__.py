"""Prompt implementations for asking questions."""

from askwire.prompt.accelerators import match_option, parse_accelerator
from askwire.prompt.base import Prompt
from askwire.prompt.callback import CallbackPrompt
from askwire.prompt.console import Confirm, Input, MultiSelect, Password, Select
from askwire.prompt.queue_prompt import QueuePrompt
from askwire.prompt.recording import Exchange, RecordingPrompt
from askwire.prompt.scripted import ScriptedPrompt

__all__ = [
    "Prompt",
    "Input",
    "Password",
    "Confirm",
    "Select",
    "MultiSelect",
    "ScriptedPrompt",
    "CallbackPrompt",
    "QueuePrompt",
    "RecordingPrompt",
    "Exchange",
    "parse_accelerator",
    "match_option",
]
