"""Tests for the click-backed console prompts."""

from __future__ import annotations

from typing import Any, Callable

import click
import pytest
from click.testing import CliRunner, Result

from askwire import AnswerRef, AskConfig, Question, ask, ask_one
from askwire.errors import InvalidAnswer, PromptAborted
from askwire.model.question import Choice
from askwire.prompt.console import Confirm, Input, MultiSelect, Password, Select
from askwire.validators import required


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _drive(action: Callable[[], Any], input: str) -> Result:
    """Run *action* inside a click command fed with *input* on stdin."""

    @click.command()
    def cmd() -> None:
        click.echo(f"RESULT={action()!r}")

    return CliRunner().invoke(cmd, input=input)


# ---------------------------------------------------------------------------
# Input / Password / Confirm
# ---------------------------------------------------------------------------


class TestInput:
    def test_returns_typed_text(self) -> None:
        result = _drive(Input("Name?").prompt, "Ada\n")
        assert result.exit_code == 0
        assert "Name?" in result.output
        assert "RESULT='Ada'" in result.output

    def test_empty_input_uses_default(self) -> None:
        result = _drive(Input("Name?", default="anon").prompt, "\n")
        assert "RESULT='anon'" in result.output

    def test_empty_input_without_default(self) -> None:
        result = _drive(Input("Name?").prompt, "\n")
        assert "RESULT=''" in result.output

    def test_eof_raises_prompt_aborted(self) -> None:
        result = _drive(Input("Name?").prompt, "")
        assert isinstance(result.exception, PromptAborted)

    def test_error_is_printed_with_help(self) -> None:
        prompt = Input("Name?", help="Your given name")
        result = _drive(lambda: prompt.error(InvalidAnswer("Value is required")), "")
        assert "Sorry, your reply was invalid: Value is required" in result.output
        assert "Your given name" in result.output


class TestPassword:
    def test_hidden_input_is_returned(self) -> None:
        result = _drive(Password("Secret?").prompt, "hunter2\n")
        assert "RESULT='hunter2'" in result.output

    def test_cleanup_masks_value(self) -> None:
        result = _drive(lambda: Password("Secret?").cleanup("hunter2"), "")
        assert "Secret?: *******" in result.output
        assert "hunter2" not in result.output


class TestConfirm:
    def test_yes(self) -> None:
        result = _drive(Confirm("Continue?").prompt, "y\n")
        assert "RESULT=True" in result.output

    def test_empty_uses_default(self) -> None:
        result = _drive(Confirm("Continue?", default=True).prompt, "\n")
        assert "RESULT=True" in result.output

    def test_eof_raises_prompt_aborted(self) -> None:
        result = _drive(Confirm("Continue?").prompt, "")
        assert isinstance(result.exception, PromptAborted)


# ---------------------------------------------------------------------------
# Select / MultiSelect
# ---------------------------------------------------------------------------


class TestSelect:
    def test_prints_numbered_menu_and_returns_raw(self) -> None:
        select = Select("Colour?", ["red", "green"])
        result = _drive(select.prompt, "2\n")
        assert "1) red" in result.output
        assert "2) green" in result.output
        assert "RESULT='2'" in result.output

    def test_empty_input_returns_default(self) -> None:
        select = Select("Colour?", ["red", "green"], default="green")
        result = _drive(select.prompt, "\n")
        assert "RESULT='green'" in result.output

    def test_to_choice(self) -> None:
        select = Select("Colour?", ["red", "green"])
        assert select.to_choice("2") == Choice("green", 1)
        assert select.to_choice(Choice("red", 0)) == Choice("red", 0)
        with pytest.raises(InvalidAnswer):
            select.to_choice("blue")

    def test_rejects_empty_options(self) -> None:
        with pytest.raises(ValueError):
            Select("Colour?", [])

    def test_rejects_unknown_default(self) -> None:
        with pytest.raises(ValueError):
            Select("Colour?", ["red"], default="blue")

    def test_unknown_entry_is_reprompted_through_converter(self) -> None:
        select = Select("Colour?", ["red", "green"])
        ref = AnswerRef()

        result = _drive(lambda: ask_one(select, ref, convert=select.to_choice), "blue\ngreen\n")

        assert result.exit_code == 0
        assert "Sorry, your reply was invalid" in result.output
        assert "Colour? green" in result.output
        assert ref.value == Choice("green", 1)


class TestMultiSelect:
    def test_to_choices_splits_and_dedupes(self) -> None:
        multi = MultiSelect("Toppings?", ["ham", "cheese", "olives"])
        assert multi.to_choices("1, olives, 1") == [Choice("ham", 0), Choice("olives", 2)]

    def test_to_choices_empty(self) -> None:
        multi = MultiSelect("Toppings?", ["ham", "cheese"])
        assert multi.to_choices("") == []

    def test_to_choices_unknown_entry(self) -> None:
        multi = MultiSelect("Toppings?", ["ham", "cheese"])
        with pytest.raises(InvalidAnswer):
            multi.to_choices("ham, pineapple")

    def test_default_is_offered(self) -> None:
        multi = MultiSelect("Toppings?", ["ham", "cheese"], default=["cheese"])
        result = _drive(multi.prompt, "\n")
        assert "RESULT='cheese'" in result.output

    def test_rejects_unknown_default(self) -> None:
        with pytest.raises(ValueError):
            MultiSelect("Toppings?", ["ham"], default=["pineapple"])


# ---------------------------------------------------------------------------
# Sequencing console prompts
# ---------------------------------------------------------------------------


class TestConsoleSequence:
    def test_required_input_reprompts(self) -> None:
        answers: dict[str, Any] = {}

        result = _drive(
            lambda: ask(
                [Question("name", Input("Name?"), validate=required, convert=str.strip)],
                answers,
                # the rejected answer is stale, so re-run conversion on the new input
                config=AskConfig(reconvert=True),
            ),
            "  \nAda\n",
        )

        assert result.exit_code == 0
        assert "Value is required" in result.output
        assert answers == {"name": "Ada"}
