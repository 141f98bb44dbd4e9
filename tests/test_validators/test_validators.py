"""Tests for the reusable validators and converters."""

import pytest

from askwire.converters import split_list, to_bool, to_float, to_int
from askwire.errors import InvalidAnswer
from askwire.validators import compose, max_length, min_length, one_of, required


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_rejects_empty(self, value):
        with pytest.raises(InvalidAnswer, match="required"):
            required(value)

    @pytest.mark.parametrize("value", ["x", 0, False, ["a"]])
    def test_accepts_present_values(self, value):
        required(value)


class TestLength:
    def test_min_length(self):
        validate = min_length(3)
        validate("abc")
        with pytest.raises(InvalidAnswer, match="Min length is 3"):
            validate("ab")

    def test_max_length(self):
        validate = max_length(2)
        validate(["a", "b"])
        with pytest.raises(InvalidAnswer, match="Max length is 2"):
            validate("abc")

    def test_unsized_value(self):
        with pytest.raises(InvalidAnswer):
            min_length(1)(42)


class TestOneOfAndCompose:
    def test_one_of(self):
        validate = one_of("a", "b")
        validate("a")
        with pytest.raises(InvalidAnswer):
            validate("c")

    def test_compose_first_failure_wins(self):
        validate = compose(required, min_length(5))
        with pytest.raises(InvalidAnswer, match="required"):
            validate("")
        with pytest.raises(InvalidAnswer, match="Min length"):
            validate("abc")
        validate("abcdef")

    def test_invalid_answer_is_a_value_error(self):
        assert issubclass(InvalidAnswer, ValueError)


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------


class TestConverters:
    def test_to_int(self):
        assert to_int(" 12 ") == 12
        assert to_int(5) == 5
        with pytest.raises(InvalidAnswer, match="whole number"):
            to_int("1.5")

    def test_to_float(self):
        assert to_float("2.5") == pytest.approx(2.5)
        assert to_float(3) == 3.0
        with pytest.raises(InvalidAnswer):
            to_float("abc")

    def test_to_bool(self):
        assert to_bool("Yes") is True
        assert to_bool("off") is False
        assert to_bool(True) is True
        with pytest.raises(InvalidAnswer):
            to_bool("perhaps")

    def test_split_list(self):
        assert split_list()("a, b,,c ") == ["a", "b", "c"]
        assert split_list(";")("x;y") == ["x", "y"]
        assert split_list()(("a", 1)) == ["a", "1"]
