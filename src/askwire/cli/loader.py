"""Build questions from JSON definition files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from askwire import converters, validators
from askwire.errors import DefinitionError
from askwire.model.question import Converter, Question, Validator
from askwire.prompt.console import Confirm, Input, MultiSelect, Password, Select

KINDS = ("input", "password", "confirm", "select", "multiselect")

CONVERTERS: dict[str, Converter] = {
    "int": converters.to_int,
    "float": converters.to_float,
    "bool": converters.to_bool,
    "list": converters.split_list(),
}


def load_questions(path: Path) -> list[Question]:
    """Read *path* and build one :class:`Question` per definition.

    The file holds either a JSON list of definitions or an object with a
    ``questions`` list.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DefinitionError(f"{path.name} is not valid JSON: {exc}", cause=exc) from exc

    if isinstance(data, dict):
        data = data.get("questions")
    if not isinstance(data, list):
        raise DefinitionError(f"{path.name} must contain a list of questions")

    questions = [build_question(d, position=i) for i, d in enumerate(data, start=1)]
    names = [q.name for q in questions]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise DefinitionError(f"duplicate question names: {', '.join(duplicates)}")
    return questions


def build_question(definition: Any, position: int = 1) -> Question:
    if not isinstance(definition, dict):
        raise DefinitionError(f"question {position} must be an object")

    name = definition.get("name")
    if not isinstance(name, str) or not name:
        raise DefinitionError(f"question {position} needs a non-empty 'name'")

    kind = definition.get("kind", "input")
    if kind not in KINDS:
        raise DefinitionError(
            f"question {name!r}: unknown kind {kind!r} (expected one of {', '.join(KINDS)})"
        )

    message = definition.get("message", name)
    default = definition.get("default")
    help_text = definition.get("help", "")
    convert = _converter(name, definition.get("convert"))
    validate = _validator(name, definition.get("validate", []))

    try:
        if kind == "input":
            prompt: Any = Input(message, default=_text(default), help=help_text)
        elif kind == "password":
            prompt = Password(message, help=help_text)
        elif kind == "confirm":
            prompt = Confirm(message, default=bool(default), help=help_text)
        elif kind == "select":
            prompt = Select(message, _options(name, definition), default=default, help=help_text)
        else:
            prompt = MultiSelect(
                message, _options(name, definition), default=_defaults(default), help=help_text
            )
    except ValueError as exc:
        raise DefinitionError(f"question {name!r}: {exc}", cause=exc) from exc

    if kind == "confirm" and convert is not None:
        raise DefinitionError(f"question {name!r}: confirm questions take no 'convert'")

    if kind in ("select", "multiselect"):
        if convert is not None:
            raise DefinitionError(f"question {name!r}: {kind} questions take no 'convert'")
        convert = prompt.to_choice if kind == "select" else prompt.to_choices

    return Question(name=name, prompt=prompt, validate=validate, convert=convert)


def _text(default: Any) -> str:
    return "" if default is None else str(default)


def _defaults(default: Any) -> list[str]:
    if default is None:
        return []
    if isinstance(default, str):
        return [part.strip() for part in default.split(",") if part.strip()]
    return [str(d) for d in default]


def _options(name: str, definition: dict[str, Any]) -> list[str]:
    options = definition.get("options")
    if not isinstance(options, list) or not options:
        raise DefinitionError(f"question {name!r}: 'options' must be a non-empty list")
    return [str(o) for o in options]


def _converter(name: str, spec: Any) -> Converter | None:
    if spec is None:
        return None
    try:
        return CONVERTERS[spec]
    except (KeyError, TypeError):
        raise DefinitionError(
            f"question {name!r}: unknown converter {spec!r} "
            f"(expected one of {', '.join(CONVERTERS)})"
        ) from None


def _validator(name: str, specs: Any) -> Validator | None:
    if isinstance(specs, str):
        specs = [specs]
    if not isinstance(specs, list):
        raise DefinitionError(f"question {name!r}: 'validate' must be a list")
    if not specs:
        return None

    built: list[Validator] = []
    for spec in specs:
        rule, _, arg = str(spec).partition(":")
        if rule == "required":
            built.append(validators.required)
        elif rule in ("min_length", "max_length"):
            try:
                length = int(arg)
            except ValueError:
                raise DefinitionError(
                    f"question {name!r}: {rule} needs a whole number, got {arg!r}"
                ) from None
            factory = validators.min_length if rule == "min_length" else validators.max_length
            built.append(factory(length))
        else:
            raise DefinitionError(f"question {name!r}: unknown validator {rule!r}")
    return built[0] if len(built) == 1 else validators.compose(*built)
