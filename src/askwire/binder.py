"""Answer binder: store an accepted answer into a caller-owned container.

Supported containers, tried in order:

- objects with a ``write_answer(name, value)`` method (:class:`Settable`),
  such as :class:`AnswerRef`;
- mutable mappings, keyed by question name;
- dataclass instances, matched by ``field(metadata={"askwire": name})`` or
  by field name (case-insensitive), with the value coerced to the field's
  annotated type;
- any other object, matched against its existing public attributes
  (case-insensitive), assigned as-is.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from collections.abc import MutableMapping
from typing import Any, Protocol, Union, runtime_checkable

from askwire.errors import BindError
from askwire.model.question import Choice

logger = logging.getLogger(__name__)

TAG = "askwire"

_TRUE_WORDS = frozenset({"y", "yes", "true", "1", "on"})
_FALSE_WORDS = frozenset({"n", "no", "false", "0", "off"})


@runtime_checkable
class Settable(Protocol):
    """Containers that store answers themselves."""

    def write_answer(self, name: str, value: Any) -> None: ...


class AnswerRef:
    """Holder for a single answer, the usual target for ``ask_one``."""

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def write_answer(self, name: str, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"AnswerRef({self.value!r})"


def bind(container: Any, name: str, value: Any) -> None:
    """Store *value* under *name* inside *container*.

    Raises :class:`BindError` if the container has no place for *name* or
    the value cannot be coerced to what that place holds.
    """
    if container is None:
        raise BindError("cannot bind an answer into None", name=name)

    if isinstance(container, Settable):
        container.write_answer(name, value)
        return

    if not name:
        raise BindError(
            f"cannot bind an unnamed answer into {type(container).__name__}",
            name=name,
            target=container,
        )

    if isinstance(container, MutableMapping):
        container[name] = value
        return

    if dataclasses.is_dataclass(container) and not isinstance(container, type):
        _bind_dataclass(container, name, value)
        return

    _bind_attribute(container, name, value)


def _bind_dataclass(container: Any, name: str, value: Any) -> None:
    field = find_field(container, name)
    if field is None:
        raise BindError(
            f"could not find field matching {name!r} in {type(container).__name__}",
            name=name,
            target=container,
        )
    try:
        hints = typing.get_type_hints(type(container))
    except NameError as exc:
        raise BindError(
            f"cannot resolve the type of field {field.name!r}: {exc}",
            name=name,
            target=container,
            cause=exc,
        ) from exc
    target_type = hints.get(field.name, Any)
    try:
        coerced = coerce(value, target_type)
    except (TypeError, ValueError) as exc:
        raise BindError(
            f"cannot store {value!r} in field {field.name!r}: {exc}",
            name=name,
            target=container,
            cause=exc,
        ) from exc
    logger.debug("binding %r to %s.%s", coerced, type(container).__name__, field.name)
    _assign(container, field.name, coerced, name)


def find_field(container: Any, name: str) -> dataclasses.Field[Any] | None:
    """Locate the dataclass field for *name*: tag first, then field name."""
    fields = dataclasses.fields(container)
    for f in fields:
        if f.metadata.get(TAG) == name:
            return f
    lowered = name.lower()
    for f in fields:
        if f.name.lower() == lowered:
            return f
    return None


def _bind_attribute(container: Any, name: str, value: Any) -> None:
    try:
        attributes = vars(container)
    except TypeError:
        raise BindError(
            f"cannot bind answers into {type(container).__name__}",
            name=name,
            target=container,
        ) from None
    lowered = name.lower()
    for attr in attributes:
        if not attr.startswith("_") and attr.lower() == lowered:
            _assign(container, attr, value, name)
            return
    raise BindError(
        f"could not find attribute matching {name!r} in {type(container).__name__}",
        name=name,
        target=container,
    )


def _assign(container: Any, attr: str, value: Any, name: str) -> None:
    try:
        setattr(container, attr, value)
    except AttributeError as exc:
        raise BindError(
            f"cannot assign {attr!r} on {type(container).__name__}: {exc}",
            name=name,
            target=container,
            cause=exc,
        ) from exc


def coerce(value: Any, target_type: Any) -> Any:
    """Convert *value* to *target_type*; raises ValueError/TypeError if impossible."""
    if target_type is Any or target_type is object:
        return value

    origin = typing.get_origin(target_type)
    args = typing.get_args(target_type)

    if origin is Union or origin is types.UnionType:
        if value is None and type(None) in args:
            return None
        members = [a for a in args if a is not type(None)]
        errors: list[str] = []
        for member in members:
            try:
                return coerce(value, member)
            except (TypeError, ValueError) as exc:
                errors.append(str(exc))
        raise TypeError("; ".join(errors) or f"no type accepts {value!r}")

    if origin in (list, tuple, set, frozenset):
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise TypeError(f"expected a sequence, got {type(value).__name__}")
        item_type = args[0] if args else Any
        return origin(coerce(item, item_type) for item in value)

    if origin is not None:
        target_type = origin

    if not isinstance(target_type, type):
        return value

    if isinstance(value, Choice):
        if target_type is int:
            return value.index
        if target_type is str:
            return value.value
        if target_type is Choice:
            return value

    if target_type is bool:
        return parse_bool(value)

    if isinstance(value, bool) and target_type in (int, float):
        raise TypeError(f"cannot convert bool to {target_type.__name__}")

    if isinstance(value, target_type):
        return value

    if target_type in (int, float):
        if not isinstance(value, (str, int, float)):
            raise TypeError(f"cannot convert {type(value).__name__} to {target_type.__name__}")
        if target_type is int and isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{value!r} is not a whole number")
        return target_type(value.strip() if isinstance(value, str) else value)

    if target_type is str:
        if isinstance(value, (int, float)):
            return str(value)
        raise TypeError(f"cannot convert {type(value).__name__} to str")

    raise TypeError(
        f"cannot convert {type(value).__name__} to {target_type.__name__}"
    )


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"{value!r} is not a yes/no value")
