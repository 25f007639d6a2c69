"""Fill dataclass instances with random values."""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from typing import Any

from fakesmith.generate import generate
from fakesmith.numbers import boolean, float64, int64

SKIP = "skip"
_DEFAULT_STRING_TEMPLATE = "?" * 19
_UNSET = object()

_UNION_TYPES: tuple[Any, ...] = (typing.Union, types.UnionType)
_BUILTIN_NAMES: dict[str, type] = {"str": str, "int": int, "float": float, "bool": bool}
_OPTIONAL_PREFIXES = ("Optional[", "typing.Optional[")


def _resolve(annotation: Any, owner: type) -> Any:
    """Turn a field annotation, possibly written as a string, into a type."""
    if not isinstance(annotation, str):
        return annotation
    text = annotation.strip().strip("'\"")
    for prefix in _OPTIONAL_PREFIXES:
        if text.startswith(prefix) and text.endswith("]"):
            inner = _resolve(text[len(prefix) : -1], owner)
            return None if inner is None else typing.Optional[inner]
    parts = [part.strip() for part in text.split("|")]
    if len(parts) == 2 and "None" in parts:
        other = parts[1] if parts[0] == "None" else parts[0]
        inner = _resolve(other, owner)
        return None if inner is None else typing.Optional[inner]
    if text in _BUILTIN_NAMES:
        return _BUILTIN_NAMES[text]
    if text == owner.__name__:
        return owner
    module = inspect.getmodule(owner)
    if module is None:
        return None
    return getattr(module, text, None)


def _optional_inner(hint: Any) -> Any:
    """Return X for Optional[X] / X | None, else None."""
    if typing.get_origin(hint) in _UNION_TYPES:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1 and len(typing.get_args(hint)) == 2:
            return args[0]
    return None


def _zero(hint: Any) -> Any:
    if _optional_inner(hint) is not None:
        return None
    if hint is str:
        return ""
    if hint is bool:
        return False
    if hint is int:
        return 0
    if hint is float:
        return 0.0
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return _new_instance(hint)
    return None


def _new_instance(cls: type) -> Any:
    kwargs = {
        field.name: _zero(_resolve(field.type, cls))
        for field in dataclasses.fields(cls)
        if field.init
        and field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING
    }
    return cls(**kwargs)


def _value_for(hint: Any, current: Any, template: str) -> Any:
    inner = _optional_inner(hint)
    if inner is not None:
        return _value_for(inner, current, template)
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        instance = current if isinstance(current, hint) else _new_instance(hint)
        _fill_instance(instance)
        return instance
    if hint is str:
        return generate(template or _DEFAULT_STRING_TEMPLATE)
    if hint is bool:
        return boolean()
    if hint is int:
        return int64()
    if hint is float:
        return float64()
    return _UNSET


def _fill_instance(obj: Any) -> None:
    owner = type(obj)
    for field in dataclasses.fields(obj):
        if field.name.startswith("_"):
            continue
        template = field.metadata.get("fake", "")
        if template == SKIP:
            continue
        hint = _resolve(field.type, owner)
        value = _value_for(hint, getattr(obj, field.name, None), template)
        if value is not _UNSET:
            setattr(obj, field.name, value)


def fill(obj: Any) -> None:
    """Fill the public fields of a dataclass instance with random data, in place.

    Strings are filled from the field's ``fake`` metadata template (see
    ``generate``) or with 19 random letters; ints, floats and bools get random
    values; nested dataclasses are created when missing and filled.  Fields
    whose name starts with an underscore, or whose ``fake`` metadata is
    ``"skip"``, are left alone, as are fields of other types.
    """
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    _fill_instance(obj)