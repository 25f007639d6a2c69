from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

import pytest

from fakesmith.data import HACKER
from fakesmith.filling import fill
from fakesmith.randomness import seed


@dataclass
class Basic:
    _s: str = ""
    s_public: str = ""


@dataclass
class Nested:
    a: str = ""
    b: Optional[Basic] = None
    _bar: Optional[Basic] = None


@dataclass
class BuiltIn:
    number: Optional[int] = None
    ratio: Optional[float] = None
    flag: Optional[bool] = None
    label: str | None = None


@dataclass
class Template:
    number: Optional[str] = field(default=None, metadata={"fake": "#"})
    name: Optional[str] = field(default=None, metadata={"fake": "{hacker.noun}"})


@dataclass
class Foo:
    bar: str = ""
    baz: str = ""
    count: int = 0
    pointer: Optional[int] = None
    skip: Optional[str] = field(default=None, metadata={"fake": "skip"})


@dataclass
class Required:
    title: str
    inner: Basic


@dataclass
class WithList:
    items: list = field(default_factory=list)
    name: str = ""


def test_basic_fills_public_only():
    basic = Basic()
    fill(basic)
    assert basic._s == ""
    assert len(basic.s_public) == 19


def test_nested_creates_public_dataclass():
    nested = Nested()
    fill(nested)
    assert nested.a != "" and len(nested.a) == 19
    assert isinstance(nested.b, Basic)
    assert len(nested.b.s_public) == 19
    assert nested.b._s == ""
    assert nested._bar is None


def test_nested_existing_instance_is_filled_in_place():
    inner = Basic()
    nested = Nested(b=inner)
    fill(nested)
    assert nested.b is inner
    assert len(inner.s_public) == 19


def test_builtin_types_set():
    built = BuiltIn()
    fill(built)
    assert isinstance(built.number, int) and -(2**63) <= built.number < 2**63
    assert isinstance(built.ratio, float) and built.ratio > 0
    assert built.flag in (True, False)
    assert isinstance(built.label, str) and len(built.label) == 19


def test_template_fields():
    seed(11)
    for _ in range(50):
        template = Template()
        fill(template)
        assert len(template.number) == 1 and template.number.isdigit()
        assert template.number != "0"
        assert template.name in HACKER["noun"]


def test_example_struct():
    seed(11)
    foo = Foo()
    fill(foo)
    assert len(foo.bar) == 19 and foo.bar.isalpha() and foo.bar.islower()
    assert len(foo.baz) == 19 and foo.baz.islower()
    assert -(2**63) <= foo.count < 2**63
    assert isinstance(foo.pointer, int)
    assert foo.skip is None


def test_fill_is_repeatable_with_seed():
    seed(11)
    first = Foo()
    fill(first)
    seed(11)
    second = Foo()
    fill(second)
    assert first == second


def test_unsupported_types_left_alone():
    value = WithList(items=[1, 2])
    fill(value)
    assert value.items == [1, 2]
    assert len(value.name) == 19


def test_non_dataclass_raises():
    with pytest.raises(TypeError):
        fill({"a": 1})
    with pytest.raises(TypeError):
        fill(Basic)


def test_fields_are_dataclass_fields():
    assert [f.name for f in dataclasses.fields(Foo)] == [
        "bar", "baz", "count", "pointer", "skip",
    ]
    foo = Foo(skip="kept")
    fill(foo)
    assert foo.skip == "kept"