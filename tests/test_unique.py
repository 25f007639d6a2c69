import re

from fakesmith.randomness import seed
from fakesmith.unique import uuid

_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}")


def test_uuid_length():
    assert len(uuid()) == 36


def test_uuid_format_version_and_variant():
    seed(11)
    values = [uuid() for _ in range(200)]
    assert [value for value in values if not _PATTERN.fullmatch(value)] == []
    assert {value[14] for value in values} == {"4"}


def test_uuid_reproducible_with_seed():
    seed(11)
    first = uuid()
    seed(11)
    assert uuid() == first


def test_uuid_values_differ():
    seed(11)
    values = {uuid() for _ in range(100)}
    assert len(values) == 100