"""Fill templates with random values."""

from __future__ import annotations

from fakesmith.data import has_values
from fakesmith.randomness import get_rand_value, replace_with_letters, replace_with_numbers


def generate(template: str) -> str:
    """Expand a template.

    ``{category.subcategory}`` becomes a random value from that table (or
    nothing if there is no such table), ``#`` a random digit and ``?`` a
    random lower-case letter.
    """
    text = template
    while "{" in text and "}" in text:
        start = text.index("{")
        end = text.index("}")
        if end < start:
            raise ValueError(f"unbalanced braces in template: {template!r}")
        key = text[start + 1 : end]
        parts = key.split(".")
        value = ""
        if len(parts) >= 2 and has_values(parts[0], parts[1]):
            value = get_rand_value(parts[0], parts[1])
        text = text.replace("{" + key + "}", value, 1)

    return replace_with_letters(replace_with_numbers(text))