"""Validation of incoming lexical entries."""

from __future__ import annotations

from typing import Any

from tavsa_editor.etymology import VERB_MARKER
from tavsa_editor.exceptions import (
    InvalidTypeError,
    MissingFieldError,
    ValidationError,
)
from tavsa_editor.models import TypeDirective, WordType


def validate_word(word_type: str, word: str, definition: str) -> WordType:
    """Check a new entry and resolve its concrete word type.

    ``auto`` resolves to ``verb`` when the word carries the ``rn`` verb
    marker. No other type is ever inferred.

    Raises:
        MissingFieldError: any of the three inputs is empty.
        InvalidTypeError: the type is unknown, or ``auto`` found no marker.
        ValidationError: the word or definition is not text.
    """
    missing = [
        name
        for name, value in (
            ("word_type", word_type),
            ("word", word),
            ("definition", definition),
        )
        if not value
    ]
    if missing:
        raise MissingFieldError(f"Missing fields: {', '.join(missing)}")

    if not isinstance(word_type, str):
        raise InvalidTypeError(f"Invalid word type: {word_type!r}")
    for name, value in (("word", word), ("definition", definition)):
        if not isinstance(value, str):
            raise ValidationError(f"Field {name!r} must be text, got {value!r}")

    if word_type == TypeDirective.AUTO:
        if VERB_MARKER in word:
            return WordType.VERB
        raise InvalidTypeError(
            f"Invalid word type: cannot infer a type for {word!r}"
        )

    return parse_word_type(word_type)


def parse_word_type(value: Any) -> WordType:
    """Convert a wire-level literal to a :class:`WordType`.

    Directives such as ``auto`` are not concrete types and are rejected.
    """
    try:
        return WordType(value)
    except ValueError:
        raise InvalidTypeError(f"Invalid word type: {value!r}") from None
