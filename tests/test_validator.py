"""Tests for entry validation."""

import pytest

from tavsa_editor import (
    InvalidTypeError,
    MissingFieldError,
    ValidationError,
    WordType,
    parse_word_type,
    validate_word,
)


class TestMissingFields:

    @pytest.mark.parametrize("args", [
        ("", "x", "y"),
        ("noun", "", "y"),
        ("noun", "x", ""),
    ])
    def test_empty_field(self, args):
        with pytest.raises(MissingFieldError):
            validate_word(*args)

    def test_message_names_fields(self):
        with pytest.raises(MissingFieldError, match="word, definition"):
            validate_word("noun", "", "")

    def test_is_validation_error(self):
        with pytest.raises(ValidationError):
            validate_word("noun", "x", "")


class TestAutoType:

    def test_resolves_verb(self):
        assert validate_word("auto", "katrna", "def") is WordType.VERB

    def test_without_marker_is_invalid(self):
        with pytest.raises(InvalidTypeError):
            validate_word("auto", "zint", "def")


class TestConcreteTypes:

    @pytest.mark.parametrize("value", ["noun", "verb", "amuini"])
    def test_valid(self, value):
        assert validate_word(value, "zint", "def") == WordType(value)

    def test_verb_without_marker_is_allowed(self):
        assert validate_word("verb", "zint", "def") is WordType.VERB

    @pytest.mark.parametrize("value", ["adjective", "Noun", "n"])
    def test_invalid(self, value):
        with pytest.raises(InvalidTypeError, match="Invalid word type"):
            validate_word(value, "zint", "def")


class TestParseWordType:

    def test_enum_member(self):
        assert parse_word_type(WordType.AMUINI) is WordType.AMUINI

    def test_auto_is_not_a_type(self):
        with pytest.raises(InvalidTypeError):
            parse_word_type("auto")


class TestNonTextValues:

    @pytest.mark.parametrize("args", [
        ("auto", 123, "def"),
        ("noun", 123, "def"),
        ("noun", "zint", ["def"]),
    ])
    def test_word_and_definition_must_be_text(self, args):
        with pytest.raises(ValidationError, match="must be text"):
            validate_word(*args)

    def test_type_must_be_text(self):
        with pytest.raises(InvalidTypeError):
            validate_word(1, "zint", "def")
