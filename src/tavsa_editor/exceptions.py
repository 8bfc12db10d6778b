"""Custom exception hierarchy for tavsa-editor."""

from __future__ import annotations


class TavsaEditorError(Exception):
    """Base exception for all tavsa-editor errors."""


class ValidationError(TavsaEditorError):
    """Invalid entry data (empty field, unknown word type, bad id)."""


class MissingFieldError(ValidationError):
    """A required field (word type, word or definition) is empty."""


class InvalidTypeError(ValidationError):
    """Word type outside the closed set, or ``auto`` could not be resolved."""


class AnalysisError(TavsaEditorError):
    """A word could not be decomposed into morphemes."""


class AnalysisNotImplementedError(AnalysisError):
    """Etymology analysis requested for a word class without an analyzer."""


class OutOfBoundsError(AnalysisError):
    """Morpheme extraction would run past the end of the word."""


class DataImportError(TavsaEditorError):
    """Failed to import data (malformed batch text)."""


class MalformedTokenError(DataImportError):
    """A bulk-import token is not a single ``definition=word`` pair."""

    def __init__(
        self,
        message: str,
        token: str | None = None,
        position: int | None = None,
    ) -> None:
        self.token = token
        self.position = position
        super().__init__(message)


class DatabaseError(TavsaEditorError):
    """Schema version mismatch, connection failure."""


class PersistenceError(DatabaseError):
    """The storage backend rejected an operation; carries its message."""


class ConfigError(TavsaEditorError):
    """Invalid configuration file or value."""
