"""Domain model dataclasses and enums for tavsa-editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class WordType(str, Enum):
    """The three lexical classes of Tavsa."""

    NOUN = "noun"
    VERB = "verb"
    AMUINI = "amuini"


class TypeDirective(str, Enum):
    """Creation-time directives that resolve to a concrete :class:`WordType`."""

    AUTO = "auto"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EtymologyModel:
    """Decomposition of a verb surface form into its morphemes."""

    lexeme: str
    subject: str | None
    ci: str | None
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class WordModel:
    """A lexical entry. ``id`` is None until the store assigns one."""

    id: int | None
    word: str
    definition: str
    type: WordType
    etymology: EtymologyModel | None = None
