"""Morphological analysis of Tavsa surface forms."""

from __future__ import annotations

import logging

from tavsa_editor.exceptions import (
    AnalysisNotImplementedError,
    OutOfBoundsError,
)
from tavsa_editor.models import EtymologyModel, WordType

logger = logging.getLogger(__name__)

# Separates a verb's lexeme from the morphology that follows it
VERB_MARKER = "rn"

# Marker characters, in search order, for each morpheme slot
SUBJECT_MARKERS = ("t", "d")
CI_MARKERS = ("k", "g")

MORPHEME_LENGTH = 2


def decompose(word: str, word_type: WordType | str) -> EtymologyModel | None:
    """Split ``word`` into lexeme, subject and ci morphemes.

    Only verbs can be analyzed. A verb without the ``rn`` marker has no
    decomposition and yields ``None``.

    Raises:
        AnalysisNotImplementedError: ``word_type`` is not ``verb``.
        OutOfBoundsError: a subject or ci marker is the last character,
            so its two-character morpheme would run past the end.
    """
    if word_type == WordType.VERB:
        return _decompose_verb(word)
    raise AnalysisNotImplementedError(
        f"Etymology analysis is not implemented for word type "
        f"{_type_name(word_type)!r}"
    )


def derive_etymology(
    word: str,
    word_type: WordType | str,
    *,
    strict: bool = False,
) -> EtymologyModel | None:
    """Decompose ``word`` for storage alongside the entry.

    Word classes without an analyzer get no etymology. An out-of-bounds
    morpheme is re-raised when ``strict``, otherwise logged and dropped.
    """
    try:
        return decompose(word, word_type)
    except AnalysisNotImplementedError:
        logger.debug(f"No analyzer for {_type_name(word_type)}: {word!r}")
        return None
    except OutOfBoundsError as e:
        if strict:
            raise
        logger.warning(f"Storing {word!r} without etymology: {e}")
        return None


def _decompose_verb(word: str) -> EtymologyModel | None:
    index = word.find(VERB_MARKER)
    if index == -1:
        return None

    return EtymologyModel(
        lexeme=word[:index],
        subject=_extract_morpheme(word, SUBJECT_MARKERS),
        ci=_extract_morpheme(word, CI_MARKERS),
        modifiers=(),
    )


def _extract_morpheme(word: str, markers: tuple[str, ...]) -> str | None:
    """Return the morpheme starting at the first marker found, in marker order."""
    for marker in markers:
        index = word.find(marker)
        if index != -1:
            break
    else:
        return None

    end = index + MORPHEME_LENGTH
    if end > len(word):
        raise OutOfBoundsError(
            f"Morpheme at index {index} of {word!r} needs {MORPHEME_LENGTH} "
            f"characters but the word has {len(word)}"
        )
    return word[index:end]


def _type_name(word_type: WordType | str) -> str:
    return word_type.value if isinstance(word_type, WordType) else str(word_type)
