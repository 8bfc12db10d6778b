"""Bulk import of ``definition=word`` batches for tavsa-editor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tavsa_editor.etymology import derive_etymology
from tavsa_editor.exceptions import MalformedTokenError
from tavsa_editor.models import WordModel, WordType
from tavsa_editor.validator import parse_word_type

if TYPE_CHECKING:
    from tavsa_editor.store import WordStore

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = "="


def parse_tokens(raw_text: str) -> list[tuple[str, str]]:
    """Split batch text into ``(definition, word)`` pairs.

    Tokens are separated by whitespace and each must hold exactly one
    ``=`` with text on both sides. The first bad token aborts the batch.
    """
    pairs: list[tuple[str, str]] = []
    for position, token in enumerate(raw_text.split(), start=1):
        parts = token.split(PAIR_SEPARATOR)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise MalformedTokenError(
                f"Malformed token #{position}: {token!r} "
                f"(expected definition{PAIR_SEPARATOR}word)",
                token=token,
                position=position,
            )
        logger.debug(f"Token #{position}: {parts}")
        pairs.append((parts[0], parts[1]))
    return pairs


def build_batch(
    raw_text: str,
    word_type: WordType | str,
    current_max_id: int | None,
    *,
    strict: bool = False,
) -> list[WordModel]:
    """Turn batch text into numbered words, continuing after ``current_max_id``.

    Words and definitions are lower-cased and each word's etymology is
    derived from its stored form. With ``strict`` an out-of-bounds morpheme
    aborts the batch instead of leaving that entry without etymology.
    """
    resolved = parse_word_type(word_type)
    pairs = parse_tokens(raw_text)
    first_id = current_max_id + 1 if current_max_id is not None else 1

    words: list[WordModel] = []
    for offset, (definition, word) in enumerate(pairs):
        word = word.lower()
        words.append(WordModel(
            id=first_id + offset,
            word=word,
            definition=definition.lower(),
            type=resolved,
            etymology=derive_etymology(word, resolved, strict=strict),
        ))
    return words


def import_batch(
    store: WordStore,
    raw_text: str,
    word_type: WordType | str,
    *,
    strict: bool = False,
) -> list[WordModel]:
    """Parse, number and insert a batch of words.

    The max-ID lookup and the insert are separate statements with no lock
    between them: two imports that read the same maximum produce the same
    IDs and the later insert fails with a PersistenceError.
    """
    words = build_batch(raw_text, word_type, store.max_id(), strict=strict)
    count = store.insert_batch(words)
    if words:
        logger.info(
            f"Imported {count} {words[0].type.value} entries "
            f"(ids {words[0].id}-{words[-1].id})"
        )
    return words
