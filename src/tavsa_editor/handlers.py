"""Request-shaped entry points for a transport layer.

Each handler takes the payload of one request, runs it against an editor
and resolves any :class:`TavsaEditorError` into its user-facing message,
so nothing raised by the core escapes a request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tavsa_editor.editor import TavsaEditor
from tavsa_editor.exceptions import TavsaEditorError
from tavsa_editor.models import WordModel

logger = logging.getLogger(__name__)


def handle_add(
    editor: TavsaEditor, payload: Mapping[str, Any]
) -> list[WordModel] | str:
    """AddEntry: ``{word_type, word, definition}`` -> listing or error text."""
    try:
        editor.add_word(
            payload.get("word_type", ""),
            payload.get("word", ""),
            payload.get("definition", ""),
        )
        return editor.list_words()
    except TavsaEditorError as e:
        logger.debug(f"AddEntry rejected: {e}")
        return str(e)


def handle_import(
    editor: TavsaEditor, word_type: str, body: str
) -> str | None:
    """BulkImport: returns None on success, otherwise the error text."""
    try:
        editor.import_words(body, word_type)
    except TavsaEditorError as e:
        logger.debug(f"BulkImport rejected: {e}")
        return str(e)
    return None


def handle_delete(
    editor: TavsaEditor, payload: Mapping[str, Any]
) -> list[WordModel] | str:
    """DeleteEntry: ``{id}`` -> listing or error text."""
    try:
        editor.delete_word(payload.get("id", ""))
        return editor.list_words()
    except TavsaEditorError as e:
        logger.debug(f"DeleteEntry rejected: {e}")
        return str(e)


def handle_list(editor: TavsaEditor) -> list[WordModel] | str:
    """ListEntries: the full dictionary."""
    try:
        return editor.list_words()
    except TavsaEditorError as e:
        return str(e)


def render_listing(words: list[WordModel]) -> str:
    """Plain-text dictionary listing, one ``id  word: definition`` per line."""
    return "\n".join(
        f"{w.id:>5}  {w.word}: {w.definition}" for w in words
    )
