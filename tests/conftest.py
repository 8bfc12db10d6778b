"""Shared test fixtures for tavsa-editor."""

import pytest

from tavsa_editor import TavsaEditor, WordStore


@pytest.fixture
def editor():
    """Create an in-memory editor for testing."""
    with TavsaEditor(":memory:") as ed:
        yield ed


@pytest.fixture
def store():
    """Create an in-memory word store for testing."""
    with WordStore.open(":memory:") as st:
        yield st


@pytest.fixture
def editor_with_words(editor):
    """Editor holding five verbs with ids 1-5."""
    editor.import_words(
        "go=katrna see=tokurna eat=amirna run=dagirna sing=sotrnake",
        "verb",
    )
    return editor
