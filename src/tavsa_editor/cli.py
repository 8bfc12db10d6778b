"""
Command-line interface for the Tavsa lexicon.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import CONFIG_ENV_VAR, EditorConfig, load_config
from .editor import TavsaEditor
from .exceptions import TavsaEditorError
from .handlers import render_listing
from .models import WordType


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the tavsa CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        config = _load_cli_config(args)
    except (TavsaEditorError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        with TavsaEditor.from_config(config) as editor:
            return args.func(args, editor)
    except TavsaEditorError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tavsa",
        description="Edit the Tavsa lexicon",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"YAML config file (default: ${CONFIG_ENV_VAR})",
    )
    parser.add_argument(
        "--db",
        type=str,
        help="SQLite database path, overrides the config file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # add command
    add_parser = subparsers.add_parser("add", help="Add a single word")
    add_parser.add_argument(
        "word_type",
        help="noun, verb, amuini, or auto to infer verbs from the 'rn' marker",
    )
    add_parser.add_argument("word", help="Surface form")
    add_parser.add_argument("definition", help="Gloss")
    add_parser.set_defaults(func=cmd_add)

    # list command
    list_parser = subparsers.add_parser("list", help="List the dictionary")
    list_parser.set_defaults(func=cmd_list)

    # delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a word by ID")
    delete_parser.add_argument("id", help="Word ID")
    delete_parser.set_defaults(func=cmd_delete)

    # import command
    import_parser = subparsers.add_parser(
        "import",
        help="Import whitespace-separated definition=word pairs",
    )
    import_parser.add_argument(
        "word_type",
        choices=[t.value for t in WordType],
        help="Word type of every imported entry",
    )
    import_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="File with the batch (default: stdin)",
    )
    import_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Abort when a verb's morphemes run past the end of the word",
    )
    import_parser.set_defaults(func=cmd_import)

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Show the etymological decomposition of a word",
    )
    analyze_parser.add_argument("word", help="Surface form")
    analyze_parser.add_argument(
        "--type",
        dest="word_type",
        default=WordType.VERB.value,
        help="Word type (default: verb)",
    )
    analyze_parser.set_defaults(func=cmd_analyze)

    return parser


def _load_cli_config(args: argparse.Namespace) -> EditorConfig:
    source = args.config or os.environ.get(CONFIG_ENV_VAR) or None
    config = load_config(Path(source) if source else None)
    if args.db:
        config.database = args.db
    return config


def cmd_add(args: argparse.Namespace, editor: TavsaEditor) -> int:
    """Handle add command."""
    word = editor.add_word(args.word_type, args.word, args.definition)
    print(f"Added [{word.id}] {word.word} ({word.type.value}): {word.definition}")
    return 0


def cmd_list(args: argparse.Namespace, editor: TavsaEditor) -> int:
    """Handle list command."""
    words = editor.list_words()
    if not words:
        print("Dictionary is empty.")
        return 0
    print(render_listing(words))
    return 0


def cmd_delete(args: argparse.Namespace, editor: TavsaEditor) -> int:
    """Handle delete command."""
    if editor.delete_word(args.id):
        print(f"Deleted word {args.id}.")
    else:
        print(f"No word with id {args.id}.")
    return 0


def cmd_import(args: argparse.Namespace, editor: TavsaEditor) -> int:
    """Handle import command."""
    try:
        body = args.file.read_text(encoding="utf-8") if args.file else sys.stdin.read()
    except (FileNotFoundError, UnicodeDecodeError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    words = editor.import_words(body, args.word_type, strict=args.strict)
    if not words:
        print("Nothing to import.")
        return 0
    print(f"Imported {len(words)} word(s), ids {words[0].id}-{words[-1].id}.")
    return 0


def cmd_analyze(args: argparse.Namespace, editor: TavsaEditor) -> int:
    """Handle analyze command."""
    etymology = editor.analyze(args.word, args.word_type)
    if etymology is None:
        print(f"{args.word}: no decomposition")
        return 0
    print(f"{args.word}")
    print(f"  lexeme:  {etymology.lexeme}")
    print(f"  subject: {etymology.subject or '-'}")
    print(f"  ci:      {etymology.ci or '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
