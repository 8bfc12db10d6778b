__version__ = "0.1.0"

from .editor import TavsaEditor as TavsaEditor
from .store import WordStore as WordStore
from .models import (
    EtymologyModel as EtymologyModel,
    TypeDirective as TypeDirective,
    WordModel as WordModel,
    WordType as WordType,
)
from .validator import (
    validate_word as validate_word,
    parse_word_type as parse_word_type,
)
from .etymology import (
    decompose as decompose,
    derive_etymology as derive_etymology,
)
from .importer import (
    build_batch as build_batch,
    import_batch as import_batch,
    parse_tokens as parse_tokens,
)
from .config import (
    EditorConfig as EditorConfig,
    load_config as load_config,
)
from .exceptions import (
    AnalysisError as AnalysisError,
    AnalysisNotImplementedError as AnalysisNotImplementedError,
    ConfigError as ConfigError,
    DatabaseError as DatabaseError,
    DataImportError as DataImportError,
    InvalidTypeError as InvalidTypeError,
    MalformedTokenError as MalformedTokenError,
    MissingFieldError as MissingFieldError,
    OutOfBoundsError as OutOfBoundsError,
    PersistenceError as PersistenceError,
    TavsaEditorError as TavsaEditorError,
    ValidationError as ValidationError,
)

__all__ = [
    # Editor and store
    "TavsaEditor",
    "WordStore",
    # Models
    "EtymologyModel",
    "TypeDirective",
    "WordModel",
    "WordType",
    # Pipeline functions
    "validate_word",
    "parse_word_type",
    "decompose",
    "derive_etymology",
    "build_batch",
    "import_batch",
    "parse_tokens",
    # Configuration
    "EditorConfig",
    "load_config",
    # Exceptions
    "AnalysisError",
    "AnalysisNotImplementedError",
    "ConfigError",
    "DatabaseError",
    "DataImportError",
    "InvalidTypeError",
    "MalformedTokenError",
    "MissingFieldError",
    "OutOfBoundsError",
    "PersistenceError",
    "TavsaEditorError",
    "ValidationError",
]
