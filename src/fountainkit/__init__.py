"""FountainKit: a line-oriented parser for Fountain screenplays.

FountainKit turns screenplay text written in the Fountain markup into an
ordered sequence of typed script elements plus the title page, boneyard
comments and notes.
"""

from .config import FountainKitSettings, get_logger, get_settings
from .exceptions import (
    ConfigurationError,
    FountainFileNotFoundError,
    FountainKitError,
    ParseError,
)
from .main import FountainKit
from .parser import (
    ElementType,
    FountainDocument,
    FountainParser,
    parse_file,
    parse_text,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ElementType",
    "FountainDocument",
    "FountainFileNotFoundError",
    "FountainKit",
    "FountainKitError",
    "FountainKitSettings",
    "FountainParser",
    "ParseError",
    "__version__",
    "get_logger",
    "get_settings",
    "parse_file",
    "parse_text",
]
