"""Switch between named environments kept in a single .env file."""

from .errors import CenvError, EnvFileError, InvalidSelectionError, KeywordNotFoundError
from .envfile import read_env_file, write_env_file
from .models import EnvContents, ParseStatus, Selection
from .parser import list_available_keywords, parse_env, resolve_keyword

__version__ = "0.1.0"

__all__ = [
    "CenvError",
    "EnvContents",
    "EnvFileError",
    "InvalidSelectionError",
    "KeywordNotFoundError",
    "ParseStatus",
    "Selection",
    "list_available_keywords",
    "parse_env",
    "read_env_file",
    "resolve_keyword",
    "write_env_file",
]
