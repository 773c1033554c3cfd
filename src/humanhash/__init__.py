"""
humanhash: Human-readable representations of digests.

The simplest ways to use this package are the `humanize` and `uuid` functions. For tighter control over the output,
e.g. a custom wordlist, see `HumanHasher`.
"""

from .hasher import (
    DEFAULT_SEPARATOR,
    DEFAULT_WORDS,
    HumanHasher,
    HumanHashError,
    InsufficientInputError,
    InvalidConfigurationError,
    InvalidDigestError,
    compress,
    parse_digest,
    segments,
)
from .identifiers import IdentifierPhrase
from .wordlist import DEFAULT_WORDLIST

DEFAULT_HASHER = HumanHasher()

humanize = DEFAULT_HASHER.humanize
humanize_bytes = DEFAULT_HASHER.humanize_bytes
uuid = DEFAULT_HASHER.uuid

__all__ = [
    "DEFAULT_HASHER",
    "DEFAULT_SEPARATOR",
    "DEFAULT_WORDLIST",
    "DEFAULT_WORDS",
    "HumanHasher",
    "HumanHashError",
    "IdentifierPhrase",
    "InsufficientInputError",
    "InvalidConfigurationError",
    "InvalidDigestError",
    "compress",
    "humanize",
    "humanize_bytes",
    "parse_digest",
    "segments",
    "uuid",
]
