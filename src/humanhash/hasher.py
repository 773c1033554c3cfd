"""
Transforms hex digests to human-readable phrases such as `victor-bacon-zulu-lima`.

The digest is compressed to a fixed number of bytes by XOR-folding contiguous segments, then every byte is mapped to
one of 256 words. Using the same wordlist, the same digest always renders the same phrase.
"""

from __future__ import annotations

import functools
import logging
import operator
import re

from typing import Iterable, Sequence

from . import identifiers
from .wordlist import DEFAULT_WORDLIST

logger = logging.getLogger(__name__)

HEX_DIGEST_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2})+")

DEFAULT_WORDS = 4
DEFAULT_SEPARATOR = "-"


class HumanHashError(ValueError):
    pass


class InvalidConfigurationError(HumanHashError):
    def __init__(self, num_words: int):
        super().__init__(f"Wordlist must have exactly 256 items, got {num_words}.")


class InsufficientInputError(HumanHashError):
    def __init__(self, num_bytes: int, target: int):
        if target < 1:
            super().__init__(f"Number of output words must be at least 1, got {target}.")
        else:
            super().__init__(f"Fewer input bytes ({num_bytes}) than requested output words ({target}).")


class InvalidDigestError(HumanHashError):
    def __init__(self, hexdigest: str):
        super().__init__(f"Invalid hex digest {hexdigest!r}, expected an even number of hexadecimal characters.")


def parse_digest(hexdigest: str) -> bytes:
    """Parses a hex digest (case-insensitive) into its byte values, two characters per byte."""
    if not HEX_DIGEST_PATTERN.fullmatch(hexdigest):
        raise InvalidDigestError(hexdigest)
    return bytes.fromhex(hexdigest)


def segments(data: bytes | Sequence[int], target: int) -> list[bytes]:
    """Splits `data` into `target` contiguous segments of equal size. Left-over bytes at the end are appended to the
    last segment. Raises an InsufficientInputError if there are fewer bytes than segments requested.
    """
    data = bytes(data)
    length = len(data)
    if target < 1 or target > length:
        raise InsufficientInputError(length, target)

    seg_size = length // target
    parts = [data[i : i + seg_size] for i in range(0, seg_size * target, seg_size)]
    parts[-1] += data[seg_size * target :]
    return parts


def compress(data: bytes | Sequence[int], target: int) -> bytes:
    """Compresses a sequence of byte values to exactly `target` bytes, each the XOR of one segment.

    >>> compress(bytes.fromhex("60ad8d0d871b6095808297"), 4).hex()
    'cd809c60'
    """
    parts = segments(data, target)
    logger.debug(f"Compressing {sum(map(len, parts))} bytes to {target}, segment size {len(parts[0])}.")
    return bytes(functools.reduce(operator.xor, part) for part in parts)


class HumanHasher:
    """Maps digests to phrases using a fixed list of exactly 256 words.

    Duplicate words are accepted, but lead to phrases which no longer identify a single checksum.
    """

    def __init__(self, wordlist: Iterable[str] = DEFAULT_WORDLIST):
        self.wordlist = tuple(wordlist)
        if len(self.wordlist) != 256:
            raise InvalidConfigurationError(len(self.wordlist))

    def humanize(self, hexdigest: str, words: int = DEFAULT_WORDS, separator: str = DEFAULT_SEPARATOR) -> str:
        """Humanize a given hexadecimal digest.

        >>> HumanHasher().humanize("60ad8d0d871b6095808297")
        'sodium-magnesium-nineteen-hydrogen'
        """
        return self.humanize_bytes(parse_digest(hexdigest), words, separator)

    def humanize_bytes(self, data: bytes, words: int = DEFAULT_WORDS, separator: str = DEFAULT_SEPARATOR) -> str:
        """Humanize raw digest bytes."""
        return separator.join(self.wordlist[byte] for byte in compress(data, words))

    def uuid(
        self,
        words: int = DEFAULT_WORDS,
        separator: str = DEFAULT_SEPARATOR,
        generator: identifiers.Generator = "random",
    ) -> identifiers.IdentifierPhrase:
        """Generate a UUID with a human-readable representation. Returns the phrase together with the UUID (without
        dashes) it was derived from.
        """
        identifier = identifiers.generate(generator)
        return identifiers.IdentifierPhrase(self.humanize(identifier, words, separator), identifier)
