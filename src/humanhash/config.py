from __future__ import annotations

import pathlib
import tomllib

from typing import NamedTuple

from . import wordlist
from .hasher import DEFAULT_SEPARATOR, DEFAULT_WORDS, HumanHasher
from .identifiers import Generator


CONFIG_DIRECTORY = pathlib.Path("~/.humanhash").expanduser()
CONFIG_PATH = CONFIG_DIRECTORY / "config.toml"

DEFAULT_GENERATOR: Generator = "random"


class Config(NamedTuple):
    words: int
    separator: str
    generator: Generator
    wordlist_path: pathlib.Path | None

    def hasher(self) -> HumanHasher:
        """Creates a hasher for the configured wordlist, falls back to the default wordlist if none is configured."""
        if self.wordlist_path is None:
            return HumanHasher()
        return HumanHasher(wordlist.load(self.wordlist_path))


def load(path: pathlib.Path = CONFIG_PATH) -> Config:
    """Load the configuration from the given configuration file."""
    with open(path, "rb") as f:
        words = DEFAULT_WORDS
        separator = DEFAULT_SEPARATOR
        generator = DEFAULT_GENERATOR
        wordlist_path = None

        for key, value in tomllib.load(f).items():
            if key != "default":
                raise ValueError(f"Invalid configuration key {key!r}.")
            if not isinstance(value, dict):
                raise ValueError(f"Error in configuration file near [{key}].")

            for subkey, value in value.items():
                if subkey == "words":
                    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                        raise ValueError(f"Invalid number of words {value!r}.")
                    words = value
                elif subkey == "separator":
                    if not isinstance(value, str):
                        raise ValueError(f"Invalid separator {value!r}.")
                    separator = value
                elif subkey == "generator":
                    if value not in Generator.__args__:
                        raise ValueError(f"Invalid identifier generator {value!r}.")
                    generator = value
                elif subkey == "wordlist":
                    if not isinstance(value, str):
                        raise ValueError(f"Invalid wordlist path {value!r}.")
                    wordlist_path = pathlib.Path(value).expanduser()
                else:
                    raise ValueError(f"Invalid configuration key {subkey!r}.")

        return Config(words, separator, generator, wordlist_path)


DEFAULT_CONFIG = Config(DEFAULT_WORDS, DEFAULT_SEPARATOR, DEFAULT_GENERATOR, None)
