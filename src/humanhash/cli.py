"""
Command line interface.
"""

import functools
import hashlib
import importlib.metadata
import logging
import pathlib
import sys

from typing import Callable, ParamSpec, TypeVar

from . import config
from .hasher import HumanHasher, HumanHashError
from .identifiers import Generator

import click

logger = logging.getLogger("humanhash")
logger.setLevel(logging.CRITICAL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
logger.addHandler(handler)


HASH_ALGORITHMS = ["md5", "sha1", "sha256", "sha512", "sha3_256", "blake2b"]


P = ParamSpec("P")
R = TypeVar("R")


def exit_on_error(func: Callable[P, R]) -> Callable[P, R]:
    """Reports errors raised by the hasher to the user and exits, instead of showing a traceback."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except HumanHashError as e:
            error(str(e))
            sys.exit(1)

    return wrapper


def error(text: str) -> None:
    print("\x1b[31m" + f"ERROR: {text}" + "\x1b[0m")


def validate_words(ctx, param, value):
    if not (value is None or value >= 1):
        raise click.BadParameter("Number of words must be at least 1.")
    return value


def words_option(func):
    return click.option(
        "--words",
        "-w",
        help="Number of words in the phrase. [default: 4, or as configured]",
        type=int,
        metavar="WORDS",
        callback=validate_words,
    )(func)


def separator_option(func):
    return click.option(
        "--separator",
        "-s",
        help="String used to join the words. [default: '-', or as configured]",
        type=str,
        metavar="SEPARATOR",
    )(func)


class State:
    def __init__(self, cfg: config.Config, hasher: HumanHasher):
        self.config = cfg
        self.hasher = hasher


pass_state = click.make_pass_decorator(State)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    help=f"Configuration file to use. [default: {config.CONFIG_PATH}]",
)
@click.pass_context
def humanhash(ctx: click.Context, debug: bool, config_path: pathlib.Path | None) -> None:
    """humanhash: Human-readable representations of digests.

    Digests are compressed to a few bytes, each of which is rendered as one word of a fixed list of 256 words. The
    same digest always results in the same phrase, e.g. `sodium-magnesium-nineteen-hydrogen`.
    """
    if debug:
        logger.setLevel(logging.DEBUG)
        print()
        print("!!! DEVELOPMENT MODE: LOGGING IS ENABLED !!!")
        print()

    try:
        cfg = config.load(config_path or config.CONFIG_PATH)
    except FileNotFoundError:
        cfg = config.DEFAULT_CONFIG
        logger.debug("Configuration file not found, using default settings.")
    except Exception as e:
        error(f"Configuration file invalid. {e}")
        print("Exiting.")
        sys.exit(1)

    try:
        hasher = cfg.hasher()
    except (OSError, UnicodeDecodeError, HumanHashError) as e:
        error(f"Wordlist {cfg.wordlist_path} invalid. {e}")
        print("Exiting.")
        sys.exit(1)

    logger.debug(f"Configuration: {cfg}")
    ctx.obj = State(cfg, hasher)


@humanhash.command()
@click.argument("digest")
@words_option
@separator_option
@pass_state
@exit_on_error
def humanize(state: State, digest: str, words: int | None, separator: str | None) -> None:
    """Render a hexadecimal DIGEST as a phrase."""
    words = words or state.config.words
    separator = state.config.separator if separator is None else separator
    click.echo(state.hasher.humanize(digest, words, separator))


@humanhash.command(name="hash", epilog="If no FILE is given or FILE is '-', the standard input is hashed.")
@click.argument("file", type=click.File("rb"), default="-")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(HASH_ALGORITHMS),
    default="sha256",
    show_default=True,
    help="Hash function applied to the content.",
)
@click.option("--show-digest", is_flag=True, help="Also print the hex digest.")
@words_option
@separator_option
@pass_state
@exit_on_error
def hash_(
    state: State,
    file,
    algorithm: str,
    show_digest: bool,
    words: int | None,
    separator: str | None,
) -> None:
    """Hash the contents of FILE and render the digest as a phrase."""
    words = words or state.config.words
    separator = state.config.separator if separator is None else separator

    hasher = hashlib.new(algorithm)
    for chunk in iter(functools.partial(file.read, 65536), b""):
        hasher.update(chunk)
    digest = hasher.digest()
    logger.debug(f"{algorithm}: {digest.hex()}")

    click.echo(state.hasher.humanize_bytes(digest, words, separator))
    if show_digest:
        click.echo(digest.hex())


@humanhash.command()
@words_option
@separator_option
@click.option(
    "--generator",
    "-g",
    type=click.Choice(["random", "time-ordered"]),
    help="Use random (UUID4) or time-ordered (UUID1) identifiers. [default: random, or as configured]",
)
@pass_state
@exit_on_error
def uuid(state: State, words: int | None, separator: str | None, generator: Generator | None) -> None:
    """Generate a new UUID and print its phrase followed by the UUID itself."""
    words = words or state.config.words
    separator = state.config.separator if separator is None else separator
    phrase, identifier = state.hasher.uuid(words, separator, generator or state.config.generator)
    click.echo(phrase)
    click.echo(identifier)


@humanhash.command()
@pass_state
def wordlist(state: State) -> None:
    """Print the active wordlist together with the byte value of each word."""
    for i, word in enumerate(state.hasher.wordlist):
        click.echo(f"{i: >3}. {word}")


@humanhash.command()
def version() -> None:
    """Display version information of this tool."""
    click.echo(f"humanhash: {importlib.metadata.version('humanhash')}")
    click.echo("Libraries: ")
    for lib in ("click",):
        click.echo(f" - {lib}: {importlib.metadata.version(lib)}")


def main():
    humanhash(prog_name=humanhash.name)
