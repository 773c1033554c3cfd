"""
Unique identifiers to be rendered as phrases, see HumanHasher.uuid.
"""

import uuid as uuidlib

from typing import Literal, NamedTuple

Generator = Literal["random", "time-ordered"]


class IdentifierPhrase(NamedTuple):
    humanhash: str
    uuid: str


def generate(generator: Generator = "random") -> str:
    """Generates a new UUID and returns its 32 hex characters without dashes. `random` uses UUID4, `time-ordered`
    uses UUID1 (timestamp based, guaranteed uniqueness but not secret).
    """
    match generator:
        case "random":
            identifier = uuidlib.uuid4()
        case "time-ordered":
            identifier = uuidlib.uuid1()
        case _:
            raise ValueError(f"Invalid identifier generator {generator!r}.")
    return str(identifier).replace("-", "")
