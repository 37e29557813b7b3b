"""Option table and shared constants for the maze command line."""

from enum import Enum
from typing import Optional


MINDIM = 4
"""Smallest accepted maze width or height"""

MAXDIM = 5000
"""Largest accepted maze width or height"""

EXTLEN = 4
"""Length of the vector file extension"""

VECTOR_EXTENSION = ".svg"

ONE_ARGUMENT = 1
"""Save, load and targeted solve options take exactly one argument"""


class OptionType(Enum):
    """Options recognized on the command line."""

    GENERATE_AB = "generate-ab"
    GENERATE_ELLER = "generate-eller"
    SAVE_VECTOR = "save-vector"
    SAVE_BINARY = "save-binary"
    LOAD_BINARY = "load-binary"
    SOLVE_MANHATTAN = "solve-manhattan"
    SOLVE_EUCLIDEAN = "solve-euclidean"
    SOLVE_BREADTH = "solve-breadth"
    SOLVE_DEPTH = "solve-depth"

    @classmethod
    def lookup(cls, token: str) -> Optional["OptionType"]:
        """Find the option spelled exactly as token.

        Args:
            token: Raw command-line token

        Returns:
            The matching OptionType, or None if the token is not an option
        """
        return _OPTIONS_BY_SPELLING.get(token)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_generate(self) -> bool:
        return self in (OptionType.GENERATE_AB, OptionType.GENERATE_ELLER)

    @property
    def is_save(self) -> bool:
        return self in (OptionType.SAVE_VECTOR, OptionType.SAVE_BINARY)

    @property
    def is_solve(self) -> bool:
        return self in (
            OptionType.SOLVE_MANHATTAN,
            OptionType.SOLVE_EUCLIDEAN,
            OptionType.SOLVE_BREADTH,
            OptionType.SOLVE_DEPTH,
        )


_OPTIONS_BY_SPELLING = {option.value: option for option in OptionType}

_DESCRIPTIONS = {
    OptionType.GENERATE_AB: "generate a maze with the Aldous-Broder algorithm",
    OptionType.GENERATE_ELLER: "generate a maze with Eller's algorithm",
    OptionType.SAVE_VECTOR: "save the maze as an svg file",
    OptionType.SAVE_BINARY: "save the maze as a binary file",
    OptionType.LOAD_BINARY: "load a maze from a binary file",
    OptionType.SOLVE_MANHATTAN: "solve with Dijkstra's algorithm and a manhattan distance heuristic",
    OptionType.SOLVE_EUCLIDEAN: "solve with Dijkstra's algorithm and a euclidean distance heuristic",
    OptionType.SOLVE_BREADTH: "solve with a breadth first search",
    OptionType.SOLVE_DEPTH: "solve with a depth first search",
}

ARG_STRINGS: tuple[str, ...] = tuple(option.value for option in OptionType)
NUM_OPTIONS = len(ARG_STRINGS)


def option_string(option: OptionType) -> str:
    """Return the command-line spelling of an option."""
    return option.value


class GenerateShape(Enum):
    """Kind of generate request, decided by how many values follow the option."""

    DEFAULT = "default"
    SEED_ONLY = "seed-only"
    DIMS_ONLY = "dims-only"
    FULLY_SPECIFIED = "fully-specified"
    INVALID = "invalid"
