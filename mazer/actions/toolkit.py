"""Maze toolkit abstraction that actions execute against."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class GenerateAlgorithm(Enum):
    """Maze generation algorithms."""

    ALDOUS_BRODER = "aldous-broder"
    ELLER = "eller"


class SolveAlgorithm(Enum):
    """Maze solving algorithms."""

    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    BREADTH_FIRST = "breadth-first"
    DEPTH_FIRST = "depth-first"


class MazeFormat(Enum):
    """File formats a maze can be saved in."""

    BINARY = "binary"
    VECTOR = "vector"


class MazeToolkit(ABC):
    """Abstract base class for the component that owns mazes.

    Generation, solving and the file codecs live behind this interface.
    The toolkit keeps the mazes produced during one invocation; generate and
    load append a maze, and save and solve work on the most recent one unless
    told otherwise.
    """

    @abstractmethod
    def generate(
        self,
        algorithm: GenerateAlgorithm,
        width: Optional[int],
        height: Optional[int],
        seed: Optional[int],
    ) -> None:
        """
        Generate a new maze.

        Args:
            algorithm: Generation algorithm to use
            width: Maze width, or None for the toolkit default
            height: Maze height, or None for the toolkit default
            seed: Random seed, or None for a non-deterministic seed
        """
        pass

    @abstractmethod
    def load_binary(self, path: str) -> None:
        """Load a maze from a binary file."""
        pass

    @abstractmethod
    def save_binary(self, path: str) -> None:
        """Save the most recent maze as a binary file."""
        pass

    @abstractmethod
    def save_vector(self, path: str) -> None:
        """Save the most recent maze as an svg file."""
        pass

    @abstractmethod
    def solve(self, algorithm: SolveAlgorithm, target: Optional[int]) -> None:
        """
        Solve a maze.

        Args:
            algorithm: Solving algorithm to use
            target: 1-based number of the maze to solve, or None for the most recent
        """
        pass
