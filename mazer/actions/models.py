"""Action models produced from the command line."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..options import GenerateShape, OptionType
from .toolkit import GenerateAlgorithm, MazeFormat, MazeToolkit, SolveAlgorithm


@dataclass(frozen=True)
class Action(ABC):
    """Base class for a unit of work requested on the command line."""

    option: OptionType

    @abstractmethod
    def execute(self, toolkit: MazeToolkit) -> None:
        """Run the action against a maze toolkit."""
        pass

    @abstractmethod
    def label(self) -> str:
        """Short human-readable description for plan output."""
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation."""
        pass


_GENERATE_ALGORITHMS = {
    OptionType.GENERATE_AB: GenerateAlgorithm.ALDOUS_BRODER,
    OptionType.GENERATE_ELLER: GenerateAlgorithm.ELLER,
}

_SOLVE_ALGORITHMS = {
    OptionType.SOLVE_MANHATTAN: SolveAlgorithm.MANHATTAN,
    OptionType.SOLVE_EUCLIDEAN: SolveAlgorithm.EUCLIDEAN,
    OptionType.SOLVE_BREADTH: SolveAlgorithm.BREADTH_FIRST,
    OptionType.SOLVE_DEPTH: SolveAlgorithm.DEPTH_FIRST,
}

_SAVE_FORMATS = {
    OptionType.SAVE_VECTOR: MazeFormat.VECTOR,
    OptionType.SAVE_BINARY: MazeFormat.BINARY,
}


@dataclass(frozen=True)
class GenerateAction(Action):
    """Generate a maze: generate-ab|generate-eller [width height] [seed]"""

    width: Optional[int] = None
    height: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.option.is_generate:
            raise ValueError(f"'{self.option.value}' is not a generate option")
        if (self.width is None) != (self.height is None):
            raise ValueError("Width and height must be given together")

    @property
    def algorithm(self) -> GenerateAlgorithm:
        return _GENERATE_ALGORITHMS[self.option]

    @property
    def shape(self) -> GenerateShape:
        has_dims = self.width is not None
        has_seed = self.seed is not None
        if has_dims and has_seed:
            return GenerateShape.FULLY_SPECIFIED
        if has_dims:
            return GenerateShape.DIMS_ONLY
        if has_seed:
            return GenerateShape.SEED_ONLY
        return GenerateShape.DEFAULT

    def execute(self, toolkit: MazeToolkit) -> None:
        toolkit.generate(self.algorithm, self.width, self.height, self.seed)

    def label(self) -> str:
        parts = [self.option.value]
        if self.width is not None:
            parts.append(f"{self.width}x{self.height}")
        if self.seed is not None:
            parts.append(f"seed={self.seed}")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "option": self.option.value,
            "algorithm": self.algorithm.value,
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
        }


@dataclass(frozen=True)
class SaveAction(Action):
    """Save the current maze: save-vector|save-binary path"""

    path: str

    def __post_init__(self) -> None:
        if not self.option.is_save:
            raise ValueError(f"'{self.option.value}' is not a save option")

    @property
    def format(self) -> MazeFormat:
        return _SAVE_FORMATS[self.option]

    def execute(self, toolkit: MazeToolkit) -> None:
        if self.format is MazeFormat.VECTOR:
            toolkit.save_vector(self.path)
        else:
            toolkit.save_binary(self.path)

    def label(self) -> str:
        return f"{self.option.value} {self.path}"

    def to_dict(self) -> dict[str, Any]:
        return {"option": self.option.value, "format": self.format.value, "path": self.path}


@dataclass(frozen=True)
class LoadAction(Action):
    """Load a maze: load-binary path"""

    path: str

    def __post_init__(self) -> None:
        if self.option is not OptionType.LOAD_BINARY:
            raise ValueError(f"'{self.option.value}' is not a load option")

    def execute(self, toolkit: MazeToolkit) -> None:
        toolkit.load_binary(self.path)

    def label(self) -> str:
        return f"{self.option.value} {self.path}"

    def to_dict(self) -> dict[str, Any]:
        return {"option": self.option.value, "format": MazeFormat.BINARY.value, "path": self.path}


@dataclass(frozen=True)
class SolveAction(Action):
    """Solve a maze: solve-<algorithm> [maze-number]"""

    target: Optional[int] = None
    """1-based number of the maze to solve; None means the most recent one"""

    def __post_init__(self) -> None:
        if not self.option.is_solve:
            raise ValueError(f"'{self.option.value}' is not a solve option")

    @property
    def algorithm(self) -> SolveAlgorithm:
        return _SOLVE_ALGORITHMS[self.option]

    def execute(self, toolkit: MazeToolkit) -> None:
        toolkit.solve(self.algorithm, self.target)

    def label(self) -> str:
        if self.target is None:
            return self.option.value
        return f"{self.option.value} maze {self.target}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "option": self.option.value,
            "algorithm": self.algorithm.value,
            "target": self.target,
        }
