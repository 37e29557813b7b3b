"""Actions built from the command line and the toolkit they run against."""

from .toolkit import GenerateAlgorithm, SolveAlgorithm, MazeFormat, MazeToolkit
from .models import Action, GenerateAction, SaveAction, LoadAction, SolveAction

__all__ = [
    "GenerateAlgorithm",
    "SolveAlgorithm",
    "MazeFormat",
    "MazeToolkit",
    "Action",
    "GenerateAction",
    "SaveAction",
    "LoadAction",
    "SolveAction",
]
