"""Pytest configuration and shared fixtures."""

import io
from typing import Any, Optional

import pytest
from rich.console import Console

from mazer.actions.toolkit import GenerateAlgorithm, MazeToolkit, SolveAlgorithm


class RecordingToolkit(MazeToolkit):
    """Toolkit that records the calls made to it instead of touching mazes."""

    def __init__(self, fail_on: Optional[str] = None):
        self.calls: list[tuple[Any, ...]] = []
        self.fail_on = fail_on

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if call[0] == self.fail_on:
            raise RuntimeError(f"{call[0]} failed")

    def generate(
        self,
        algorithm: GenerateAlgorithm,
        width: Optional[int],
        height: Optional[int],
        seed: Optional[int],
    ) -> None:
        self._record("generate", algorithm, width, height, seed)

    def load_binary(self, path: str) -> None:
        self._record("load_binary", path)

    def save_binary(self, path: str) -> None:
        self._record("save_binary", path)

    def save_vector(self, path: str) -> None:
        self._record("save_vector", path)

    def solve(self, algorithm: SolveAlgorithm, target: Optional[int]) -> None:
        self._record("solve", algorithm, target)


@pytest.fixture
def toolkit() -> RecordingToolkit:
    """Return a fresh recording toolkit."""
    return RecordingToolkit()


@pytest.fixture
def console() -> Console:
    """Return a plain-text console whose output can be read back with export_text()."""
    return Console(file=io.StringIO(), record=True, no_color=True, width=200)
