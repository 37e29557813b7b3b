"""Turns command-line tokens into an ordered list of actions."""

from typing import Sequence

from ..actions.models import Action, GenerateAction, LoadAction, SaveAction, SolveAction
from ..options import EXTLEN, MAXDIM, MINDIM, ONE_ARGUMENT, VECTOR_EXTENSION, OptionType
from .errors import (
    InvalidArityError,
    InvalidExtensionError,
    InvalidValueError,
    UnrecognizedOptionError,
)
from .scanner import classify_generate, find_next_option, parse_int


class ArgProcessor:
    """Processes one invocation's tokens into actions.

    Grammar:
        generate-ab|generate-eller [width height] [seed]
        save-vector path.svg | save-binary path | load-binary path
        solve-manhattan|solve-euclidean|solve-breadth|solve-depth [maze-number]

    Options may repeat and appear in any order. Actions are returned in the
    order their options appear.

    Example:
        mazer generate-ab 20 20 42 save-vector maze.svg solve-breadth
    """

    def __init__(self, arguments: Sequence[str]):
        """
        Args:
            arguments: Command-line tokens, program name excluded
        """
        self._arguments: tuple[str, ...] = tuple(arguments)

    @property
    def arguments(self) -> tuple[str, ...]:
        return self._arguments

    def process(self) -> list[Action]:
        """Build the actions requested by the tokens.

        Returns:
            Actions in command-line order

        Raises:
            ArgumentError: On the first malformed option (fail fast)
        """
        actions: list[Action] = []
        mazes_produced = 0
        idx = 0
        while idx < len(self._arguments):
            token = self._arguments[idx]
            option = OptionType.lookup(token)
            if option is None:
                raise UnrecognizedOptionError(f"Unrecognized option '{token}'", idx, token)

            action, idx = self._build_action(option, idx, mazes_produced)
            if isinstance(action, (GenerateAction, LoadAction)):
                mazes_produced += 1
            actions.append(action)

        return actions

    def _build_action(
        self, option: OptionType, option_index: int, mazes_produced: int
    ) -> tuple[Action, int]:
        """Build the action for the option at option_index.

        Returns:
            The action and the index just past its argument group
        """
        start = option_index + 1
        end = find_next_option(self._arguments, start)
        values = self._arguments[start:end]

        if option.is_generate:
            action: Action = self._build_generate(option, values, start)
        elif option.is_save:
            action = self._build_save(option, values, option_index)
        elif option is OptionType.LOAD_BINARY:
            action = LoadAction(option, self._single_value(option, values, option_index))
        else:
            action = self._build_solve(option, values, start, mazes_produced)
        return action, end

    def _build_generate(
        self, option: OptionType, values: Sequence[str], start: int
    ) -> GenerateAction:
        request = classify_generate(values)
        if request.is_valid:
            return GenerateAction(
                option, width=request.width, height=request.height, seed=request.seed
            )

        if request.bad_offset is None:
            raise InvalidArityError(
                f"'{option.value}' takes 0 to 3 values "
                f"([width height] [seed]), got {len(values)}",
                start - 1,
                option.value,
            )

        bad_index = start + request.bad_offset
        bad_token = self._arguments[bad_index]
        if len(values) == 1 or request.bad_offset == 2:
            message = f"Seed '{bad_token}' is not an integer"
        else:
            message = f"Dimension '{bad_token}' must be an integer between {MINDIM} and {MAXDIM}"
        raise InvalidValueError(message, bad_index, bad_token)

    def _build_save(self, option: OptionType, values: Sequence[str], option_index: int) -> SaveAction:
        path = self._single_value(option, values, option_index)
        if option is OptionType.SAVE_VECTOR:
            if len(path) <= EXTLEN or path[-EXTLEN:] != VECTOR_EXTENSION:
                raise InvalidExtensionError(
                    f"Vector file '{path}' must end in '{VECTOR_EXTENSION}'",
                    option_index + 1,
                    path,
                )
        return SaveAction(option, path)

    def _build_solve(
        self, option: OptionType, values: Sequence[str], start: int, mazes_produced: int
    ) -> SolveAction:
        if not values:
            return SolveAction(option)
        if len(values) != ONE_ARGUMENT:
            raise InvalidArityError(
                f"'{option.value}' takes at most one maze number, got {len(values)} values",
                start - 1,
                option.value,
            )

        if mazes_produced == 0:
            raise InvalidValueError(
                f"Maze number '{values[0]}' given to '{option.value}', "
                f"but no maze has been generated or loaded yet",
                start,
                values[0],
            )

        target = parse_int(values[0])
        if target is None or not 1 <= target <= mazes_produced:
            raise InvalidValueError(
                f"Maze number '{values[0]}' must be between 1 and {mazes_produced}, "
                f"the number of mazes generated or loaded before it",
                start,
                values[0],
            )
        return SolveAction(option, target=target)

    def _single_value(self, option: OptionType, values: Sequence[str], option_index: int) -> str:
        """Return the one value an option requires."""
        if len(values) != ONE_ARGUMENT:
            raise InvalidArityError(
                f"'{option.value}' takes exactly one file path, got {len(values)}",
                option_index,
                option.value,
            )
        return values[0]


def process_arguments(arguments: Sequence[str]) -> list[Action]:
    """Convenience wrapper: build the actions for a token list."""
    return ArgProcessor(arguments).process()
