"""Errors raised while turning command-line tokens into actions."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of argument errors."""

    UNRECOGNIZED_OPTION = "unrecognized-option"
    INVALID_ARITY = "invalid-arity"
    INVALID_VALUE = "invalid-value"
    INVALID_EXTENSION = "invalid-extension"


class ArgumentError(Exception):
    """Raised when the command-line tokens cannot be turned into actions.

    Attributes:
        kind: Which rule the input broke
        index: Position of the offending token, if one can be named
        token: The offending token, if one can be named
    """

    kind: ErrorKind

    def __init__(self, message: str, index: Optional[int] = None, token: Optional[str] = None):
        self.message = message
        self.index = index
        self.token = token
        super().__init__(self._render())

    def _render(self) -> str:
        if self.index is None:
            return self.message
        return f"{self.message} (argument {self.index + 1})"


class UnrecognizedOptionError(ArgumentError):
    """A token where an option was expected is not a known option."""

    kind = ErrorKind.UNRECOGNIZED_OPTION


class InvalidArityError(ArgumentError):
    """An option was followed by the wrong number of values."""

    kind = ErrorKind.INVALID_ARITY


class InvalidValueError(ArgumentError):
    """A value is not an integer or lies outside its accepted range."""

    kind = ErrorKind.INVALID_VALUE


class InvalidExtensionError(ArgumentError):
    """A vector save path does not end in the vector file extension."""

    kind = ErrorKind.INVALID_EXTENSION
