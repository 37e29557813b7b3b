"""Command-line argument processing for mazer."""

from ..options import (
    ARG_STRINGS,
    EXTLEN,
    MAXDIM,
    MINDIM,
    NUM_OPTIONS,
    ONE_ARGUMENT,
    GenerateShape,
    OptionType,
    option_string,
)
from .errors import (
    ArgumentError,
    ErrorKind,
    UnrecognizedOptionError,
    InvalidArityError,
    InvalidValueError,
    InvalidExtensionError,
)
from .scanner import GenerateRequest, classify_generate, find_next_option, valid_dim
from .processor import ArgProcessor, process_arguments

__all__ = [
    "ARG_STRINGS",
    "EXTLEN",
    "MAXDIM",
    "MINDIM",
    "NUM_OPTIONS",
    "ONE_ARGUMENT",
    "GenerateShape",
    "OptionType",
    "option_string",
    "ArgumentError",
    "ErrorKind",
    "UnrecognizedOptionError",
    "InvalidArityError",
    "InvalidValueError",
    "InvalidExtensionError",
    "GenerateRequest",
    "classify_generate",
    "find_next_option",
    "valid_dim",
    "ArgProcessor",
    "process_arguments",
]
