"""Scanning and classification helpers for option argument groups."""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..options import MAXDIM, MINDIM, GenerateShape, OptionType


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def find_next_option(tokens: Sequence[str], start_index: int) -> int:
    """Find the next recognized option token.

    Scanning starts at start_index inclusive, which is the position just past
    the option that owns the argument group.

    Args:
        tokens: The full token sequence
        start_index: First position that may hold a value for the current option

    Returns:
        Index of the next option token, or len(tokens) if there is none
    """
    idx = start_index
    while idx < len(tokens):
        if OptionType.lookup(tokens[idx]) is not None:
            return idx
        idx += 1
    return len(tokens)


def valid_dim(value: int) -> bool:
    """Check that a maze dimension lies within [MINDIM, MAXDIM]."""
    return MINDIM <= value <= MAXDIM


def parse_int(token: str) -> Optional[int]:
    """Parse a strict decimal integer, returning None for anything else."""
    if INTEGER_PATTERN.fullmatch(token) is None:
        return None
    return int(token)


@dataclass(frozen=True)
class GenerateRequest:
    """Outcome of classifying the values that follow a generate option."""

    shape: GenerateShape
    width: Optional[int] = None
    height: Optional[int] = None
    seed: Optional[int] = None
    bad_offset: Optional[int] = None
    """Offset of the first bad value within the group; None when the count is wrong"""

    @property
    def is_valid(self) -> bool:
        return self.shape is not GenerateShape.INVALID


def _invalid(bad_offset: Optional[int] = None) -> GenerateRequest:
    return GenerateRequest(shape=GenerateShape.INVALID, bad_offset=bad_offset)


def _parse_dims(values: Sequence[str]) -> tuple[Optional[int], Optional[int], Optional[int]]:
    """Parse width and height, returning the offset of the first bad one."""
    dims = []
    for offset, token in enumerate(values[:2]):
        parsed = parse_int(token)
        if parsed is None or not valid_dim(parsed):
            return None, None, offset
        dims.append(parsed)
    return dims[0], dims[1], None


def classify_generate(values: Sequence[str]) -> GenerateRequest:
    """Classify the values between a generate option and the next option.

    - no values: default size and seed
    - one value: a seed
    - two values: width and height
    - three values: width, height and seed

    Any other count, or a value failing its integer or range check, is INVALID.

    Args:
        values: The positional tokens owned by the generate option

    Returns:
        GenerateRequest holding the shape and whichever values were supplied
    """
    count = len(values)

    if count == 0:
        return GenerateRequest(shape=GenerateShape.DEFAULT)

    if count == 1:
        seed = parse_int(values[0])
        if seed is None:
            return _invalid(0)
        return GenerateRequest(shape=GenerateShape.SEED_ONLY, seed=seed)

    if count not in (2, 3):
        return _invalid()

    width, height, bad_offset = _parse_dims(values)
    if bad_offset is not None:
        return _invalid(bad_offset)

    if count == 2:
        return GenerateRequest(shape=GenerateShape.DIMS_ONLY, width=width, height=height)

    seed = parse_int(values[2])
    if seed is None:
        return _invalid(2)
    return GenerateRequest(
        shape=GenerateShape.FULLY_SPECIFIED, width=width, height=height, seed=seed
    )
