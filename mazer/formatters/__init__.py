"""Formatters package for mazer console output.

Usage:
    output = OutputFormatter(no_color=False)
    output.print(output.action.format_label(action))
"""

from .output import OutputFormatter
from .symbols import Symbols, SymbolsFormatter
from .action import ActionFormatter

__all__ = [
    "OutputFormatter",
    "Symbols",
    "SymbolsFormatter",
    "ActionFormatter",
]
