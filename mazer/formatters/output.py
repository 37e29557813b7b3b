"""Output formatter - the main entry point for all formatting operations.

Provides a centralized formatter that owns the Rich console and the
sub-formatters. Sub-formatters return Rich Text objects that are printed
through this console.

Usage:
    output = OutputFormatter(no_color=False)
    output.print(output.action.format_label(action))
"""

from typing import Optional, Union

from rich.console import Console
from rich.text import Text

from .action import ActionFormatter
from .symbols import SymbolsFormatter


class OutputFormatter:
    """Central formatter that manages the Rich console and all sub-formatters.

    Attributes:
        symbols: SymbolsFormatter for emoji/ASCII symbols
        action: ActionFormatter for Action formatting
    """

    def __init__(self, no_color: bool, console: Optional[Console] = None):
        """Initialize the output formatter with all sub-formatters.

        Args:
            no_color: If True, disable all colors and styling in output
            console: Console to print through (a new one is created if omitted)
        """
        self._console = console or Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )
        self._symbols = SymbolsFormatter(no_color=no_color)
        self._action = ActionFormatter()

    @property
    def symbols(self) -> SymbolsFormatter:
        """Get the symbols formatter for emoji/ASCII symbol access."""
        return self._symbols

    @property
    def action(self) -> ActionFormatter:
        """Get the action formatter."""
        return self._action

    def print(self, message: Union[str, Text]) -> None:
        """Print message using Rich console.

        Args:
            message: Message to print (string or Rich Text)
        """
        self._console.print(message, highlight=False)

    def print_error(self, message: str) -> None:
        """Print an error message.

        Args:
            message: Error message to print
        """
        line = Text()
        line.append(f"{self._symbols.Cross} ", style="red")
        line.append("Error: ", style="bold red")
        line.append(message)
        self._console.print(line, highlight=False)

    def print_warning(self, message: str) -> None:
        """Print a warning message.

        Args:
            message: Warning message to print
        """
        line = Text()
        line.append(f"{self._symbols.Warning} ", style="yellow")
        line.append("Warning: ", style="bold yellow")
        line.append(message)
        self._console.print(line, highlight=False)
