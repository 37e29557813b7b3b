"""Command-line interface for mazer."""

import json
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .actions.models import Action, GenerateAction, LoadAction
from .actions.toolkit import MazeToolkit
from .args.errors import ArgumentError
from .args.processor import ArgProcessor
from .cli_builder import build_arg_parser
from .formatters import OutputFormatter
from .options import OptionType


class CLI:
    """Command-line interface for mazer."""

    def __init__(self, toolkit: Optional[MazeToolkit] = None, console: Optional[Console] = None):
        """
        Args:
            toolkit: Toolkit that executes actions; without one only the plan is shown
            console: Console for output (tests pass a recording console)
        """
        self.parser = build_arg_parser()
        self.toolkit = toolkit
        self._console = console

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code
        """
        args, unknown = self.parser.parse_known_args(argv)
        output = OutputFormatter(no_color=args.no_color, console=self._console)

        if args.list_options:
            self._list_options(output)
            return 0

        try:
            actions = ArgProcessor(unknown).process()
        except ArgumentError as e:
            output.print_error(str(e))
            return 1

        if not actions:
            output.print_error("No actions specified")
            self.parser.print_usage()
            return 1

        for warning in self._ordering_warnings(actions):
            output.print_warning(warning)

        output.print(f"\n{output.symbols.Clipboard} [bold]Action plan:[/bold]")
        for number, action in enumerate(actions, 1):
            output.print(output.action.format_plan_entry(number, action))

        if args.out:
            out_path = Path(args.out)
            try:
                out_path.write_text(json.dumps([action.to_dict() for action in actions], indent=2))
            except OSError as e:
                output.print_error(f"Cannot write plan to {out_path}: {e.strerror or e}")
                return 1
            output.print(f"\n{output.symbols.Save} [dim]Plan saved to:[/dim] [bold cyan]{escape(str(out_path))}[/bold cyan]")

        if args.dry_run:
            output.print(f"\n{output.symbols.Info} [blue]Dry run - not executing[/blue]")
            return 0

        if self.toolkit is None:
            output.print(f"\n{output.symbols.Info} [blue]No maze toolkit configured - not executing[/blue]")
            return 0

        return self._execute(actions, self.toolkit, output)

    def _execute(self, actions: list[Action], toolkit: MazeToolkit, output: OutputFormatter) -> int:
        """Execute actions in order, stopping at the first failure."""
        sym = output.symbols
        output.print("")
        for action in actions:
            label = output.action.format_label(action)
            output.print(f"{sym.Play} [dim]start:[/dim] {label.markup}")
            try:
                action.execute(toolkit)
            except Exception as e:
                output.print(f"{sym.Cross} [bold red]failed:[/bold red] {label.markup}")
                output.print_error(str(e))
                return 1
            output.print(f"{sym.Check} [dim]done:[/dim] {label.markup}")

        output.print(f"\n{sym.Check} [bold green]All actions completed successfully![/bold green]")
        return 0

    def _ordering_warnings(self, actions: list[Action]) -> list[str]:
        """Warn about save and solve actions that come before any maze exists."""
        warnings = []
        have_maze = False
        for number, action in enumerate(actions, 1):
            if isinstance(action, (GenerateAction, LoadAction)):
                have_maze = True
            elif not have_maze:
                warnings.append(
                    f"Action {number} ({action.label()}) runs before any maze is generated or loaded"
                )
        return warnings

    def _list_options(self, output: OutputFormatter) -> None:
        """List all maze options."""
        output.print(f"{output.symbols.Book} [blue]Available options:[/blue]\n")
        for option in OptionType:
            output.print(f"  [bold cyan]{option.value}[/bold cyan]")
            output.print(f"    [dim]{option.description}[/dim]")


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
