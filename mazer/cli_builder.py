"""Factory for constructing the CLI argument parser."""

import argparse

from .options import OptionType


def _build_epilog() -> str:
    lines = ["maze options (processed in order, may repeat):"]
    for option in OptionType:
        lines.append(f"  {option.value:<17} {option.description}")
    lines.append("")
    lines.append("example: mazer generate-ab 20 20 42 save-vector maze.svg solve-breadth")
    return "\n".join(lines)


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mazer",
        description="mazer - generate, solve, save and load mazes",
        epilog=_build_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--out",
        type=str,
        help="Write the action plan as JSON to this path",
    )

    parser.add_argument(
        "--list-options",
        dest="list_options",
        action="store_true",
        help="List all maze options and exit",
    )

    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Show the action plan without executing",
    )

    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output",
    )

    # Maze options are not declared here: their values are positional and
    # their order matters, so they arrive in 'unknown' from parse_known_args()
    # and are handled by ArgProcessor.

    return parser
