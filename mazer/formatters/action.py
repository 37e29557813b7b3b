"""Action formatting with Rich styling support.

All formatting methods return Rich Text objects with styling markers.
The Rich console handles no_color mode.
"""

from rich.text import Text

from ..actions.models import Action, GenerateAction, LoadAction, SaveAction, SolveAction


_KIND_STYLES = {
    GenerateAction: "bold green",
    LoadAction: "bold blue",
    SaveAction: "bold magenta",
    SolveAction: "bold yellow",
}


class ActionFormatter:
    """Formats actions for display with Rich styling."""

    def format_label(self, action: Action) -> Text:
        """Format an action as option name followed by its parameters.

        Args:
            action: The action to format

        Returns:
            Rich Text such as "generate-ab 10x20 seed=42"
        """
        option_name = action.option.value
        label = action.label()
        text = Text()
        text.append(option_name, style=_KIND_STYLES.get(type(action), "bold cyan"))
        remainder = label[len(option_name):]
        if remainder:
            text.append(remainder, style="cyan")
        return text

    def format_plan_entry(self, number: int, action: Action) -> Text:
        """Format one numbered line of an execution plan."""
        text = Text()
        text.append(f"{number:>2}. ", style="dim")
        text.append_text(self.format_label(action))
        return text
