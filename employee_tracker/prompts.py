"""
Console input for the tracker flows, built on rich.prompt.

Each call blocks until the user answers. Choice labels are printed as
plain Text so names from the database are never read as rich markup.
"""

from typing import Any, NamedTuple, Optional, Sequence

from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt, Prompt
from rich.text import Text


class Choice(NamedTuple):
    """One entry of a selection list"""
    label: str
    value: Any
    style: Optional[str] = None


class ConsolePrompter:
    """Text, number and single-choice prompts on a rich Console"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask_text(self, message: str) -> str:
        return Prompt.ask(message, console=self.console)

    def ask_number(self, message: str) -> float:
        return FloatPrompt.ask(message, console=self.console)

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """
        Show a numbered list and return the value of the picked entry.

        Raises:
            ValueError: when there is nothing to choose from
        """
        if not choices:
            raise ValueError(f"No options available for: {message}")

        self.console.print(Text(message, style="bold"))
        for number, choice in enumerate(choices, start=1):
            self.console.print(Text.assemble(f"  {number}. ", (choice.label, choice.style or "")))

        picked = IntPrompt.ask(
            "Select an option",
            choices=[str(number) for number in range(1, len(choices) + 1)],
            show_choices=False,
            console=self.console,
        )
        return choices[picked - 1].value

    def pause(self, message: str = "Press Enter to continue...") -> None:
        self.console.input(message)
