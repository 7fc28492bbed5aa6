"""
Main menu loop for the employee tracker
"""

import sys
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.text import Text

from .database import TrackerError
from .logging_setup import get_logger
from .prompts import Choice, ConsolePrompter
from .tracker import EmployeeTracker

logger = get_logger(__name__)

TITLE = "EMPLOYEE TRACKER"
EXIT = 0

MENU_CHOICES = [
    Choice("View All Departments", 1),
    Choice("View All Roles", 2),
    Choice("View All Employees", 3),
    Choice("Add a Department", 4),
    Choice("Add a Role", 5),
    Choice("Add an Employee", 6),
    Choice("Update an Employee", 7),
    Choice("Exit", EXIT, "red"),
]


class MainMenu:
    """Presents the action menu and dispatches selections until Exit"""

    def __init__(self, tracker: EmployeeTracker, prompter: ConsolePrompter,
                 console: Optional[Console] = None):
        self.tracker = tracker
        self.prompter = prompter
        self.console = console or prompter.console
        self.actions: Dict[int, Callable[[], object]] = {
            1: tracker.view_all_departments,
            2: tracker.view_all_roles,
            3: tracker.view_all_employees,
            4: tracker.add_department,
            5: tracker.add_role,
            6: tracker.add_employee,
            7: tracker.update_employee,
        }

    def run(self) -> None:
        while True:
            self.run_once()

    def run_once(self) -> None:
        self.console.clear()
        self.console.print(Text(TITLE, style="bold cyan"))
        selection = self.prompter.select("Select the option you want to use", MENU_CHOICES)
        self.dispatch(selection)

    def dispatch(self, selection: int) -> None:
        """
        Run the action for a menu selection.

        Errors from an action are reported and the menu carries on; Exit
        ends the process with status 0.
        """
        if selection == EXIT:
            self.console.print("Exiting...")
            sys.exit(0)

        action = self.actions.get(selection)
        if action is None:
            # select() only returns listed values
            self.console.print("How did you get here??")
            return

        try:
            action()
        except TrackerError as e:
            logger.info("Menu action %s failed: %s", selection, e, exc_info=True)
            self.console.print(Text(f"Error: {e}", style="bold red"))
            self.prompter.pause()
