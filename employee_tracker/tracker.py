"""
Interactive view/add/update flows behind the main menu
"""

from typing import List, Optional

from rich.console import Console
from rich.text import Text

from .database import DatabaseManager
from .database.manager import OperationResult
from .logging_setup import get_logger
from .prompts import Choice, ConsolePrompter
from .table_renderer import render_departments, render_employees, render_roles

logger = get_logger(__name__)

NO_MANAGER_CHOICE = Choice("NO MANAGER", None, "white on black")

UPDATE_FIELD_CHOICES = [
    Choice("Role", "role"),
    Choice("Manager", "manager"),
]


class EmployeeTracker:
    """Runs one menu action: loads records, prompts, writes, shows the outcome"""

    def __init__(self, database: DatabaseManager, prompter: ConsolePrompter,
                 console: Optional[Console] = None):
        self.database = database
        self.prompter = prompter
        self.console = console or prompter.console

    def _print_table(self, lines: List[Text]) -> None:
        for line in lines:
            self.console.print(line)
        self.console.print()
        self.prompter.pause()

    def _report(self, result: OperationResult) -> OperationResult:
        success, message = result
        self.console.print(Text(message, style="green" if success else "bold red"))
        self.prompter.pause()
        return result

    def _manager_choices(self, employees) -> List[Choice]:
        return [NO_MANAGER_CHOICE] + [Choice(employee.formatted_name, employee.id) for employee in employees]

    # Views

    def view_all_departments(self) -> None:
        self.console.clear()
        self._print_table(render_departments(self.database.list_departments()))

    def view_all_roles(self) -> None:
        departments = self.database.list_departments()
        roles = self.database.list_roles()
        self._print_table(render_roles(roles, departments))

    def view_all_employees(self) -> None:
        roles = self.database.list_roles()
        employees = self.database.list_employees()
        self._print_table(render_employees(employees, roles))

    # Writes

    def add_department(self) -> OperationResult:
        name = self.prompter.ask_text("Enter name for the new department")
        return self._report(self.database.add_department(name))

    def add_role(self) -> OperationResult:
        departments = self.database.list_departments()
        if not departments:
            return self._report((False, "Add a department before adding a role."))

        title = self.prompter.ask_text("Enter name for the new role")
        salary = self.prompter.ask_number("Enter salary for the new role")
        department_id = self.prompter.select(
            "Enter department the new role is part of.",
            [Choice(department.formatted_name, department.id) for department in departments],
        )
        return self._report(self.database.add_role(title, salary, department_id))

    def add_employee(self) -> OperationResult:
        roles = self.database.list_roles()
        if not roles:
            return self._report((False, "Add a role before adding an employee."))
        employees = self.database.list_employees()

        first_name = self.prompter.ask_text("Enter first name of new employee.")
        last_name = self.prompter.ask_text("Enter last name of new employee.")
        role_id = self.prompter.select(
            "Select the role this employee holds",
            [Choice(role.formatted_name, role.id) for role in roles],
        )
        manager_id = self.prompter.select(
            'Select employee\'s manager, if none select "NO MANAGER"',
            self._manager_choices(employees),
        )
        return self._report(self.database.add_employee(first_name, last_name, role_id, manager_id))

    def update_employee(self) -> OperationResult:
        employees = self.database.list_employees()
        if not employees:
            return self._report((False, "There are no employees to update."))

        employee_id = self.prompter.select(
            "Select the employee you want to update:",
            [Choice(employee.formatted_name, employee.id) for employee in employees],
        )
        field = self.prompter.select("What do you want to update for this employee?", UPDATE_FIELD_CHOICES)

        if field == 'role':
            roles = self.database.list_roles()
            if not roles:
                return self._report((False, "There are no roles to assign."))
            new_value = self.prompter.select(
                "Select the new role for the employee:",
                [Choice(role.formatted_name, role.id) for role in roles],
            )
        else:
            new_value = self.prompter.select(
                "Select the new manager for the employee:",
                self._manager_choices(employees),
            )

        return self._report(self.database.update_employee(employee_id, field, new_value))
