"""
Fixed-width text tables for the department, role and employee views.

Every function here is pure: it takes records and returns rich Text
lines. Styles only add color spans; Text.plain is the exact table text.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from rich.text import Text

from .database.models import MAX_NAME_LENGTH, Department, Employee, Role, format_salary

COLUMN_WIDTH = MAX_NAME_LENGTH
ID_WIDTH = 4
SALARY_WIDTH = COLUMN_WIDTH // 2

SEPARATOR = "│ "
DIVIDER = "─"
CROSS = "┼"

NOT_AVAILABLE = "N/A"
NO_MANAGER = "Has no manager"

NAME_STYLE = "yellow"
ID_STYLE = "bold"
NO_MANAGER_STYLE = "red"

# (value, style, width); width None leaves the last column unpadded
Cell = Tuple[str, Optional[str], Optional[int]]

R = TypeVar("R", Department, Role, Employee)


def padding(value: str, width: int = COLUMN_WIDTH) -> str:
    """Spaces needed to right-pad value to width (empty when value is longer)"""
    return " " * max(width - len(value), 0)


def index_by_id(records: Iterable[R]) -> Dict[int, R]:
    """Map id to record; the first record seen for an id wins"""
    mapping: Dict[int, R] = {}
    for record in records:
        mapping.setdefault(record.id, record)
    return mapping


def _row(cells: Sequence[Cell]) -> Text:
    line = Text()
    for position, (value, style, width) in enumerate(cells):
        if position:
            line.append(SEPARATOR)
        line.append(value, style=style)
        if width is not None:
            line.append(padding(value, width))
    return line


def _divider(widths: Sequence[int]) -> Text:
    return Text(CROSS.join(DIVIDER * width for width in widths))


def render_departments(departments: Sequence[Department]) -> List[Text]:
    title = "Departments"
    # Centered over the name column plus the id column
    lines = [Text(" " * ((COLUMN_WIDTH + 5 - len(title)) // 2) + title, style="bold")]
    lines.append(_row([("Department Name", None, COLUMN_WIDTH), ("ID", None, None)]))
    lines.append(_divider([COLUMN_WIDTH, 5]))

    for department in departments:
        lines.append(_row([
            (department.name, NAME_STYLE, COLUMN_WIDTH),
            (str(department.id), ID_STYLE, None),
        ]))
    return lines


def render_roles(roles: Sequence[Role], departments: Sequence[Department]) -> List[Text]:
    """Roles with their department label; an unknown department shows N/A"""
    departments_by_id = index_by_id(departments)

    lines = [
        _row([
            ("Title", None, COLUMN_WIDTH),
            ("ID", None, ID_WIDTH),
            ("Salary", None, SALARY_WIDTH),
            ("Department (ID)", None, None),
        ]),
        _divider([COLUMN_WIDTH, 5, SALARY_WIDTH + 1, COLUMN_WIDTH]),
    ]

    for role in roles:
        department = departments_by_id.get(role.department_id)
        department_label = department.formatted_name if department else NOT_AVAILABLE
        lines.append(_row([
            (role.title, NAME_STYLE, COLUMN_WIDTH),
            (str(role.id), None, ID_WIDTH),
            (format_salary(role.salary), None, SALARY_WIDTH),
            (department_label, None, None),
        ]))
    return lines


def manager_cell(employee: Employee, employees_by_id: Dict[int, Employee]) -> Tuple[str, str]:
    """Label and style for an employee's manager column"""
    if employee.manager_id is None:
        return NO_MANAGER, NO_MANAGER_STYLE
    manager = employees_by_id.get(employee.manager_id)
    if manager is None:
        return NOT_AVAILABLE, NAME_STYLE
    return manager.formatted_name, NAME_STYLE


def render_employees(employees: Sequence[Employee], roles: Sequence[Role]) -> List[Text]:
    employees_by_id = index_by_id(employees)
    roles_by_id = index_by_id(roles)

    lines = [
        _row([
            ("First Name", None, COLUMN_WIDTH),
            ("Last Name", None, COLUMN_WIDTH),
            ("ID", None, ID_WIDTH),
            ("Role (ID)", None, COLUMN_WIDTH),
            ("Manager (ID)", None, None),
        ]),
        _divider([COLUMN_WIDTH, COLUMN_WIDTH + 1, 5, COLUMN_WIDTH + 1, COLUMN_WIDTH - 1]),
    ]

    for employee in employees:
        role = roles_by_id.get(employee.role_id)
        role_label = role.formatted_name if role else NOT_AVAILABLE
        manager_label, manager_style = manager_cell(employee, employees_by_id)
        lines.append(_row([
            (employee.first_name, NAME_STYLE, COLUMN_WIDTH),
            (employee.last_name, NAME_STYLE, COLUMN_WIDTH),
            (str(employee.id), None, ID_WIDTH),
            (role_label, None, COLUMN_WIDTH),
            (manager_label, manager_style, None),
        ]))
    return lines


def to_plain(lines: Iterable[Text]) -> str:
    """Join rendered lines into unstyled text"""
    return "\n".join(line.plain for line in lines)
