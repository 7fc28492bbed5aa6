"""
Record types for the department, role and employee tables

Each record mirrors one table row and validates its text columns on
construction, matching the VARCHAR(30) columns in db/schema.sql.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from .exceptions import ValidationError

MAX_NAME_LENGTH = 30

Number = Union[int, float, Decimal]


def check_length(value: str, label: str) -> None:
    """Raise ValidationError when value exceeds MAX_NAME_LENGTH characters"""
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(f"{label} cannot be over {MAX_NAME_LENGTH} characters.")


@dataclass(frozen=True)
class Department:
    """Row of the department table"""
    id: int
    name: str

    def __post_init__(self):
        check_length(self.name, "Name")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Department":
        return cls(id=row['id'], name=row['department_name'])

    @property
    def formatted_name(self) -> str:
        return f"{self.name} ({self.id})"


@dataclass(frozen=True)
class Role:
    """Row of the role table"""
    id: int
    title: str
    salary: Number
    department_id: int

    def __post_init__(self):
        check_length(self.title, "Title")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Role":
        return cls(
            id=row['id'],
            title=row['title'],
            salary=row['salary'],
            department_id=row['department_id'],
        )

    @property
    def formatted_name(self) -> str:
        return f"{self.title} ({self.id})"


@dataclass(frozen=True)
class Employee:
    """Row of the employee table; manager_id is None for top-level employees"""
    id: int
    first_name: str
    last_name: str
    role_id: int
    manager_id: Optional[int] = None

    def __post_init__(self):
        check_length(self.first_name, "First name")
        check_length(self.last_name, "Last name")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Employee":
        return cls(
            id=row['id'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            role_id=row['role_id'],
            manager_id=row['manager_id'],
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def formatted_name(self) -> str:
        return f"{self.full_name} ({self.id})"


def format_salary(salary: Number) -> str:
    """Render a salary without a trailing .0/.00 when it is a whole amount"""
    if isinstance(salary, float) and salary.is_integer():
        return str(int(salary))
    if isinstance(salary, Decimal) and salary.is_finite() and salary == salary.to_integral_value():
        return str(int(salary))
    return str(salary)
