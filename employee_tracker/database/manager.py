"""
Database Manager - data access for departments, roles and employees

Reads map rows to record objects and raise on failure. Writes validate
their input first and report the outcome as a (success, message) tuple
so the interactive flows can show it and carry on.
"""
import math
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

import psycopg2

from .exceptions import DatabaseError, TrackerError, ValidationError
from .models import Department, Employee, Number, Role, check_length
from ..logging_setup import get_logger

logger = get_logger(__name__)

SELECT_DEPARTMENTS = "SELECT * FROM department ORDER BY id"
SELECT_ROLES = "SELECT * FROM role ORDER BY id"
SELECT_EMPLOYEES = "SELECT * FROM employee ORDER BY id"

INSERT_DEPARTMENT = "INSERT INTO department (department_name) VALUES (%s) RETURNING id"
INSERT_ROLE = "INSERT INTO role (title, salary, department_id) VALUES (%s, %s, %s) RETURNING id"
INSERT_EMPLOYEE = (
    "INSERT INTO employee (first_name, last_name, role_id, manager_id) "
    "VALUES (%s, %s, %s, %s) RETURNING id"
)

UPDATE_EMPLOYEE_ROLE = "UPDATE employee SET role_id = %s WHERE id = %s RETURNING id"
UPDATE_EMPLOYEE_MANAGER = "UPDATE employee SET manager_id = %s WHERE id = %s RETURNING id"

UPDATE_STATEMENTS = {
    'role': UPDATE_EMPLOYEE_ROLE,
    'manager': UPDATE_EMPLOYEE_MANAGER,
}

OperationResult = Tuple[bool, str]


class DatabaseManager:
    """Data access for the employee tracker tables"""

    def __init__(self, pool):
        """
        Args:
            pool: object with query(sql, params) -> list of row dicts,
                normally a PostgreSQLConnectionPool
        """
        self.pool = pool

    def _execute(self, sql: str, params: Sequence[Any], action: str) -> List[Dict[str, Any]]:
        try:
            return self.pool.query(sql, params)
        except psycopg2.Error as e:
            raise DatabaseError(f"{action}: {e}") from e

    # =============================================================================
    # READ OPERATIONS
    # =============================================================================

    def list_departments(self) -> List[Department]:
        rows = self._execute(SELECT_DEPARTMENTS, (), "Error loading departments")
        return [Department.from_row(row) for row in rows]

    def list_roles(self) -> List[Role]:
        rows = self._execute(SELECT_ROLES, (), "Error loading roles")
        return [Role.from_row(row) for row in rows]

    def list_employees(self) -> List[Employee]:
        rows = self._execute(SELECT_EMPLOYEES, (), "Error loading employees")
        return [Employee.from_row(row) for row in rows]

    # =============================================================================
    # WRITE OPERATIONS
    # =============================================================================

    def add_department(self, name: str) -> OperationResult:
        """
        Insert a department.

        The length limit is checked before uniqueness; the name comparison
        is case-sensitive.

        Returns:
            Tuple[bool, str]: (success, message)
        """
        try:
            check_length(name, "Department name")

            for department in self.list_departments():
                if department.name == name:
                    raise ValidationError(
                        "Department name cannot match existing department name! "
                        f"Existing department: {department.formatted_name}"
                    )

            self._execute(INSERT_DEPARTMENT, (name,), "Error adding department")
            logger.info("Department '%s' added", name)
            return True, f"Row {name} successfully added to the departments table!"

        except TrackerError as e:
            logger.info("add_department rejected: %s", e)
            return False, str(e)

    def add_role(self, title: str, salary: Number, department_id: int) -> OperationResult:
        """
        Insert a role under an existing department.

        department_id comes from the caller's department selection and is
        not re-checked here; the foreign key rejects unknown ids.

        Returns:
            Tuple[bool, str]: (success, message)
        """
        try:
            check_length(title, "Role title")
            _check_salary(salary)

            for role in self.list_roles():
                if role.title == title:
                    raise ValidationError(
                        "Role title cannot match existing role title! "
                        f"Existing role: {role.formatted_name}"
                    )

            self._execute(INSERT_ROLE, (title, salary, department_id), "Error adding role")
            logger.info("Role '%s' added to department %s", title, department_id)
            return True, f"Row {title} successfully added to the roles table!"

        except TrackerError as e:
            logger.info("add_role rejected: %s", e)
            return False, str(e)

    def add_employee(self, first_name: str, last_name: str, role_id: int,
                     manager_id: Optional[int] = None) -> OperationResult:
        """
        Insert an employee.

        Returns:
            Tuple[bool, str]: (success, message)
        """
        try:
            check_length(first_name, "First name")
            check_length(last_name, "Last name")

            self._execute(
                INSERT_EMPLOYEE,
                (first_name, last_name, role_id, manager_id),
                "Error adding employee",
            )
            logger.info("Employee '%s %s' added", first_name, last_name)
            return True, f"Row {first_name} {last_name} successfully added to the employees table!"

        except TrackerError as e:
            logger.info("add_employee rejected: %s", e)
            return False, str(e)

    def update_employee(self, employee_id: int, field: str, new_value: Optional[int]) -> OperationResult:
        """
        Reassign an employee's role or manager.

        Args:
            employee_id: employee to change
            field: 'role' or 'manager'
            new_value: role id, or manager id / None for no manager

        No check is made that the new manager is not the employee itself
        or one of its reports.

        Returns:
            Tuple[bool, str]: (success, message)
        """
        try:
            sql = UPDATE_STATEMENTS.get(field)
            if sql is None:
                raise ValidationError(f"Cannot update employee field '{field}'")
            if field == 'role' and new_value is None:
                raise ValidationError("An employee must hold a role")

            rows = self._execute(sql, (new_value, employee_id), "Error updating employee")
            if not rows:
                return False, f"Employee {employee_id} not found"

            logger.info("Employee %s %s set to %s", employee_id, field, new_value)
            return True, "Employee updated successfully!"

        except TrackerError as e:
            logger.info("update_employee rejected: %s", e)
            return False, str(e)


def _check_salary(salary: Number) -> None:
    if isinstance(salary, bool) or not isinstance(salary, (int, float, Decimal)):
        raise ValidationError("Salary must be a number.")
    if isinstance(salary, float) and not math.isfinite(salary):
        raise ValidationError("Salary must be a finite number.")
    if isinstance(salary, Decimal) and not salary.is_finite():
        raise ValidationError("Salary must be a finite number.")
