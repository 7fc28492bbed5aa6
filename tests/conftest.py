# Test configuration
import io
import os
import sys

# Add the project root to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Test environment variables
os.environ['LOG_FILE'] = 'none'

import psycopg2
import pytest
from rich.console import Console

from employee_tracker.database import manager as queries
from employee_tracker.database import DatabaseManager


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )


class InMemoryPool:
    """Stand-in for PostgreSQLConnectionPool that understands the data layer's statements"""

    def __init__(self):
        self.tables = {'department': [], 'role': [], 'employee': []}
        self._next_id = {'department': 1, 'role': 1, 'employee': 1}
        self.executed = []
        self.fail_on = set()

    def _insert(self, table, row):
        row = dict(id=self._next_id[table], **row)
        self._next_id[table] += 1
        self.tables[table].append(row)
        return [{'id': row['id']}]

    def _find(self, table, row_id):
        for row in self.tables[table]:
            if row['id'] == row_id:
                return row
        return None

    def _select(self, table):
        return [dict(row) for row in sorted(self.tables[table], key=lambda row: row['id'])]

    def query(self, sql, params=()):
        params = tuple(params)
        self.executed.append((sql, params))

        if sql in self.fail_on:
            raise psycopg2.OperationalError("server closed the connection unexpectedly")

        if sql == queries.SELECT_DEPARTMENTS:
            return self._select('department')
        if sql == queries.SELECT_ROLES:
            return self._select('role')
        if sql == queries.SELECT_EMPLOYEES:
            return self._select('employee')

        if sql == queries.INSERT_DEPARTMENT:
            return self._insert('department', {'department_name': params[0]})
        if sql == queries.INSERT_ROLE:
            title, salary, department_id = params
            if self._find('department', department_id) is None:
                raise psycopg2.IntegrityError("insert or update on table \"role\" violates foreign key constraint")
            return self._insert('role', {'title': title, 'salary': salary, 'department_id': department_id})
        if sql == queries.INSERT_EMPLOYEE:
            first_name, last_name, role_id, manager_id = params
            if self._find('role', role_id) is None:
                raise psycopg2.IntegrityError("insert or update on table \"employee\" violates foreign key constraint")
            return self._insert('employee', {
                'first_name': first_name,
                'last_name': last_name,
                'role_id': role_id,
                'manager_id': manager_id,
            })

        if sql in (queries.UPDATE_EMPLOYEE_ROLE, queries.UPDATE_EMPLOYEE_MANAGER):
            new_value, employee_id = params
            column = 'role_id' if sql == queries.UPDATE_EMPLOYEE_ROLE else 'manager_id'
            employee = self._find('employee', employee_id)
            if employee is None:
                return []
            employee[column] = new_value
            return [{'id': employee_id}]

        raise AssertionError(f"Unexpected statement: {sql}")

    def writes(self):
        return [sql for sql, _ in self.executed if not sql.startswith("SELECT")]


class ScriptedPrompter:
    """Prompter that answers from a prepared list instead of the keyboard"""

    def __init__(self, answers=None, console=None):
        self.answers = list(answers or [])
        self.console = console or Console(file=io.StringIO(), width=200)
        self.questions = []
        self.pauses = 0

    def _next(self, message):
        self.questions.append(message)
        assert self.answers, f"No scripted answer for: {message}"
        return self.answers.pop(0)

    def ask_text(self, message):
        return self._next(message)

    def ask_number(self, message):
        return self._next(message)

    def select(self, message, choices):
        answer = self._next(message)
        assert answer in [choice.value for choice in choices], f"{answer!r} is not offered for: {message}"
        return answer

    def pause(self, message="Press Enter to continue..."):
        self.pauses += 1


@pytest.fixture
def pool():
    """Empty in-memory database"""
    return InMemoryPool()


@pytest.fixture
def database(pool):
    return DatabaseManager(pool)


@pytest.fixture
def seeded_database(database):
    """Two departments, two roles and a small reporting chain"""
    database.add_department("Engineering")
    database.add_department("Sales")
    database.add_role("Engineer", 90000, 1)
    database.add_role("Account Manager", 65000, 2)
    database.add_employee("Ada", "Lovelace", 1, None)
    database.add_employee("Grace", "Hopper", 1, 1)
    database.add_employee("Ken", "Thompson", 2, None)
    return database


@pytest.fixture
def output_console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def make_prompter(output_console):
    """Build a ScriptedPrompter that writes to output_console"""
    def _make(*answers):
        return ScriptedPrompter(answers, output_console)
    return _make
