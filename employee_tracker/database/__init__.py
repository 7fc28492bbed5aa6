"""
Database package initialization
"""
from .exceptions import TrackerError, ValidationError, DatabaseError
from .models import Department, Role, Employee, MAX_NAME_LENGTH, format_salary
from .manager import DatabaseManager

__all__ = [
    'DatabaseManager',
    'Department',
    'Role',
    'Employee',
    'MAX_NAME_LENGTH',
    'format_salary',
    'TrackerError',
    'ValidationError',
    'DatabaseError'
]
