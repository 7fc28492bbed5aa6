"""
Employee tracker: view and edit departments, roles and employees stored
in PostgreSQL from an interactive console menu.
"""

__version__ = "1.0.0"
