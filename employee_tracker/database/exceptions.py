"""
Error types raised by the employee tracker data layer
"""


class TrackerError(Exception):
    """Base class for errors the menu reports and recovers from"""


class ValidationError(TrackerError, ValueError):
    """A value breaks a record rule (length limit, uniqueness, allowed field)"""


class DatabaseError(TrackerError):
    """A statement failed; the driver error is kept as __cause__"""
