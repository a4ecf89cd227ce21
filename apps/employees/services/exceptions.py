"""
Domain-specific exceptions for employees app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class EmployeesServiceError(Exception):
    """Base exception for all employees service errors."""
    pass


class EmployeeNotFoundError(EmployeesServiceError):
    """Raised when an employee does not exist."""
    pass


class EmployeeInactiveError(EmployeesServiceError):
    """Raised when an operation needs an active employee."""
    pass
