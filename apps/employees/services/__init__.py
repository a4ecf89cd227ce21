"""Services for employees business logic."""

from .exceptions import (
    EmployeesServiceError,
    EmployeeNotFoundError,
    EmployeeInactiveError,
)
from .employee_management import (
    get_employee_by_id,
    create_employee,
    update_employee,
    deactivate_employee,
)

__all__ = [
    # Exceptions
    'EmployeesServiceError',
    'EmployeeNotFoundError',
    'EmployeeInactiveError',
    # Services
    'get_employee_by_id',
    'create_employee',
    'update_employee',
    'deactivate_employee',
]
