"""
Employee management service.

Employees are created, edited and deactivated here; nothing deletes
an employee row.
"""

import logging
from uuid import UUID

from django.db import transaction

from apps.employees.models import Employee

from .exceptions import EmployeeNotFoundError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = [
    'name',
    'role',
    'profile_image_url',
    'is_active',
    'allergies',
    'emergency_contacts',
    'interests_motivators',
    'challenges',
    'regulation_strategies',
]


def get_employee_by_id(*, employee_id: UUID) -> Employee:
    """
    Fetch an employee by ID.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
    """
    try:
        return Employee.objects.get(id=employee_id)
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")


@transaction.atomic
def create_employee(*, name: str, **fields) -> Employee:
    """
    Create an employee record.

    Args:
        name: Employee's name
        **fields: Any other editable attribute (role, support lists, ...)

    Returns:
        Created Employee instance
    """
    data = {field: fields[field] for field in EDITABLE_FIELDS if field in fields}
    employee = Employee.objects.create(name=name, **data)
    logger.info("Employee %s (%s) created", employee.name, employee.id)
    return employee


@transaction.atomic
def update_employee(*, employee_id: UUID, **changes) -> Employee:
    """
    Update an employee's attributes.

    Unknown keys are ignored.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
    """
    try:
        employee = Employee.objects.select_for_update().get(id=employee_id)
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    update_fields = []
    for field in EDITABLE_FIELDS:
        if field in changes:
            setattr(employee, field, changes[field])
            update_fields.append(field)

    if update_fields:
        employee.save(update_fields=update_fields + ['updated_at'])
        logger.debug("Employee %s updated: %s", employee.id, ', '.join(update_fields))

    return employee


def deactivate_employee(*, employee_id: UUID) -> Employee:
    """Mark an employee inactive. Goals and progress history are kept."""
    employee = update_employee(employee_id=employee_id, is_active=False)
    logger.info("Employee %s (%s) deactivated", employee.name, employee.id)
    return employee
