"""Per-employee shift summaries written by the manager."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.employees.models import Employee
from apps.employees.services import EmployeeNotFoundError
from apps.shifts.models import ShiftRoster, ShiftSummary

from .exceptions import ShiftNotFoundError, EmployeeNotOnShiftError

logger = logging.getLogger(__name__)


@transaction.atomic
def save_shift_summary(
    *,
    shift_id: UUID,
    employee_id: UUID,
    summary: str,
    author: Optional[User] = None
) -> ShiftSummary:
    """
    Create or replace today's summary for an employee on a shift.

    Summaries may still be written after the shift has ended.

    Raises:
        ShiftNotFoundError: If shift doesn't exist
        EmployeeNotFoundError: If employee doesn't exist
        EmployeeNotOnShiftError: If employee was not on the roster
    """
    try:
        shift = ShiftRoster.objects.get(id=shift_id)
    except ShiftRoster.DoesNotExist:
        raise ShiftNotFoundError(f"Shift with ID {shift_id} not found")

    try:
        employee = Employee.objects.get(id=employee_id)
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    if not shift.employees.filter(id=employee.id).exists():
        raise EmployeeNotOnShiftError(f"{employee.name} is not on this shift")

    shift_summary, created = ShiftSummary.objects.update_or_create(
        employee=employee,
        shift=shift,
        date=timezone.localdate(),
        defaults={'summary': summary, 'author': author},
    )

    logger.debug(
        "Shift summary for %s %s",
        employee.name, 'created' if created else 'updated'
    )
    return shift_summary


def get_shift_summaries(*, shift_id: UUID):
    """
    All summaries written for a shift.

    Raises:
        ShiftNotFoundError: If shift doesn't exist
    """
    if not ShiftRoster.objects.filter(id=shift_id).exists():
        raise ShiftNotFoundError(f"Shift with ID {shift_id} not found")

    return (
        ShiftSummary.objects
        .filter(shift_id=shift_id)
        .select_related('employee', 'author')
    )
