"""
Shift lifecycle service.

Only one shift may be active shop-wide. The service checks for an open
shift under a row lock and the single_active_shift constraint rejects
anything that slips past the check.
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.utils import timezone

from apps.accounts.models import User
from apps.employees.models import Employee
from apps.employees.services import EmployeeNotFoundError, EmployeeInactiveError
from apps.shifts.models import ShiftRoster

from .exceptions import (
    ShiftNotFoundError,
    EmptyRosterError,
    ShiftAlreadyActiveError,
    NoActiveShiftError,
)

logger = logging.getLogger(__name__)


def get_active_shift() -> Optional[ShiftRoster]:
    """Return the open shift, or None."""
    return (
        ShiftRoster.objects
        .filter(is_active=True)
        .select_related('manager')
        .prefetch_related('employees')
        .first()
    )


def get_shift_by_id(*, shift_id: UUID) -> ShiftRoster:
    """
    Fetch a shift with manager and roster.

    Raises:
        ShiftNotFoundError: If shift doesn't exist
    """
    try:
        return (
            ShiftRoster.objects
            .select_related('manager')
            .prefetch_related('employees')
            .get(id=shift_id)
        )
    except ShiftRoster.DoesNotExist:
        raise ShiftNotFoundError(f"Shift with ID {shift_id} not found")


@transaction.atomic
def start_shift(*, manager: User, employee_ids: List[UUID]) -> ShiftRoster:
    """
    Open a shift with the selected employees.

    Args:
        manager: Manager running the shift
        employee_ids: Employees present; duplicates are ignored

    Returns:
        The new active ShiftRoster

    Raises:
        EmptyRosterError: If no employee is selected
        EmployeeNotFoundError: If an employee doesn't exist
        EmployeeInactiveError: If an employee is inactive
        ShiftAlreadyActiveError: If a shift is already open
    """
    unique_ids = list(dict.fromkeys(employee_ids or []))
    if not unique_ids:
        raise EmptyRosterError("Select at least one employee to start a shift")

    employees = list(Employee.objects.filter(id__in=unique_ids))
    found = {employee.id for employee in employees}
    missing = [str(employee_id) for employee_id in unique_ids if employee_id not in found]
    if missing:
        raise EmployeeNotFoundError(f"Employee(s) not found: {', '.join(missing)}")

    inactive = [employee.name for employee in employees if not employee.is_active]
    if inactive:
        raise EmployeeInactiveError(f"Inactive employee(s) cannot join a shift: {', '.join(inactive)}")

    if ShiftRoster.objects.select_for_update().filter(is_active=True).exists():
        raise ShiftAlreadyActiveError("A shift is already active. End it before starting a new one.")

    try:
        with transaction.atomic():
            shift = ShiftRoster.objects.create(
                manager=manager,
                date=timezone.localdate(),
                is_active=True,
            )
    except IntegrityError:
        raise ShiftAlreadyActiveError("A shift is already active. End it before starting a new one.")

    shift.employees.set(employees)

    logger.info(
        "Shift %s started by %s with %d employee(s)",
        shift.id, manager.email, len(employees)
    )
    return shift


@transaction.atomic
def end_shift(*, shift_id: Optional[UUID] = None, ended_by: Optional[User] = None) -> ShiftRoster:
    """
    Close the active shift.

    Args:
        shift_id: Shift to close; defaults to the active one
        ended_by: Manager closing the shift (for the log)

    Returns:
        The closed ShiftRoster

    Raises:
        NoActiveShiftError: If there is no matching active shift
    """
    queryset = ShiftRoster.objects.select_for_update().filter(is_active=True)
    if shift_id is not None:
        queryset = queryset.filter(id=shift_id)

    shift = queryset.first()
    if shift is None:
        raise NoActiveShiftError("There is no active shift to end")

    shift.is_active = False
    shift.ended_at = timezone.now()
    shift.save(update_fields=['is_active', 'ended_at'])

    logger.info(
        "Shift %s ended by %s",
        shift.id, ended_by.email if ended_by else shift.manager.email
    )
    return shift
