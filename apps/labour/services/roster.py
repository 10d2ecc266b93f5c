"""Labour roster management."""

from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.common.money import parse_decimal
from apps.labour.models import Labour
from .exceptions import InvalidAttendanceError, LabourNotFoundError


def get_labour_in_scope(*, labour_id: UUID, company_id: UUID, godown_id: UUID) -> Labour:
    """
    Get a worker of the given godown.

    Raises:
        LabourNotFoundError: If the worker doesn't exist or belongs elsewhere
    """
    try:
        return Labour.objects.get(id=labour_id, company_id=company_id, godown_id=godown_id)
    except Labour.DoesNotExist:
        raise LabourNotFoundError(f"Labour {labour_id} not found for this godown")


def list_labour(*, company_id: UUID, godown_id: UUID, active_only: bool = False) -> QuerySet[Labour]:
    queryset = Labour.objects.filter(company_id=company_id, godown_id=godown_id)
    if active_only:
        queryset = queryset.filter(is_active=True)
    return queryset.order_by('name')


@transaction.atomic
def add_labour(
    *,
    company_id: UUID,
    godown_id: UUID,
    name: str,
    daily_wage,
    phone: str = ''
) -> Labour:
    """
    Add a worker to the roster.

    Raises:
        InvalidAttendanceError: If name is empty or daily wage is negative
    """
    if not name or not name.strip():
        raise InvalidAttendanceError("Name is required")

    try:
        daily_wage = parse_decimal(daily_wage)
    except ValueError:
        raise InvalidAttendanceError("Daily wage must be a number")
    if daily_wage < 0:
        raise InvalidAttendanceError("Daily wage cannot be negative")

    return Labour.objects.create(
        company_id=company_id,
        godown_id=godown_id,
        name=name.strip(),
        phone=phone,
        daily_wage=daily_wage,
    )
