"""
Attendance marking and wage calculation.

Exactly one attendance row exists per worker per day; marking again on the
same day overwrites the status.
"""

import logging
from datetime import date as date_type
from typing import List
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Q, QuerySet

from apps.labour.models import Attendance, AttendanceStatus, Labour
from .exceptions import InvalidAttendanceError
from .roster import get_labour_in_scope

logger = logging.getLogger(__name__)


@transaction.atomic
def mark_attendance(
    *,
    company_id: UUID,
    godown_id: UUID,
    labour_id: UUID,
    date: date_type,
    status: str
) -> Attendance:
    """
    Mark a worker Present or Absent for a day (upsert).

    Raises:
        LabourNotFoundError: If the worker doesn't belong to the godown
        InvalidAttendanceError: If status is not Present/Absent
    """
    if status not in AttendanceStatus.values:
        raise InvalidAttendanceError(f"Status must be one of {', '.join(AttendanceStatus.values)}")

    labour = get_labour_in_scope(labour_id=labour_id, company_id=company_id, godown_id=godown_id)

    attendance, created = Attendance.objects.update_or_create(
        labour=labour,
        date=date,
        defaults={
            'company_id': company_id,
            'godown_id': godown_id,
            'status': status,
        }
    )

    logger.info(
        "%s attendance for %s on %s: %s",
        "Marked" if created else "Updated", labour.name, date, status
    )
    return attendance


def attendance_by_date(*, company_id: UUID, godown_id: UUID, date: date_type) -> QuerySet[Attendance]:
    return (
        Attendance.objects
        .filter(company_id=company_id, godown_id=godown_id, date=date)
        .select_related('labour')
        .order_by('labour__name')
    )


def wage_summary(
    *,
    company_id: UUID,
    godown_id: UUID,
    start_date: date_type,
    end_date: date_type
) -> List[dict]:
    """
    Present/absent days and wages per worker for a date range (inclusive).

    Wages are present days x daily wage. Workers with no attendance in the
    range are listed with zeros.

    Returns:
        List of dicts: labour_id, name, daily_wage, present_days, absent_days,
        wages
    """
    in_range = Q(attendance__date__gte=start_date, attendance__date__lte=end_date)

    labour = (
        Labour.objects
        .filter(company_id=company_id, godown_id=godown_id)
        .annotate(
            present_days=Count(
                'attendance',
                filter=in_range & Q(attendance__status=AttendanceStatus.PRESENT)
            ),
            absent_days=Count(
                'attendance',
                filter=in_range & Q(attendance__status=AttendanceStatus.ABSENT)
            ),
        )
        .order_by('name')
    )

    return [
        {
            'labour_id': worker.id,
            'name': worker.name,
            'daily_wage': worker.daily_wage,
            'present_days': worker.present_days,
            'absent_days': worker.absent_days,
            'wages': worker.daily_wage * worker.present_days,
        }
        for worker in labour
    ]
