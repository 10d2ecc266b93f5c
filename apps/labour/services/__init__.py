"""
Labour services - Business logic layer.

- Labour roster
- Daily attendance (one mark per worker per day)
- Wage summary
"""

from .roster import (
    get_labour_in_scope,
    list_labour,
    add_labour,
)

from .attendance import (
    mark_attendance,
    attendance_by_date,
    wage_summary,
)

from .exceptions import (
    LabourServiceError,
    LabourNotFoundError,
    InvalidAttendanceError,
)

__all__ = [
    'get_labour_in_scope',
    'list_labour',
    'add_labour',
    'mark_attendance',
    'attendance_by_date',
    'wage_summary',
    'LabourServiceError',
    'LabourNotFoundError',
    'InvalidAttendanceError',
]
