"""Domain exceptions for labour app."""


class LabourServiceError(Exception):
    """Base exception for all labour service errors."""
    code = 'labour_error'


class LabourNotFoundError(LabourServiceError):
    """Worker does not exist in the godown."""
    code = 'labour_not_found'


class InvalidAttendanceError(LabourServiceError):
    """Attendance or roster input is invalid."""
    code = 'invalid_attendance'
