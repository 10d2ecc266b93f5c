"""Domain exceptions for users app."""


class UsersServiceError(Exception):
    """Base exception for all users service errors."""
    pass


class InvalidCredentialsError(UsersServiceError):
    """Email or password is wrong."""
    pass


class InactiveAccountError(UsersServiceError):
    """User account is deactivated."""
    pass


class UnassignedStaffError(UsersServiceError):
    """Manager has no company to work in."""
    pass
