"""
Users services - Business logic layer.

- Authentication (email + password -> user)
"""

from .authentication import authenticate_user

from .exceptions import (
    UsersServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    UnassignedStaffError,
)

__all__ = [
    'authenticate_user',
    'UsersServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UnassignedStaffError',
]
