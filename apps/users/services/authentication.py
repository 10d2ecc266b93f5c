"""
Staff login for the back office.

Owners see every company's books; a godown manager only works inside the
company they are assigned to, so a manager without one cannot sign in.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from apps.users.models import StaffRole
from .exceptions import InvalidCredentialsError, InactiveAccountError, UnassignedStaffError

User = get_user_model()

logger = logging.getLogger(__name__)


def _find_staff(email: str):
    # Emails are unique case-insensitively in practice; lock for last_login.
    return (
        User.objects
        .select_for_update()
        .select_related('company')
        .get(email__iexact=email.strip())
    )


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a staff member's email and password and stamp ``last_login``.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: The account was switched off
        UnassignedStaffError: A manager with no company assigned
    """
    try:
        user = _find_staff(email)
    except User.DoesNotExist:
        logger.info("Rejected login for unknown email %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.check_password(password):
        logger.info("Rejected login for %s: wrong password", user.email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    if user.role == StaffRole.MANAGER and user.company_id is None:
        logger.warning("Manager %s has no company assigned", user.email)
        raise UnassignedStaffError("No company assigned to this manager")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("Login: %s (%s)", user.email, user.role)
    return user
