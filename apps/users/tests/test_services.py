"""
Tests for the staff authentication service.

Run with: pytest apps/users/tests/test_services.py -v
"""

import pytest

from apps.users.models import StaffRole, User
from apps.users.services import (
    InactiveAccountError,
    InvalidCredentialsError,
    UnassignedStaffError,
    authenticate_user,
)


@pytest.mark.django_db
class TestAuthenticateUser:

    def test_stamps_last_login(self, manager):
        user = authenticate_user(email=' Manager@Example.com ', password='TestPass123!')

        assert user == manager
        manager.refresh_from_db()
        assert manager.last_login is not None

    def test_wrong_password(self, manager):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='manager@example.com', password='wrong')

    def test_unknown_email(self, db):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='nobody@example.com', password='x')

    def test_inactive_checked_before_company(self, manager):
        manager.is_active = False
        manager.company = None
        manager.save()

        with pytest.raises(InactiveAccountError):
            authenticate_user(email='manager@example.com', password='TestPass123!')

    def test_manager_needs_company(self, manager):
        manager.company = None
        manager.save()

        with pytest.raises(UnassignedStaffError):
            authenticate_user(email='manager@example.com', password='TestPass123!')

    def test_owner_without_company_may_sign_in(self, db):
        owner = User.objects.create_user(
            email='owner@example.com',
            password='OwnerPass1!',
            role=StaffRole.OWNER,
        )

        assert authenticate_user(email='owner@example.com', password='OwnerPass1!') == owner
