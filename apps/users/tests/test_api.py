import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, manager):
        response = api_client.post(reverse('users:login'), {
            'email': 'manager@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['role'] == 'manager'
        assert 'access' in response.data['tokens']
        manager.refresh_from_db()
        assert manager.last_login is not None

    def test_login_is_case_insensitive(self, api_client, manager):
        response = api_client.post(reverse('users:login'), {
            'email': 'MANAGER@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK

    def test_wrong_password(self, api_client, manager):
        response = api_client.post(reverse('users:login'), {
            'email': 'manager@example.com',
            'password': 'nope',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': 'Invalid credentials'}

    def test_unknown_email(self, api_client, db):
        response = api_client.post(reverse('users:login'), {
            'email': 'ghost@example.com',
            'password': 'whatever',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_inactive_account(self, api_client, manager):
        manager.is_active = False
        manager.save()

        response = api_client.post(reverse('users:login'), {
            'email': 'manager@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_fields(self, api_client, db):
        response = api_client.post(reverse('users:login'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_manager_without_company(self, api_client, manager):
        manager.company = None
        manager.save()

        response = api_client.post(reverse('users:login'), {
            'email': 'manager@example.com',
            'password': 'TestPass123!',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'error': 'No company assigned to this account'}
        manager.refresh_from_db()
        assert manager.last_login is None


@pytest.mark.django_db
class TestCurrentUser:

    def test_profile(self, manager_client, manager):
        response = manager_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == manager.email
        assert response.data['display_name'] == 'Godown Manager'

    def test_requires_token(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_display_name_falls_back_to_email(self, manager):
        manager.display_name = ''

        assert manager.get_display_name() == 'manager'
