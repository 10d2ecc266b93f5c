import uuid

import pytest
from django.urls import reverse
from rest_framework import status

from apps.companies.models import Company, Godown
from apps.companies.serializers import DatedScopeSerializer, ScopeSerializer


@pytest.mark.django_db
class TestScopeSerializer:

    def test_valid_scope(self, scope):
        serializer = ScopeSerializer(data=scope)

        assert serializer.is_valid(), serializer.errors

    def test_godown_of_other_company(self, company):
        foreign = Godown.objects.create(company=Company.objects.create(name='Other'), name='Far')

        serializer = ScopeSerializer(data={'company_id': str(company.id), 'godown_id': str(foreign.id)})

        assert not serializer.is_valid()
        assert 'godown_id' in serializer.errors

    def test_unknown_godown(self, company):
        serializer = ScopeSerializer(data={'company_id': str(company.id), 'godown_id': str(uuid.uuid4())})

        assert not serializer.is_valid()

    def test_date_is_optional(self, scope):
        serializer = DatedScopeSerializer(data=scope)

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data.get('date') is None


@pytest.mark.django_db
class TestCompanyAPI:

    def test_create_company_and_godown(self, manager_client):
        company = manager_client.post(reverse('companies:company-list'), {'name': 'Verma Scrap'}, format='json')
        godown = manager_client.post(reverse('companies:godown-list'), {
            'company': company.data['id'],
            'name': 'Yard 2',
        }, format='json')

        assert company.status_code == status.HTTP_201_CREATED
        assert godown.status_code == status.HTTP_201_CREATED

    def test_godowns_filtered_by_company(self, manager_client, company, godown):
        Godown.objects.create(company=Company.objects.create(name='Other'), name='Far')

        response = manager_client.get(reverse('companies:godown-list'), {'company': str(company.id)})

        assert response.status_code == status.HTTP_200_OK
        assert [row['name'] for row in response.data] == ['Main Godown']

    def test_godown_filter_rejects_bad_id(self, manager_client):
        response = manager_client.get(reverse('companies:godown-list'), {'company': 'not-a-uuid'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('companies:company-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestHealthCheck:

    def test_health(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': 'ok'}
