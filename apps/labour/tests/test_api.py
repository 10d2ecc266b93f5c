import uuid
from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.labour.models import Labour


@pytest.fixture
def worker(company, godown):
    return Labour.objects.create(company=company, godown=godown, name='Raju', daily_wage=Decimal('500'))


@pytest.mark.django_db
class TestLabourAPI:

    def test_add_and_list(self, manager_client, scope):
        created = manager_client.post(reverse('labour:labour-add'), {
            **scope, 'name': 'Raju', 'daily_wage': '500',
        }, format='json')
        listing = manager_client.get(reverse('labour:labour-all'), scope)

        assert created.status_code == status.HTTP_201_CREATED
        assert listing.status_code == status.HTTP_200_OK
        assert [row['name'] for row in listing.data['labour']] == ['Raju']

    def test_mark_attendance(self, manager_client, scope, worker):
        response = manager_client.post(reverse('labour:attendance-mark'), {
            **scope,
            'labour_id': str(worker.id),
            'date': date.today().isoformat(),
            'status': 'Present',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['attendance']['labour_name'] == 'Raju'
        assert response.data['attendance']['status'] == 'Present'

    def test_mark_attendance_bad_status(self, manager_client, scope, worker):
        response = manager_client.post(reverse('labour:attendance-mark'), {
            **scope,
            'labour_id': str(worker.id),
            'date': date.today().isoformat(),
            'status': 'present-ish',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_mark_attendance_unknown_worker(self, manager_client, scope):
        response = manager_client.post(reverse('labour:attendance-mark'), {
            **scope,
            'labour_id': str(uuid.uuid4()),
            'date': date.today().isoformat(),
            'status': 'Absent',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_attendance_by_date_and_wages(self, manager_client, scope, worker):
        today = date.today().isoformat()
        manager_client.post(reverse('labour:attendance-mark'), {
            **scope, 'labour_id': str(worker.id), 'date': today, 'status': 'Present',
        }, format='json')

        by_date = manager_client.get(reverse('labour:attendance-by-date'), {**scope, 'date': today})
        wages = manager_client.get(reverse('labour:wage-summary'), {
            **scope, 'start_date': today, 'end_date': today,
        })

        assert len(by_date.data['attendance']) == 1
        row, = wages.data['summary']
        assert row['present_days'] == 1
        assert Decimal(row['wages']) == Decimal('500')
