import uuid
from datetime import date, timedelta
from decimal import Decimal

import pytest

from apps.labour.models import Attendance
from apps.labour.services import (
    InvalidAttendanceError,
    LabourNotFoundError,
    add_labour,
    attendance_by_date,
    list_labour,
    mark_attendance,
    wage_summary,
)


@pytest.fixture
def raju(company, godown):
    return add_labour(company_id=company.id, godown_id=godown.id, name='Raju', daily_wage='500')


@pytest.fixture
def mohan(company, godown):
    return add_labour(company_id=company.id, godown_id=godown.id, name='Mohan', daily_wage='450.50')


@pytest.mark.django_db
class TestRoster:

    def test_add_labour(self, raju):
        assert raju.daily_wage == Decimal('500')
        assert raju.is_active

    def test_add_labour_validation(self, company, godown):
        with pytest.raises(InvalidAttendanceError):
            add_labour(company_id=company.id, godown_id=godown.id, name=' ', daily_wage='100')
        with pytest.raises(InvalidAttendanceError):
            add_labour(company_id=company.id, godown_id=godown.id, name='Raju', daily_wage='-1')

    def test_list_active_only(self, company, godown, raju, mohan):
        mohan.is_active = False
        mohan.save()

        assert list_labour(company_id=company.id, godown_id=godown.id).count() == 2
        assert list(list_labour(company_id=company.id, godown_id=godown.id, active_only=True)) == [raju]


@pytest.mark.django_db
class TestAttendance:

    def test_mark_is_upsert(self, company, godown, raju):
        today = date.today()

        mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=raju.id,
                        date=today, status='Present')
        mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=raju.id,
                        date=today, status='Absent')

        attendance = Attendance.objects.get(labour=raju, date=today)
        assert attendance.status == 'Absent'
        assert Attendance.objects.count() == 1

    def test_unknown_status(self, company, godown, raju):
        with pytest.raises(InvalidAttendanceError):
            mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=raju.id,
                            date=date.today(), status='Late')

    def test_worker_of_other_godown(self, company, other_godown, raju):
        with pytest.raises(LabourNotFoundError):
            mark_attendance(company_id=company.id, godown_id=other_godown.id, labour_id=raju.id,
                            date=date.today(), status='Present')

    def test_unknown_worker(self, company, godown):
        with pytest.raises(LabourNotFoundError):
            mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=uuid.uuid4(),
                            date=date.today(), status='Present')

    def test_by_date(self, company, godown, raju, mohan):
        today = date.today()
        mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=raju.id,
                        date=today, status='Present')
        mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=mohan.id,
                        date=today - timedelta(days=1), status='Present')

        rows = attendance_by_date(company_id=company.id, godown_id=godown.id, date=today)

        assert [row.labour.name for row in rows] == ['Raju']


@pytest.mark.django_db
class TestWageSummary:

    def test_present_days_times_wage(self, company, godown, raju, mohan):
        today = date.today()
        for offset, status in [(0, 'Present'), (1, 'Present'), (2, 'Absent'), (30, 'Present')]:
            mark_attendance(company_id=company.id, godown_id=godown.id, labour_id=raju.id,
                            date=today - timedelta(days=offset), status=status)

        rows = wage_summary(
            company_id=company.id,
            godown_id=godown.id,
            start_date=today - timedelta(days=6),
            end_date=today,
        )

        by_name = {row['name']: row for row in rows}
        assert by_name['Raju']['present_days'] == 2
        assert by_name['Raju']['absent_days'] == 1
        assert by_name['Raju']['wages'] == Decimal('1000')
        assert by_name['Mohan']['present_days'] == 0
        assert by_name['Mohan']['wages'] == Decimal('0')
