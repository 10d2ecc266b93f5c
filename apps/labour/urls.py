from django.urls import path
from . import views

app_name = 'labour'

urlpatterns = [
    # GET  /api/labour/all/              - Roster of a godown
    # POST /api/labour/                  - Add worker
    # POST /api/labour/attendance/mark/  - Mark Present/Absent (upsert)
    # GET  /api/labour/wage-summary/     - Present days x daily wage per worker
    # GET  /api/attendance/by-date/      - Attendance of a godown for a day
    path('labour/', views.labour_add, name='labour-add'),
    path('labour/all/', views.labour_all, name='labour-all'),
    path('labour/attendance/mark/', views.attendance_mark, name='attendance-mark'),
    path('labour/wage-summary/', views.labour_wage_summary, name='wage-summary'),
    path('attendance/by-date/', views.attendance_for_date, name='attendance-by-date'),
]
