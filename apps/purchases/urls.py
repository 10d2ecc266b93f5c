from django.urls import path
from . import views

app_name = 'purchases'

urlpatterns = [
    # Feriwala (paid in full)
    # POST /api/feriwala/add/          - Record purchase + ledger debit
    # GET  /api/feriwala/list/         - Purchases on or before ?date, with lines
    path('feriwala/add/', views.feriwala_add, name='feriwala-add'),
    path('feriwala/list/', views.feriwala_list, name='feriwala-list'),

    # Kabadiwala (paid in full, in part or later)
    # POST /api/kabadiwala/add/        - Record purchase + optional payment
    # GET  /api/kabadiwala/list/       - Purchases with weight/amount/paid totals
    # GET  /api/kabadiwala/owner-list/ - Flat rows for the owner (?date exact)
    path('kabadiwala/add/', views.kabadiwala_add, name='kabadiwala-add'),
    path('kabadiwala/list/', views.kabadiwala_list, name='kabadiwala-list'),
    path('kabadiwala/owner-list/', views.kabadiwala_owner_list, name='kabadiwala-owner-list'),
]
