from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'ledger'

router = DefaultRouter()
router.register(r'accounts', views.AccountViewSet, basename='account')

urlpatterns = [
    # POST /api/expenses/add/                   - Record expense
    # GET  /api/expenses/list/                  - Expenses of a godown (?date=)
    # GET  /api/expenses/summary/               - Totals for a date range
    path('expenses/add/', views.add_expense, name='expense-add'),
    path('expenses/list/', views.expense_list, name='expense-list'),
    path('expenses/summary/', views.expense_summary_view, name='expense-summary'),

    # GET/POST /api/accounts/                   - Balances / open account
    # GET      /api/accounts/{id}/transactions/ - Ledger of an account
    path('', include(router.urls)),
]
