from django.urls import path
from . import views

app_name = 'sales'

urlpatterns = [
    # POST /api/maal-out/add-sale/       - Record sale (amount = weight x rate)
    # GET  /api/maal-out/list-sales/     - Sales (?date exact)
    # POST /api/maal-out/add-payment/    - Record payment received from a firm
    # GET  /api/maal-out/list-payments/  - Payments (?date exact)
    # GET  /api/maal-out/outstanding/    - Billed / received / outstanding for a firm
    path('add-sale/', views.sale_add, name='add-sale'),
    path('list-sales/', views.sale_list, name='list-sales'),
    path('add-payment/', views.payment_add, name='add-payment'),
    path('list-payments/', views.payment_list, name='list-payments'),
    path('outstanding/', views.outstanding, name='outstanding'),
]
