"""
URL configuration for the Scrapyard Books API.

Every API lives under /api/. The godown-facing book endpoints keep the flat
paths the dashboard calls (/api/feriwala/add/, /api/maal-out/list-sales/, ...).
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.users.urls')),

    # Master data
    path('api/companies/', include('apps.companies.urls')),
    path('api/vendors/', include('apps.vendors.urls')),

    # Books
    path('api/', include('apps.purchases.urls')),
    path('api/', include('apps.ledger.urls')),
    path('api/', include('apps.labour.urls')),
    path('api/maal-out/', include('apps.sales.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
