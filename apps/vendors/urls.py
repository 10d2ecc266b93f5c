from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'vendors'

# Note: scrap-types must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'scrap-types', views.ScrapTypeViewSet, basename='scrap-type')
router.register(r'', views.VendorViewSet, basename='vendor')

urlpatterns = [
    # GET    /api/vendors/                 - List vendors
    # POST   /api/vendors/                 - Create vendor
    # GET    /api/vendors/{id}/            - Vendor with rate card
    # GET    /api/vendors/{id}/rates/      - Rate card
    # POST   /api/vendors/{id}/rates/      - Set (upsert) a rate
    # GET    /api/vendors/scrap-types/     - Material catalog
    path('', include(router.urls)),
]
