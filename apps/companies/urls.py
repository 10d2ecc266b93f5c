from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'companies'

router = DefaultRouter()
router.register(r'godowns', views.GodownViewSet, basename='godown')
router.register(r'', views.CompanyViewSet, basename='company')

urlpatterns = [
    # GET/POST /api/companies/          - List/create companies
    # GET/POST /api/companies/godowns/  - List/create godowns (?company=<id>)
    path('', include(router.urls)),
]
