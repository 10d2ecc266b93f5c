from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from .models import Company, Godown
from .serializers import CompanySerializer, GodownSerializer, GodownFilterSerializer


class CompanyViewSet(viewsets.ModelViewSet):
    """
    ViewSet for companies.

    list: Get all companies
    create: Register a company
    retrieve: Get a specific company
    """

    queryset = Company.objects.all()
    serializer_class = CompanySerializer
    permission_classes = [IsAuthenticated]


class GodownViewSet(viewsets.ModelViewSet):
    """ViewSet for godowns, filterable by ``company``."""

    queryset = Godown.objects.select_related('company')
    serializer_class = GodownSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()

        if self.action != 'list':
            return queryset

        filter_serializer = GodownFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        if 'company' in filter_serializer.validated_data:
            queryset = queryset.filter(company_id=filter_serializer.validated_data['company'])
        return queryset
