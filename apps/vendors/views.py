from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from .models import Vendor, ScrapType
from .serializers import (
    VendorSerializer,
    VendorDetailSerializer,
    VendorRateSerializer,
    ScrapTypeSerializer,
    VendorFilterSerializer,
    SetVendorRateInputSerializer,
)
from .services import (
    set_vendor_rate,
    get_vendor_rates,
    ScrapTypeNotFoundError,
    InvalidRateError,
)


class VendorPagination(PageNumberPagination):
    """Custom pagination for vendors."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class VendorViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Vendor CRUD operations.

    list: Get vendors (filterable by company, kind, name)
    create: Register a vendor
    retrieve: Get a vendor with its rate card
    update: Update a vendor
    destroy: Delete a vendor
    """

    queryset = Vendor.objects.select_related('company')
    serializer_class = VendorSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = VendorPagination

    def get_queryset(self):
        """Filter vendors using input serializer validation."""
        queryset = super().get_queryset()

        if self.action != 'list':
            return queryset

        filter_serializer = VendorFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'company' in params:
            queryset = queryset.filter(company_id=params['company'])
        if 'kind' in params:
            queryset = queryset.filter(kind=params['kind'])
        if 'search' in params:
            queryset = queryset.filter(name__icontains=params['search'])

        return queryset

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return VendorDetailSerializer
        return VendorSerializer

    @extend_schema(
        request=SetVendorRateInputSerializer,
        responses={200: VendorRateSerializer(many=True), 201: VendorRateSerializer},
        tags=['vendors'],
    )
    @action(detail=True, methods=['get', 'post'])
    def rates(self, request, pk=None):
        """
        Get or set the vendor's rate card.

        GET  /api/vendors/{id}/rates/
        POST /api/vendors/{id}/rates/  Body: {"scrap_type_id": "...", "vendor_rate": "32.50"}
        """
        vendor = self.get_object()

        if request.method == 'GET':
            rates = get_vendor_rates(vendor_id=vendor.id)
            return Response(VendorRateSerializer(rates, many=True).data)

        input_serializer = SetVendorRateInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            vendor_rate, created = set_vendor_rate(
                vendor_id=vendor.id,
                scrap_type_id=input_serializer.validated_data['scrap_type_id'],
                rate=input_serializer.validated_data['vendor_rate'],
            )
        except ScrapTypeNotFoundError as e:
            raise NotFound(str(e))
        except InvalidRateError as e:
            raise ValidationError(str(e))

        return Response(
            VendorRateSerializer(vendor_rate).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )


class ScrapTypeViewSet(viewsets.ModelViewSet):
    """ViewSet for the material catalog."""

    queryset = ScrapType.objects.all()
    serializer_class = ScrapTypeSerializer
    permission_classes = [IsAuthenticated]
