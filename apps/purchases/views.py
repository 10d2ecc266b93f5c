from rest_framework import serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .exceptions import exception_for_failure
from .serializers import (
    FeriwalaPurchaseInputSerializer,
    KabadiwalaPurchaseInputSerializer,
    PurchaseListQuerySerializer,
    KabadiwalaListQuerySerializer,
    PurchaseReceiptSerializer,
    FeriwalaPurchaseSerializer,
    KabadiwalaPurchaseListSerializer,
    OwnerEntrySerializer,
)
from .services import (
    add_feriwala_purchase,
    add_kabadiwala_purchase,
    list_feriwala_purchases,
    list_kabadiwala_purchases,
    list_kabadiwala_owner_entries,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class FeriwalaListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    records = FeriwalaPurchaseSerializer(many=True)


class KabadiwalaListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    kabadiwala = KabadiwalaPurchaseListSerializer(many=True)


class OwnerListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    entries = OwnerEntrySerializer(many=True)


def _receipt_response(outcome, message):
    """Turn a workflow outcome into a response, raising the mapped API error on failure."""
    if outcome.failed:
        raise exception_for_failure(outcome)

    receipt = outcome.value
    return Response(PurchaseReceiptSerializer({
        'success': True,
        'purchase_id': receipt.purchase_id,
        'total_amount': receipt.total_amount,
        'vendor_name': receipt.vendor_name,
        'payment_status': receipt.payment_status,
        'message': message,
    }).data)


# =============================================================================
# Feriwala
# =============================================================================

@extend_schema(
    request=FeriwalaPurchaseInputSerializer,
    responses={
        200: PurchaseReceiptSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Record a feriwala purchase priced from the vendor's rates and paid in full from an account.",
    tags=['feriwala'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def feriwala_add(request):
    """POST /api/feriwala/add/"""
    serializer = FeriwalaPurchaseInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    outcome = add_feriwala_purchase(serializer.to_request())
    return _receipt_response(outcome, 'Feriwala purchase added successfully')


@extend_schema(
    parameters=[PurchaseListQuerySerializer],
    responses={200: FeriwalaListResponseSerializer},
    tags=['feriwala'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def feriwala_list(request):
    """GET /api/feriwala/list/?company_id=&godown_id=&date="""
    serializer = PurchaseListQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    purchases = list_feriwala_purchases(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
        date=params.get('date'),
    )

    return Response({
        'success': True,
        'records': FeriwalaPurchaseSerializer(purchases, many=True).data,
    })


# =============================================================================
# Kabadiwala
# =============================================================================

@extend_schema(
    request=KabadiwalaPurchaseInputSerializer,
    responses={
        200: PurchaseReceiptSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Record a kabadiwala purchase with an optional full or partial payment.",
    tags=['kabadiwala'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def kabadiwala_add(request):
    """POST /api/kabadiwala/add/"""
    serializer = KabadiwalaPurchaseInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    outcome = add_kabadiwala_purchase(serializer.to_request())
    return _receipt_response(outcome, 'Kabadiwala purchase recorded successfully')


@extend_schema(
    parameters=[KabadiwalaListQuerySerializer],
    responses={200: KabadiwalaListResponseSerializer},
    tags=['kabadiwala'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def kabadiwala_list(request):
    """GET /api/kabadiwala/list/?company_id=&godown_id="""
    serializer = KabadiwalaListQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    purchases = list_kabadiwala_purchases(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
    )

    return Response({
        'success': True,
        'kabadiwala': KabadiwalaPurchaseListSerializer(purchases, many=True).data,
    })


@extend_schema(
    parameters=[PurchaseListQuerySerializer],
    responses={200: OwnerListResponseSerializer},
    tags=['kabadiwala'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def kabadiwala_owner_list(request):
    """GET /api/kabadiwala/owner-list/?company_id=&godown_id=&date="""
    serializer = PurchaseListQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    entries = list_kabadiwala_owner_entries(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
        date=params.get('date'),
    )

    return Response({
        'success': True,
        'entries': OwnerEntrySerializer(entries, many=True).data,
    })
