from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    AddSaleInputSerializer,
    AddSalePaymentInputSerializer,
    SalesQuerySerializer,
    OutstandingQuerySerializer,
    MaalOutSaleSerializer,
    MaalOutPaymentSerializer,
    FirmOutstandingSerializer,
)
from .services import (
    add_sale,
    list_sales,
    add_sale_payment,
    list_sale_payments,
    firm_outstanding,
    InvalidSaleError,
)


# Response serializers for API documentation
class SaleResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    sale = MaalOutSaleSerializer()


class SaleListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    sales = MaalOutSaleSerializer(many=True)


class PaymentResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    payment = MaalOutPaymentSerializer()


class PaymentListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    payments = MaalOutPaymentSerializer(many=True)


@extend_schema(
    request=AddSaleInputSerializer,
    responses={201: SaleResponseSerializer},
    tags=['maal-out'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def sale_add(request):
    """POST /api/maal-out/add-sale/"""
    serializer = AddSaleInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        sale = add_sale(**serializer.validated_data)
    except InvalidSaleError as e:
        raise ValidationError(str(e))

    return Response({
        'success': True,
        'sale': MaalOutSaleSerializer(sale).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[SalesQuerySerializer],
    responses={200: SaleListResponseSerializer},
    tags=['maal-out'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def sale_list(request):
    """GET /api/maal-out/list-sales/?company_id=&godown_id=&date="""
    serializer = SalesQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    sales = list_sales(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
        date=params.get('date'),
    )
    return Response({
        'success': True,
        'sales': MaalOutSaleSerializer(sales, many=True).data,
    })


@extend_schema(
    request=AddSalePaymentInputSerializer,
    responses={201: PaymentResponseSerializer},
    tags=['maal-out'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def payment_add(request):
    """POST /api/maal-out/add-payment/"""
    serializer = AddSalePaymentInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        payment = add_sale_payment(**serializer.validated_data)
    except InvalidSaleError as e:
        raise ValidationError(str(e))

    return Response({
        'success': True,
        'payment': MaalOutPaymentSerializer(payment).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[SalesQuerySerializer],
    responses={200: PaymentListResponseSerializer},
    tags=['maal-out'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def payment_list(request):
    """GET /api/maal-out/list-payments/?company_id=&godown_id=&date="""
    serializer = SalesQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    payments = list_sale_payments(
        company_id=params['company_id'],
        godown_id=params['godown_id'],
        date=params.get('date'),
    )
    return Response({
        'success': True,
        'payments': MaalOutPaymentSerializer(payments, many=True).data,
    })


@extend_schema(
    parameters=[OutstandingQuerySerializer],
    responses={200: FirmOutstandingSerializer},
    tags=['maal-out'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def outstanding(request):
    """GET /api/maal-out/outstanding/?company_id=&godown_id=&firm_name="""
    serializer = OutstandingQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)

    summary = firm_outstanding(**serializer.validated_data)
    return Response(FirmOutstandingSerializer(summary).data)
