from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    AddLabourInputSerializer,
    LabourListQuerySerializer,
    MarkAttendanceInputSerializer,
    AttendanceQuerySerializer,
    WageSummaryQuerySerializer,
    LabourSerializer,
    AttendanceSerializer,
    WageSummaryRowSerializer,
)
from .services import (
    list_labour,
    add_labour,
    mark_attendance,
    attendance_by_date,
    wage_summary,
    LabourNotFoundError,
    InvalidAttendanceError,
)


# Response serializers for API documentation
class LabourListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    labour = LabourSerializer(many=True)


class AttendanceListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    attendance = AttendanceSerializer(many=True)


class WageSummaryResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    summary = WageSummaryRowSerializer(many=True)


@extend_schema(
    parameters=[LabourListQuerySerializer],
    responses={200: LabourListResponseSerializer},
    tags=['labour'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def labour_all(request):
    """GET /api/labour/all/?company_id=&godown_id="""
    serializer = LabourListQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)

    labour = list_labour(**serializer.validated_data)
    return Response({
        'success': True,
        'labour': LabourSerializer(labour, many=True).data,
    })


@extend_schema(
    request=AddLabourInputSerializer,
    responses={201: LabourSerializer},
    tags=['labour'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def labour_add(request):
    """POST /api/labour/"""
    serializer = AddLabourInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        labour = add_labour(**serializer.validated_data)
    except InvalidAttendanceError as e:
        raise ValidationError(str(e))

    return Response(LabourSerializer(labour).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=MarkAttendanceInputSerializer,
    responses={200: AttendanceSerializer},
    tags=['labour'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def attendance_mark(request):
    """POST /api/labour/attendance/mark/"""
    serializer = MarkAttendanceInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        attendance = mark_attendance(**serializer.validated_data)
    except LabourNotFoundError as e:
        raise NotFound(str(e))
    except InvalidAttendanceError as e:
        raise ValidationError(str(e))

    return Response({
        'success': True,
        'attendance': AttendanceSerializer(attendance).data,
    })


@extend_schema(
    parameters=[AttendanceQuerySerializer],
    responses={200: AttendanceListResponseSerializer},
    tags=['labour'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def attendance_for_date(request):
    """GET /api/attendance/by-date/?company_id=&godown_id=&date="""
    serializer = AttendanceQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)

    attendance = attendance_by_date(**serializer.validated_data)
    return Response({
        'success': True,
        'attendance': AttendanceSerializer(attendance, many=True).data,
    })


@extend_schema(
    parameters=[WageSummaryQuerySerializer],
    responses={200: WageSummaryResponseSerializer},
    tags=['labour'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def labour_wage_summary(request):
    """GET /api/labour/wage-summary/?company_id=&godown_id=&start_date=&end_date="""
    serializer = WageSummaryQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)

    summary = wage_summary(**serializer.validated_data)
    return Response({
        'success': True,
        'summary': WageSummaryRowSerializer(summary, many=True).data,
    })
