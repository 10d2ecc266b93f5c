from decimal import Decimal
from rest_framework import serializers

from apps.companies.serializers import ScopeSerializer
from .models import Labour, Attendance, AttendanceStatus


# =============================================================================
# Input Serializers
# =============================================================================

class AddLabourInputSerializer(ScopeSerializer):
    name = serializers.CharField(max_length=200)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    daily_wage = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))


class LabourListQuerySerializer(ScopeSerializer):
    active_only = serializers.BooleanField(required=False, default=False)


class MarkAttendanceInputSerializer(ScopeSerializer):
    """
    Validate input for marking attendance.

    Fields:
        labour_id (UUID): Worker of the godown
        date (date): Day being marked
        status (str): Present / Absent
    """

    labour_id = serializers.UUIDField()
    date = serializers.DateField()
    status = serializers.ChoiceField(choices=AttendanceStatus.choices)


class AttendanceQuerySerializer(ScopeSerializer):
    date = serializers.DateField()


class WageSummaryQuerySerializer(ScopeSerializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs['start_date'] > attrs['end_date']:
            raise serializers.ValidationError({
                'end_date': 'end_date must be on or after start_date'
            })
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class LabourSerializer(serializers.ModelSerializer):

    class Meta:
        model = Labour
        fields = ['id', 'company', 'godown', 'name', 'phone', 'daily_wage', 'is_active', 'created_at']
        read_only_fields = fields


class AttendanceSerializer(serializers.ModelSerializer):

    labour_id = serializers.UUIDField(read_only=True)
    labour_name = serializers.CharField(source='labour.name', read_only=True)

    class Meta:
        model = Attendance
        fields = ['id', 'labour_id', 'labour_name', 'date', 'status', 'updated_at']
        read_only_fields = fields


class WageSummaryRowSerializer(serializers.Serializer):
    labour_id = serializers.UUIDField()
    name = serializers.CharField()
    daily_wage = serializers.DecimalField(max_digits=10, decimal_places=2)
    present_days = serializers.IntegerField()
    absent_days = serializers.IntegerField()
    wages = serializers.DecimalField(max_digits=14, decimal_places=2)
