from decimal import Decimal
from rest_framework import serializers

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from apps.companies.serializers import ScopeSerializer, DatedScopeSerializer
from apps.ledger.models import PaymentMode
from .models import MaalOutSale, MaalOutPayment


# =============================================================================
# Input Serializers
# =============================================================================

class AddSaleInputSerializer(ScopeSerializer):
    """
    Validate input for recording a sale.

    Fields:
        firm_name (str): Buying firm
        bill_to (str): Optional billing name
        date (date): Sale date
        weight (Decimal): Kilograms, must be positive
        rate (Decimal): Money per kg, must be positive
        gst, freight (Decimal): Optional, default 0
        vehicle_no (str): Optional
        payment_type (str): Defaults to credit
    """

    firm_name = serializers.CharField(max_length=200)
    bill_to = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    date = serializers.DateField()
    weight = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=Decimal('0.001'))
    rate = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    gst = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        min_value=Decimal('0'),
        required=False,
        default=Decimal('0')
    )
    freight = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        min_value=Decimal('0'),
        required=False,
        default=Decimal('0')
    )
    vehicle_no = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    payment_type = serializers.ChoiceField(choices=PaymentMode.choices, default=PaymentMode.CREDIT)


class AddSalePaymentInputSerializer(ScopeSerializer):
    firm_name = serializers.CharField(max_length=200)
    amount = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        min_value=Decimal('0.00001')
    )
    date = serializers.DateField()


class SalesQuerySerializer(DatedScopeSerializer):
    pass


class OutstandingQuerySerializer(ScopeSerializer):
    firm_name = serializers.CharField(max_length=200)


# =============================================================================
# Output Serializers
# =============================================================================

class MaalOutSaleSerializer(serializers.ModelSerializer):

    bill_total = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        read_only=True
    )

    class Meta:
        model = MaalOutSale
        fields = [
            'id',
            'company',
            'godown',
            'firm_name',
            'bill_to',
            'date',
            'weight',
            'rate',
            'amount',
            'gst',
            'freight',
            'bill_total',
            'vehicle_no',
            'payment_type',
            'created_at',
        ]
        read_only_fields = fields


class MaalOutPaymentSerializer(serializers.ModelSerializer):

    class Meta:
        model = MaalOutPayment
        fields = ['id', 'company', 'godown', 'firm_name', 'amount', 'date', 'created_at']
        read_only_fields = fields


class FirmOutstandingSerializer(serializers.Serializer):
    firm_name = serializers.CharField()
    billed = serializers.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    received = serializers.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    outstanding = serializers.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
