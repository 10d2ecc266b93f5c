from decimal import Decimal
from rest_framework import serializers

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from apps.companies.serializers import ScopeSerializer, DatedScopeSerializer
from apps.ledger.models import PaymentMode
from .models import PurchaseRecord, PurchaseLine, PurchasePayment
from .services import LineItem, PurchaseRequest


# =============================================================================
# Input Serializers
# =============================================================================

class ScrapLineInputSerializer(serializers.Serializer):
    """
    One scrap line of a purchase.

    Fields:
        scrap_type_id (UUID): Material bought
        weight (Decimal): Kilograms, up to 3 decimal places, must be positive
    """

    scrap_type_id = serializers.UUIDField()
    weight = serializers.DecimalField(
        max_digits=12,
        decimal_places=3,
        min_value=Decimal('0.001')
    )


class PurchaseInputSerializer(ScopeSerializer):
    """Fields shared by both purchase channels."""

    vendor_id = serializers.UUIDField()
    scraps = ScrapLineInputSerializer(many=True, allow_empty=False)
    date = serializers.DateField(required=False, allow_null=True)

    def to_request(self) -> PurchaseRequest:
        """Build the workflow request from validated data."""
        data = self.validated_data
        return PurchaseRequest(
            company_id=data['company_id'],
            godown_id=data['godown_id'],
            vendor_id=data['vendor_id'],
            lines=[
                LineItem(scrap_type_id=line['scrap_type_id'], weight=line['weight'])
                for line in data['scraps']
            ],
            account_id=data.get('account_id'),
            payment_amount=data.get('payment_amount'),
            payment_mode=data.get('payment_mode'),
            note=data.get('note', ''),
            date=data.get('date'),
        )


class FeriwalaPurchaseInputSerializer(PurchaseInputSerializer):
    """
    Validate input for a feriwala purchase (paid in full).

    Fields:
        company_id, godown_id (UUID): Scope
        vendor_id (UUID): Feriwala
        scraps (list): [{scrap_type_id, weight}], at least one
        account_id (UUID): Funding account paying the full amount
        date (date): Optional, defaults to today
    """

    account_id = serializers.UUIDField(
        error_messages={'required': 'Account ID is required', 'null': 'Account ID is required'}
    )


class KabadiwalaPurchaseInputSerializer(PurchaseInputSerializer):
    """
    Validate input for a kabadiwala purchase (paid in full, in part or later).

    Fields:
        company_id, godown_id (UUID): Scope
        vendor_id (UUID): Kabadiwala
        scraps (list): [{scrap_type_id, weight}], at least one
        payment_amount (Decimal): Paid now, defaults to 0
        payment_mode (str): Defaults to cash
        account_id (UUID): Optional funding account for the payment
        note (str): Optional
        date (date): Optional, defaults to today
    """

    payment_amount = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        min_value=Decimal('0'),
        required=False,
        default=Decimal('0')
    )
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices, required=False)
    account_id = serializers.UUIDField(required=False, allow_null=True)
    note = serializers.CharField(required=False, allow_blank=True, default='')


class PurchaseListQuerySerializer(DatedScopeSerializer):
    """Query parameters for purchase lists: company_id, godown_id, optional date."""
    pass


class KabadiwalaListQuerySerializer(ScopeSerializer):
    pass


# =============================================================================
# Output Serializers
# =============================================================================

class PurchaseReceiptSerializer(serializers.Serializer):
    """Response for a committed purchase."""

    success = serializers.BooleanField(default=True)
    purchase_id = serializers.UUIDField()
    total_amount = serializers.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    vendor = serializers.CharField(source='vendor_name')
    payment_status = serializers.CharField(allow_null=True)
    message = serializers.CharField()


class PurchaseLineSerializer(serializers.ModelSerializer):

    material_name = serializers.CharField(source='material', read_only=True)

    class Meta:
        model = PurchaseLine
        fields = ['id', 'scrap_type', 'material_name', 'weight', 'rate', 'amount']
        read_only_fields = fields


class PurchasePaymentSerializer(serializers.ModelSerializer):

    class Meta:
        model = PurchasePayment
        fields = ['id', 'amount', 'mode', 'note', 'date', 'created_at']
        read_only_fields = fields


class FeriwalaPurchaseSerializer(serializers.ModelSerializer):
    """Feriwala purchase with its scrap lines."""

    company_id = serializers.UUIDField(read_only=True)
    godown_id = serializers.UUIDField(read_only=True)
    vendor_id = serializers.UUIDField(read_only=True)
    scraps = PurchaseLineSerializer(source='lines', many=True, read_only=True)

    class Meta:
        model = PurchaseRecord
        fields = [
            'id',
            'date',
            'company_id',
            'godown_id',
            'vendor_id',
            'vendor_name',
            'total_amount',
            'scraps',
        ]
        read_only_fields = fields


class KabadiwalaPurchaseListSerializer(serializers.ModelSerializer):
    """Kabadiwala purchase with line and payment aggregates."""

    vendor_id = serializers.UUIDField(read_only=True)
    items_count = serializers.IntegerField(read_only=True)
    total_weight = serializers.DecimalField(max_digits=15, decimal_places=3, read_only=True)
    scrap_total = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        read_only=True
    )
    total_paid = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        read_only=True
    )

    class Meta:
        model = PurchaseRecord
        fields = [
            'id',
            'date',
            'vendor_id',
            'vendor_name',
            'total_amount',
            'payment_status',
            'payment_mode',
            'items_count',
            'total_weight',
            'scrap_total',
            'total_paid',
            'created_at',
        ]
        read_only_fields = fields


class OwnerEntrySerializer(serializers.ModelSerializer):
    """Flat owner row: one purchased material of a kabadiwala purchase."""

    date = serializers.DateField(source='purchase.date', read_only=True)
    kabadi_name = serializers.CharField(source='purchase.vendor_name', read_only=True)
    payment_status = serializers.CharField(source='purchase.payment_status', read_only=True)

    class Meta:
        model = PurchaseLine
        fields = ['date', 'kabadi_name', 'material', 'weight', 'rate', 'amount', 'payment_status']
        read_only_fields = fields
