from decimal import Decimal
from rest_framework import serializers

from apps.common.money import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from apps.companies.serializers import ScopeSerializer, DatedScopeSerializer
from .models import Account, AccountTransaction, Expense, PaymentMode


# =============================================================================
# Input Serializers
# =============================================================================

class RecordExpenseInputSerializer(ScopeSerializer):
    """
    Validate input for recording an expense.

    Fields:
        date (date): Day of the expense
        category (str): e.g. 'Diesel', 'Tea', 'Electricity'
        description (str): Optional free text
        paid_to (str): Optional receiver
        payment_mode (str): cash / upi / bank / cheque / credit
        amount (Decimal): Must be positive
        account_id (UUID): Optional funding account to debit
    """

    date = serializers.DateField()
    category = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    paid_to = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices, default=PaymentMode.CASH)
    amount = serializers.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        min_value=Decimal('0.00001')
    )
    account_id = serializers.UUIDField(required=False, allow_null=True)

    def validate_category(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Category cannot be blank")
        return value


class ExpenseListQuerySerializer(DatedScopeSerializer):
    pass


class ExpenseSummaryQuerySerializer(ScopeSerializer):
    """Scope plus an inclusive date range."""

    start_date = serializers.DateField()
    end_date = serializers.DateField()

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs['start_date'] > attrs['end_date']:
            raise serializers.ValidationError({
                'end_date': 'end_date must be on or after start_date'
            })
        return attrs


class AccountFilterSerializer(serializers.Serializer):
    company = serializers.UUIDField(required=False)
    godown = serializers.UUIDField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class AccountSerializer(serializers.ModelSerializer):
    """Funding account. The balance only changes through ledger postings."""

    class Meta:
        model = Account
        fields = ['id', 'company', 'godown', 'name', 'balance', 'created_at', 'updated_at']
        read_only_fields = ['id', 'balance', 'created_at', 'updated_at']

    def validate(self, attrs):
        attrs = super().validate(attrs)
        company = attrs.get('company', getattr(self.instance, 'company', None))
        godown = attrs.get('godown', getattr(self.instance, 'godown', None))
        if company and godown and godown.company_id != company.id:
            raise serializers.ValidationError({
                'godown': 'Godown not found for this company'
            })

        if self.instance is not None and self.instance.transactions.exists():
            moved = [
                field for field in ('company', 'godown')
                if field in attrs and attrs[field].pk != getattr(self.instance, f'{field}_id')
            ]
            if moved:
                raise serializers.ValidationError({
                    field: 'Cannot move an account that has ledger entries'
                    for field in moved
                })
        return attrs

    def update(self, instance, validated_data):
        # Never write balance back: postings move it with F() in their own UPDATE.
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save(update_fields=[*validated_data, 'updated_at'])
        instance.refresh_from_db(fields=['balance'])
        return instance


class AccountTransactionSerializer(serializers.ModelSerializer):

    class Meta:
        model = AccountTransaction
        fields = [
            'id',
            'account',
            'type',
            'amount',
            'category',
            'reference',
            'metadata',
            'created_at',
        ]
        read_only_fields = fields


class ExpenseSerializer(serializers.ModelSerializer):
    """Expense with the funding account name and who entered it."""

    account_name = serializers.CharField(source='account.name', read_only=True, default=None)
    entered_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Expense
        fields = [
            'id',
            'date',
            'category',
            'description',
            'paid_to',
            'payment_mode',
            'amount',
            'account',
            'account_name',
            'ledger_entry',
            'entered_by_name',
            'created_at',
        ]
        read_only_fields = fields

    def get_entered_by_name(self, obj):
        return obj.entered_by.get_display_name() if obj.entered_by else None


class CategoryTotalSerializer(serializers.Serializer):
    category = serializers.CharField()
    total_amount = serializers.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    count = serializers.IntegerField()


class ExpenseSummarySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total_amount = serializers.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    count = serializers.IntegerField()
    by_category = CategoryTotalSerializer(many=True)
