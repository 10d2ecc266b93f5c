from rest_framework import serializers
from .models import Company, Godown


class ScopeSerializer(serializers.Serializer):
    """
    Validate the (company_id, godown_id) pair every book entry is scoped to.

    Fields:
        company_id (UUID): Owning company
        godown_id (UUID): Godown of that company
    """

    company_id = serializers.UUIDField()
    godown_id = serializers.UUIDField()

    def validate(self, attrs):
        """Godown must exist and belong to the company."""
        attrs = super().validate(attrs)
        if not Godown.objects.filter(
            id=attrs['godown_id'],
            company_id=attrs['company_id'],
        ).exists():
            raise serializers.ValidationError({
                'godown_id': 'Godown not found for this company'
            })
        return attrs


class DatedScopeSerializer(ScopeSerializer):
    """Scope plus an optional ``date`` filter."""

    date = serializers.DateField(required=False, allow_null=True)


class GodownFilterSerializer(serializers.Serializer):
    company = serializers.UUIDField(required=False)


class CompanySerializer(serializers.ModelSerializer):

    class Meta:
        model = Company
        fields = ['id', 'name', 'gstin', 'created_at']
        read_only_fields = ['id', 'created_at']


class GodownSerializer(serializers.ModelSerializer):

    class Meta:
        model = Godown
        fields = ['id', 'company', 'name', 'address', 'created_at']
        read_only_fields = ['id', 'created_at']
