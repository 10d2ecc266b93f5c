from decimal import Decimal
from rest_framework import serializers
from .models import Vendor, ScrapType, VendorRate, VendorKind


# =============================================================================
# Input Serializers
# =============================================================================

class VendorFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for vendor listing.

    Query Parameters:
        company (UUID): Filter by company
        kind (str): feriwala / kabadiwala
        search (str): Name contains
    """

    company = serializers.UUIDField(required=False)
    kind = serializers.ChoiceField(choices=VendorKind.choices, required=False)
    search = serializers.CharField(max_length=100, required=False)


class SetVendorRateInputSerializer(serializers.Serializer):
    """
    Validate input for setting a vendor rate.

    Fields:
        scrap_type_id (UUID): Material the rate applies to
        vendor_rate (Decimal): Money per kg, must be positive
    """

    scrap_type_id = serializers.UUIDField()
    vendor_rate = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )


# =============================================================================
# Output Serializers
# =============================================================================

class ScrapTypeSerializer(serializers.ModelSerializer):

    class Meta:
        model = ScrapType
        fields = ['id', 'material_type', 'description', 'created_at']
        read_only_fields = ['id', 'created_at']


class VendorRateSerializer(serializers.ModelSerializer):
    """Rate card row with the canonical material label."""

    scrap_type_id = serializers.UUIDField(source='scrap_type.id', read_only=True)
    material_type = serializers.CharField(source='scrap_type.material_type', read_only=True)

    class Meta:
        model = VendorRate
        fields = ['id', 'scrap_type_id', 'material_type', 'vendor_rate', 'updated_at']
        read_only_fields = fields


class VendorSerializer(serializers.ModelSerializer):
    """Main serializer for vendors."""

    class Meta:
        model = Vendor
        fields = [
            'id',
            'company',
            'name',
            'phone',
            'kind',
            'is_active',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class VendorDetailSerializer(VendorSerializer):
    """Vendor with its full rate card."""

    rates = VendorRateSerializer(many=True, read_only=True)

    class Meta(VendorSerializer.Meta):
        fields = VendorSerializer.Meta.fields + ['rates']
