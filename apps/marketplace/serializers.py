from rest_framework import serializers
from .models import Listing, ListingCategory, ListingCondition, PaymentMethod
from apps.accounts.serializers import UserPublicSerializer


# =============================================================================
# Input Serializers
# =============================================================================

class ListingFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for listing browsing.

    Query Parameters:
        category (str): Filter by category
        campus (str): Filter by campus name (case-insensitive)
        search (str): Search in title and description
    """

    category = serializers.ChoiceField(choices=ListingCategory.choices, required=False)
    campus = serializers.CharField(max_length=100, required=False)
    search = serializers.CharField(max_length=100, required=False)


class ListingWriteSerializer(serializers.Serializer):
    """Validate input for creating or updating a listing."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)
    price_cents = serializers.IntegerField(min_value=1)
    category = serializers.ChoiceField(choices=ListingCategory.choices, required=False)
    condition = serializers.ChoiceField(choices=ListingCondition.choices, required=False)
    campus = serializers.CharField(max_length=100, required=False, allow_blank=True)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    payment_options = serializers.ListField(
        child=serializers.ChoiceField(choices=PaymentMethod.choices),
        allow_empty=False,
        required=False,
        help_text="Accepted payment methods. Defaults to card and in-person."
    )


# =============================================================================
# Output Serializers
# =============================================================================

class ListingSerializer(serializers.ModelSerializer):
    """Main serializer for listings."""

    owner = UserPublicSerializer(read_only=True)
    payment_options = serializers.ListField(
        source='accepted_payment_methods',
        child=serializers.CharField(),
        read_only=True
    )

    class Meta:
        model = Listing
        fields = [
            'id',
            'title',
            'description',
            'price_cents',
            'category',
            'condition',
            'campus',
            'image_url',
            'payment_options',
            'owner',
            'is_active',
            'sold_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ListingListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    class Meta:
        model = Listing
        fields = [
            'id',
            'title',
            'price_cents',
            'category',
            'condition',
            'campus',
            'image_url',
            'is_active',
            'created_at',
        ]
        read_only_fields = fields
