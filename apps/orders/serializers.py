from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from apps.marketplace.models import PaymentMethod
from .models import Order


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseInputSerializer(serializers.Serializer):
    """Validate a purchase request."""

    listingId = serializers.UUIDField()
    paymentMethod = serializers.ChoiceField(choices=PaymentMethod.choices)


class OrderFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for order listing.

    Query Parameters:
        role (str): 'buyer' or 'seller'; both sides when omitted
    """

    role = serializers.ChoiceField(choices=['buyer', 'seller'], required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class PurchaseResultSerializer(serializers.Serializer):
    checkoutUrl = serializers.URLField(required=False)
    orderId = serializers.UUIDField()
    conversationId = serializers.UUIDField()


class PurchaseErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()
    outcome = serializers.CharField()
    stage = serializers.CharField(allow_null=True)


class OrderListingSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    title = serializers.CharField()
    image_url = serializers.CharField()
    owner = UserPublicSerializer(allow_null=True)


class OrderSerializer(serializers.ModelSerializer):
    """Order as seen by its buyer or seller."""

    listing = OrderListingSerializer(read_only=True)
    buyer = UserPublicSerializer(read_only=True)
    conversation_id = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id',
            'listing',
            'buyer',
            'payment_method',
            'status',
            'amount_cents',
            'conversation_id',
            'created_at',
        ]
        read_only_fields = fields

    def get_conversation_id(self, obj):
        conversation = getattr(obj, 'conversation', None)
        return str(conversation.id) if conversation else None
