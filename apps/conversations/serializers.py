from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from .models import Conversation, Message


class MessageCreateSerializer(serializers.Serializer):
    """Validate a new message."""

    content = serializers.CharField(max_length=2000)


class MessageSerializer(serializers.ModelSerializer):

    sender = UserPublicSerializer(read_only=True)

    class Meta:
        model = Message
        fields = ['id', 'sender', 'content', 'sequence', 'created_at']
        read_only_fields = fields


class ConversationSerializer(serializers.ModelSerializer):
    """Conversation summary for the inbox."""

    buyer = UserPublicSerializer(read_only=True)
    seller = UserPublicSerializer(read_only=True)
    order_id = serializers.UUIDField(read_only=True)
    listing_id = serializers.UUIDField(source='order.listing_id', read_only=True)
    listing_title = serializers.CharField(source='order.listing.title', read_only=True)

    class Meta:
        model = Conversation
        fields = [
            'id',
            'order_id',
            'listing_id',
            'listing_title',
            'buyer',
            'seller',
            'created_at',
        ]
        read_only_fields = fields
