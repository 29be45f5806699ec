from django.db import models
from django.db.models import F, Q
import uuid


class Conversation(models.Model):
    """Buyer and seller thread opened by a purchase."""
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    
    order = models.OneToOneField(
        'orders.Order',
        on_delete=models.PROTECT,
        related_name='conversation'
    )
    buyer = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='buyer_conversations'
    )
    seller = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='seller_conversations'
    )
    
    created_at = models.DateTimeField(auto_now_add=True)
    
    class Meta:
        db_table = 'conversations'
        indexes = [
            models.Index(fields=['buyer', 'created_at'], name='conversations_buyer_idx'),
            models.Index(fields=['seller', 'created_at'], name='conversations_seller_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~Q(buyer=F('seller')),
                name='conversation_buyer_not_seller',
            ),
        ]
        ordering = ['-created_at']
    
    def __str__(self):
        return f"Conversation {self.id} for order {self.order_id}"
    
    def is_participant(self, user):
        return user.id in (self.buyer_id, self.seller_id)


class Message(models.Model):
    """Append-only message in a conversation."""
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    
    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    sender = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='messages'
    )
    content = models.TextField()
    
    # Position within the conversation, breaks created_at ties
    sequence = models.PositiveIntegerField()
    
    created_at = models.DateTimeField(auto_now_add=True)
    
    class Meta:
        db_table = 'conversation_messages'
        constraints = [
            models.UniqueConstraint(
                fields=['conversation', 'sequence'],
                name='message_sequence_unique',
            ),
        ]
        ordering = ['created_at', 'sequence']
    
    def __str__(self):
        return f"Message {self.sequence} in {self.conversation_id}"
