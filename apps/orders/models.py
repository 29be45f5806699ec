from django.db import models
from django.db.models import Q
import uuid

from apps.marketplace.models import PaymentMethod


class OrderStatus(models.TextChoices):
    CREATED = 'created', 'Created'
    PAID = 'paid', 'Paid'
    FAILED = 'failed', 'Failed'
    CANCELLED = 'cancelled', 'Cancelled'


# Statuses that hold a listing; at most one such order per listing
OPEN_ORDER_STATUSES = [OrderStatus.CREATED, OrderStatus.PAID]


class Order(models.Model):
    """
    Record of one purchase of a listing.
    
    Orders are written once by the purchase flow and never deleted.
    """
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    
    listing = models.ForeignKey(
        'marketplace.Listing',
        on_delete=models.PROTECT,
        related_name='orders'
    )
    buyer = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='orders'
    )
    
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    status = models.CharField(max_length=20, choices=OrderStatus.choices)
    
    # Hosted checkout session, card payments only
    gateway_session_id = models.CharField(max_length=255, null=True, blank=True)
    
    # Listing price at the time of purchase
    amount_cents = models.PositiveIntegerField()
    
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'orders'
        indexes = [
            models.Index(fields=['buyer', 'created_at'], name='orders_buyer_idx'),
            models.Index(fields=['gateway_session_id'], name='orders_gateway_session_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['listing'],
                condition=Q(status__in=OPEN_ORDER_STATUSES),
                name='one_open_order_per_listing',
            ),
        ]
        ordering = ['-created_at']
    
    def __str__(self):
        return f"Order {self.id} ({self.payment_method}, {self.status})"
