from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator
import uuid


class PaymentMethod(models.TextChoices):
    CARD = 'card', 'Card'
    IN_PERSON = 'in_person', 'In person'


class ListingCategory(models.TextChoices):
    TEXTBOOKS = 'textbooks', 'Textbooks'
    DORM = 'dorm', 'Dorm & Apartment'
    ELECTRONICS = 'electronics', 'Electronics'
    FURNITURE = 'furniture', 'Furniture'
    CLOTHING = 'clothing', 'Clothing'
    OTHER = 'other', 'Other'


class ListingCondition(models.TextChoices):
    NEW = 'new', 'New'
    LIKE_NEW = 'like_new', 'Like New'
    GOOD = 'good', 'Good'
    FAIR = 'fair', 'Fair'


DEFAULT_PAYMENT_OPTIONS = f'{PaymentMethod.CARD.value},{PaymentMethod.IN_PERSON.value}'


class Listing(models.Model):
    """Marketplace item offered by a student."""
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    price_cents = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    category = models.CharField(
        max_length=20,
        choices=ListingCategory.choices,
        default=ListingCategory.OTHER
    )
    condition = models.CharField(
        max_length=20,
        choices=ListingCondition.choices,
        default=ListingCondition.GOOD
    )
    campus = models.CharField(max_length=100, blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    
    # Comma separated PaymentMethod values the seller accepts
    payment_options = models.CharField(max_length=50, default=DEFAULT_PAYMENT_OPTIONS)
    
    # Seller of record. Nulled only if the account is removed; such a
    # listing can no longer be purchased.
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='listings'
    )
    
    # Sale state
    is_active = models.BooleanField(default=True)
    sold_at = models.DateTimeField(null=True, blank=True)
    
    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'listings'
        indexes = [
            models.Index(fields=['is_active', 'created_at'], name='listings_active_idx'),
            models.Index(fields=['owner', 'created_at'], name='listings_owner_idx'),
            models.Index(fields=['category', 'is_active'], name='listings_category_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(is_active=True, sold_at__isnull=True) |
                    Q(is_active=False, sold_at__isnull=False)
                ),
                name='listing_sold_at_matches_active',
            ),
        ]
        ordering = ['-created_at']
    
    def __str__(self):
        state = 'active' if self.is_active else 'sold'
        return f"{self.title} ({self.price_cents / 100:.2f}, {state})"
    
    @property
    def accepted_payment_methods(self):
        return [m.strip() for m in self.payment_options.split(',') if m.strip()]
    
    def accepts(self, payment_method):
        return payment_method in self.accepted_payment_methods
