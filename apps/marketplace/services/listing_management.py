"""
Listing management service.

Seller-side operations. Owners may edit or delete a listing only while
it is still active; the sale state itself is never editable here.
"""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.marketplace.models import Listing, PaymentMethod, DEFAULT_PAYMENT_OPTIONS

from .exceptions import (
    ListingNotFoundError,
    ListingNotEditableError,
    NotListingOwnerError,
    InvalidPaymentOptionsError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'title',
    'description',
    'price_cents',
    'category',
    'condition',
    'campus',
    'image_url',
    'payment_options',
)


def _normalize_payment_options(options) -> str:
    if isinstance(options, str):
        options = options.split(',')
    methods = []
    for option in options:
        option = option.strip()
        if not option:
            continue
        if option not in PaymentMethod.values:
            raise InvalidPaymentOptionsError(f"Unknown payment method: {option}")
        if option not in methods:
            methods.append(option)
    if not methods:
        raise InvalidPaymentOptionsError("At least one payment method is required")
    return ','.join(methods)


@transaction.atomic
def create_listing(
    *,
    owner: User,
    title: str,
    price_cents: int,
    description: str = '',
    category: Optional[str] = None,
    condition: Optional[str] = None,
    campus: str = '',
    image_url: str = '',
    payment_options=DEFAULT_PAYMENT_OPTIONS,
) -> Listing:
    """
    Create a new active listing owned by the given student.

    Raises:
        InvalidPaymentOptionsError: If payment_options names an unknown method
    """
    fields = {
        'owner': owner,
        'title': title,
        'price_cents': price_cents,
        'description': description,
        'campus': campus,
        'image_url': image_url,
        'payment_options': _normalize_payment_options(payment_options),
    }
    if category:
        fields['category'] = category
    if condition:
        fields['condition'] = condition

    listing = Listing.objects.create(**fields)
    logger.info("Listing %s created by %s", listing.id, owner.id)
    return listing


def _get_owned_active_listing(listing_id: UUID, user: User) -> Listing:
    try:
        listing = Listing.objects.select_for_update().get(id=listing_id)
    except (Listing.DoesNotExist, ValidationError, ValueError):
        raise ListingNotFoundError(f"Listing with ID {listing_id} not found")

    if listing.owner_id != user.id:
        raise NotListingOwnerError("Only the seller can modify this listing")

    if not listing.is_active:
        raise ListingNotEditableError("Sold listings can no longer be changed")

    return listing


@transaction.atomic
def update_listing(*, listing_id: UUID, user: User, **fields) -> Listing:
    """
    Update an active listing's details.

    Only keys in EDITABLE_FIELDS are applied; the row is locked so an
    edit can't interleave with a sale.

    Raises:
        ListingNotFoundError: If listing doesn't exist
        NotListingOwnerError: If user is not the owner
        ListingNotEditableError: If the listing is already sold
    """
    listing = _get_owned_active_listing(listing_id, user)

    changed = []
    for name in EDITABLE_FIELDS:
        if name not in fields:
            continue
        value = fields[name]
        if name == 'payment_options':
            value = _normalize_payment_options(value)
        setattr(listing, name, value)
        changed.append(name)

    if changed:
        listing.save(update_fields=changed + ['updated_at'])

    return listing


@transaction.atomic
def delete_listing(*, listing_id: UUID, user: User) -> None:
    """
    Delete an active listing.

    Raises:
        ListingNotFoundError: If listing doesn't exist
        NotListingOwnerError: If user is not the owner
        ListingNotEditableError: If the listing is already sold
    """
    listing = _get_owned_active_listing(listing_id, user)
    listing.delete()
    logger.info("Listing %s deleted by %s", listing_id, user.id)


def list_active_listings(
    *,
    category: Optional[str] = None,
    campus: Optional[str] = None,
    search: Optional[str] = None,
) -> QuerySet[Listing]:
    """Browse purchasable listings, newest first."""
    queryset = Listing.objects.filter(is_active=True).select_related('owner')

    if category:
        queryset = queryset.filter(category=category)
    if campus:
        queryset = queryset.filter(campus__iexact=campus)
    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) | Q(description__icontains=search)
        )

    return queryset.order_by('-created_at')


def list_listings_for_owner(*, owner: User) -> QuerySet[Listing]:
    """All of a seller's listings, active and sold."""
    return (
        Listing.objects
        .filter(owner=owner)
        .select_related('owner')
        .order_by('-created_at')
    )
