"""
Listing store.

Read access to purchasable listings and the single atomic transition
from active to sold. The sold flip is a conditional UPDATE so that two
concurrent purchases can never both succeed.
"""

from datetime import datetime
from uuid import UUID

from django.core.exceptions import ValidationError

from apps.marketplace.models import Listing

from .exceptions import ListingNotFoundError, ListingConflictError


def get_active_listing(*, listing_id: UUID) -> Listing:
    """
    Get a listing only if it is currently purchasable.

    Args:
        listing_id: UUID of the listing

    Returns:
        Active Listing instance with its owner loaded

    Raises:
        ListingNotFoundError: If the listing doesn't exist or is sold
    """
    try:
        return (
            Listing.objects
            .select_related('owner')
            .get(id=listing_id, is_active=True)
        )
    except (Listing.DoesNotExist, ValidationError, ValueError):
        raise ListingNotFoundError(f"Listing {listing_id} is not available")


def mark_sold(*, listing_id: UUID, sold_at: datetime) -> Listing:
    """
    Flip a listing from active to sold.

    The update only matches rows that are still active, so the check
    and the write happen in one statement. Call it inside the purchase
    transaction so it rolls back together with the order.

    Args:
        listing_id: UUID of the listing
        sold_at: Sale timestamp to stamp on the listing

    Returns:
        The updated Listing

    Raises:
        ListingConflictError: If the listing was already sold
        ListingNotFoundError: If the listing doesn't exist
    """
    updated = (
        Listing.objects
        .filter(id=listing_id, is_active=True)
        .update(is_active=False, sold_at=sold_at, updated_at=sold_at)
    )

    if updated == 0:
        if Listing.objects.filter(id=listing_id).exists():
            raise ListingConflictError(f"Listing {listing_id} was already sold")
        raise ListingNotFoundError(f"Listing with ID {listing_id} not found")

    return Listing.objects.get(id=listing_id)
