"""
Marketplace app services layer.

Services contain business logic and orchestrate operations across models.
The purchase path only ever touches listings through listing_store.
"""

from .exceptions import (
    MarketplaceServiceError,
    ListingNotFoundError,
    ListingConflictError,
    ListingNotEditableError,
    NotListingOwnerError,
    InvalidPaymentOptionsError,
)

from .listing_store import (
    get_active_listing,
    mark_sold,
)

from .listing_management import (
    create_listing,
    update_listing,
    delete_listing,
    list_active_listings,
    list_listings_for_owner,
)


__all__ = [
    # Exceptions
    'MarketplaceServiceError',
    'ListingNotFoundError',
    'ListingConflictError',
    'ListingNotEditableError',
    'NotListingOwnerError',
    'InvalidPaymentOptionsError',

    # Listing store
    'get_active_listing',
    'mark_sold',

    # Listing management
    'create_listing',
    'update_listing',
    'delete_listing',
    'list_active_listings',
    'list_listings_for_owner',
]
