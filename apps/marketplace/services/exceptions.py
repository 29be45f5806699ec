"""
Domain-specific exceptions for marketplace app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class MarketplaceServiceError(Exception):
    """Base exception for all marketplace service errors."""
    pass


class ListingNotFoundError(MarketplaceServiceError):
    """Raised when a listing does not exist or is no longer purchasable."""
    pass


class ListingConflictError(MarketplaceServiceError):
    """Raised when a listing was already sold by a concurrent purchase."""
    pass


class ListingNotEditableError(MarketplaceServiceError):
    """Raised when the owner tries to edit or delete a sold listing."""
    pass


class NotListingOwnerError(MarketplaceServiceError):
    """Raised when a user other than the owner modifies a listing."""
    pass


class InvalidPaymentOptionsError(MarketplaceServiceError):
    """Raised when a listing names an unknown payment method."""
    pass
