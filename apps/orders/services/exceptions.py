"""
Domain-specific exceptions for orders app.

Purchase errors carry a machine readable code, whether the attempt was
rejected (bad request, no state change) or failed (something broke),
and the stage the attempt reached.
"""


class OrdersServiceError(Exception):
    """Base exception for all orders service errors."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Raised when an order does not exist or the user can't see it."""
    pass


class PurchaseError(OrdersServiceError):
    """Base exception for a purchase attempt that did not complete."""

    code = 'purchase_error'
    outcome = 'failed'
    # Shown to the client instead of the internal message when set
    public_message = None

    def __init__(self, message, *, stage=None):
        super().__init__(message)
        self.stage = stage

    @property
    def client_message(self):
        return self.public_message or str(self)


class InvalidPurchaseInputError(PurchaseError):
    """Raised for an unknown or unaccepted payment method."""
    code = 'invalid_input'
    outcome = 'rejected'


class ListingNotAvailableError(PurchaseError):
    """Raised when the listing doesn't exist or is no longer active."""
    code = 'not_available'
    outcome = 'rejected'


class SelfPurchaseError(PurchaseError):
    """Raised when a seller tries to buy their own listing."""
    code = 'self_purchase'
    outcome = 'rejected'


class PurchaseIntegrityError(PurchaseError):
    """Raised when stored data breaks an invariant, e.g. an ownerless listing."""
    code = 'data_integrity'
    outcome = 'rejected'
    public_message = 'This listing cannot be purchased right now.'


class AlreadySoldError(PurchaseError):
    """Raised when another purchase sold the listing first."""
    code = 'already_sold'
    outcome = 'failed'


class PaymentUnavailableError(PurchaseError):
    """Raised when the payment gateway is unconfigured or unreachable."""
    code = 'gateway_unavailable'
    outcome = 'failed'
    public_message = 'Card payments are currently unavailable.'


class PaymentFailedError(PurchaseError):
    """Raised when the payment gateway rejects the checkout."""
    code = 'gateway_error'
    outcome = 'failed'
    public_message = 'Could not start the card payment. Please try again.'


class PurchasePersistenceError(PurchaseError):
    """Raised when the database fails while recording the purchase."""
    code = 'persistence_error'
    outcome = 'failed'
    public_message = 'Could not complete the purchase. Please try again.'
