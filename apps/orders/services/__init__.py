"""
Orders app services layer.

The ledger records orders; the purchase orchestrator is the only
writer.
"""

from .exceptions import (
    OrdersServiceError,
    OrderNotFoundError,
    PurchaseError,
    InvalidPurchaseInputError,
    ListingNotAvailableError,
    SelfPurchaseError,
    PurchaseIntegrityError,
    AlreadySoldError,
    PaymentUnavailableError,
    PaymentFailedError,
    PurchasePersistenceError,
)
from .ledger import (
    create_order,
    list_orders_for_buyer,
    list_orders_for_seller,
    list_orders_for_user,
    get_order_for_participant,
)
from .purchase import (
    PurchaseStage,
    PurchaseResult,
    PurchaseOrchestrator,
    checkout_redirect_urls,
)

__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderNotFoundError',
    'PurchaseError',
    'InvalidPurchaseInputError',
    'ListingNotAvailableError',
    'SelfPurchaseError',
    'PurchaseIntegrityError',
    'AlreadySoldError',
    'PaymentUnavailableError',
    'PaymentFailedError',
    'PurchasePersistenceError',
    # Ledger
    'create_order',
    'list_orders_for_buyer',
    'list_orders_for_seller',
    'list_orders_for_user',
    'get_order_for_participant',
    # Purchase
    'PurchaseStage',
    'PurchaseResult',
    'PurchaseOrchestrator',
    'checkout_redirect_urls',
]
