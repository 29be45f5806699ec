"""Payment gateway adapters."""

from .exceptions import (
    PaymentGatewayError,
    GatewayUnavailableError,
    GatewayError,
)
from .gateway import (
    CheckoutSession,
    SessionInfo,
    PaymentGateway,
    UnconfiguredGateway,
)
from .stripe_gateway import StripeCheckoutGateway
from .factory import get_payment_gateway, payment_gateway_health

__all__ = [
    # Exceptions
    'PaymentGatewayError',
    'GatewayUnavailableError',
    'GatewayError',
    # Gateways
    'CheckoutSession',
    'SessionInfo',
    'PaymentGateway',
    'UnconfiguredGateway',
    'StripeCheckoutGateway',
    'get_payment_gateway',
    'payment_gateway_health',
]
