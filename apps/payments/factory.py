from django.conf import settings

from .gateway import PaymentGateway, UnconfiguredGateway
from .stripe_gateway import StripeCheckoutGateway


def get_payment_gateway() -> PaymentGateway:
    """Build the gateway for the current settings."""
    secret_key = (getattr(settings, 'STRIPE_SECRET_KEY', '') or '').strip()
    if not secret_key:
        return UnconfiguredGateway()

    currency = getattr(settings, 'PAYMENT_CURRENCY', 'usd') or 'usd'
    return StripeCheckoutGateway(secret_key=secret_key, currency=currency.lower())


def payment_gateway_health() -> dict:
    """Configuration status for the health endpoint. Never calls the provider."""
    gateway = get_payment_gateway()
    missing = [] if gateway.is_configured else ['STRIPE_SECRET_KEY']
    return {
        'status': 'configured' if gateway.is_configured else 'unconfigured',
        'provider': gateway.name,
        'missing': missing,
    }
