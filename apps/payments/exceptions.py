"""Exceptions raised by payment gateway adapters."""


class PaymentGatewayError(Exception):
    """Base exception for payment gateway failures."""
    pass


class GatewayUnavailableError(PaymentGatewayError):
    """Gateway is not configured or could not be reached."""
    pass


class GatewayError(PaymentGatewayError):
    """Gateway was reached but rejected or failed the request."""
    pass
