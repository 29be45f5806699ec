"""
Stripe Checkout adapter.

Amounts are passed to Stripe in minor units unchanged. The API key is
sent per request rather than set on the module, so several gateways
with different keys can coexist in one process.
"""

import logging
from typing import Dict, Optional

import stripe

from .exceptions import GatewayError, GatewayUnavailableError
from .gateway import CheckoutSession, PaymentGateway, SessionInfo

logger = logging.getLogger(__name__)


class StripeCheckoutGateway(PaymentGateway):
    name = 'stripe'

    def __init__(self, *, secret_key: str, currency: str = 'usd'):
        self.secret_key = secret_key
        self.currency = currency

    @property
    def is_configured(self) -> bool:
        return bool(self.secret_key)

    def create_checkout_session(
        self,
        *,
        amount_cents: int,
        title: str,
        success_url: str,
        cancel_url: str,
        description: str = '',
        metadata: Optional[Dict[str, str]] = None,
    ) -> CheckoutSession:
        if not self.is_configured:
            raise GatewayUnavailableError("Card payments are not configured")

        product_data = {'name': title}
        # Stripe rejects an empty description
        if description:
            product_data['description'] = description

        try:
            session = stripe.checkout.Session.create(
                api_key=self.secret_key,
                mode='payment',
                payment_method_types=['card'],
                line_items=[
                    {
                        'price_data': {
                            'currency': self.currency,
                            'unit_amount': amount_cents,
                            'product_data': product_data,
                        },
                        'quantity': 1,
                    }
                ],
                success_url=success_url,
                cancel_url=cancel_url,
                metadata=metadata or {},
            )
        except stripe.APIConnectionError as e:
            logger.warning("Stripe unreachable while creating checkout: %s", e)
            raise GatewayUnavailableError("Payment provider is unreachable") from e
        except stripe.StripeError as e:
            logger.warning("Stripe rejected checkout session: %s", e)
            raise GatewayError("Payment provider rejected the checkout") from e

        logger.info("Created Stripe checkout session %s", session.id)
        return CheckoutSession(session_id=session.id, url=session.url)

    def retrieve_session(self, session_id: str) -> SessionInfo:
        if not self.is_configured:
            raise GatewayUnavailableError("Card payments are not configured")

        try:
            session = stripe.checkout.Session.retrieve(session_id, api_key=self.secret_key)
        except stripe.APIConnectionError as e:
            logger.warning("Stripe unreachable while retrieving %s: %s", session_id, e)
            raise GatewayUnavailableError("Payment provider is unreachable") from e
        except stripe.StripeError as e:
            logger.warning("Stripe failed to retrieve %s: %s", session_id, e)
            raise GatewayError("Payment provider could not find the checkout") from e

        metadata = dict(session.metadata or {})
        return SessionInfo(
            session_id=session.id,
            url=session.url,
            status=session.status,
            payment_status=session.payment_status,
            metadata=metadata,
        )
