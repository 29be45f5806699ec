"""
Payment gateway interface.

A gateway creates hosted checkout sessions and looks them up again.
The purchase flow only ever talks to this interface, so tests and
deployments without card payments can swap in another implementation.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .exceptions import GatewayUnavailableError


@dataclass(frozen=True)
class CheckoutSession:
    """Handle for a newly created hosted checkout."""
    session_id: str
    url: str


@dataclass(frozen=True)
class SessionInfo:
    """Current state of a checkout session as reported by the gateway."""
    session_id: str
    url: Optional[str]
    status: Optional[str] = None
    payment_status: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)


class PaymentGateway:
    name = 'unknown'

    @property
    def is_configured(self) -> bool:
        return True

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
        raise NotImplementedError

    def retrieve_session(self, session_id: str) -> SessionInfo:
        raise NotImplementedError


class UnconfiguredGateway(PaymentGateway):
    """Stand-in used when no gateway credentials are set. Every call fails."""

    name = 'unconfigured'

    @property
    def is_configured(self) -> bool:
        return False

    def create_checkout_session(self, **kwargs) -> CheckoutSession:
        raise GatewayUnavailableError("Card payments are not configured")

    def retrieve_session(self, session_id: str) -> SessionInfo:
        raise GatewayUnavailableError("Card payments are not configured")
