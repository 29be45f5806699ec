"""
Purchase orchestration.

A purchase moves through validating, paying (card only), recording and
finalizing. The gateway call finishes before anything is written
locally. The order, the sold flag and the conversation are then
written in one transaction, so a failed attempt leaves no trace apart
from a possibly unused checkout session at the gateway, which expires
on its own.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional
from uuid import UUID

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.conversations.models import Conversation
from apps.conversations.services import (
    start_conversation,
    opening_message_for,
    ConversationIntegrityError,
)
from apps.marketplace.models import Listing, PaymentMethod
from apps.marketplace.services import (
    get_active_listing,
    mark_sold,
    ListingNotFoundError,
    ListingConflictError,
)
from apps.orders.models import Order, OrderStatus
from apps.payments import (
    CheckoutSession,
    PaymentGateway,
    PaymentGatewayError,
    GatewayUnavailableError,
    get_payment_gateway,
)

from .exceptions import (
    InvalidPurchaseInputError,
    ListingNotAvailableError,
    SelfPurchaseError,
    PurchaseIntegrityError,
    AlreadySoldError,
    PaymentUnavailableError,
    PaymentFailedError,
    PurchasePersistenceError,
)
from .ledger import create_order

logger = logging.getLogger(__name__)


class PurchaseStage(str, Enum):
    VALIDATING = 'validating'
    PAYING = 'paying'
    RECORDING = 'recording'
    FINALIZING = 'finalizing'
    DONE = 'done'


# Card orders are recorded as paid once the checkout session exists.
# Capture is never confirmed here; a later reconciliation step would
# have to move abandoned sessions out of this state.
INITIAL_STATUS = {
    PaymentMethod.CARD: OrderStatus.PAID,
    PaymentMethod.IN_PERSON: OrderStatus.CREATED,
}


@dataclass(frozen=True)
class PurchaseResult:
    order: Order
    conversation: Conversation
    checkout_url: Optional[str] = None

    @property
    def order_id(self) -> UUID:
        return self.order.id

    @property
    def conversation_id(self) -> UUID:
        return self.conversation.id


def checkout_redirect_urls(listing: Listing):
    """Success and cancel URLs for a listing's hosted checkout."""
    base_url = settings.APP_BASE_URL.rstrip('/')
    success_url = (
        f"{base_url}/marketplace/success"
        f"?session_id={{CHECKOUT_SESSION_ID}}&listing={listing.id}"
    )
    cancel_url = f"{base_url}/marketplace/{listing.id}"
    return success_url, cancel_url


class PurchaseOrchestrator:
    """
    Runs purchase attempts.

    Args:
        gateway: Payment gateway for card purchases. Built from settings
            when omitted.
        clock: Returns the sale timestamp
    """

    def __init__(
        self,
        *,
        gateway: Optional[PaymentGateway] = None,
        clock: Callable = timezone.now,
    ):
        self.gateway = gateway if gateway is not None else get_payment_gateway()
        self.clock = clock

    def purchase(self, *, buyer: User, listing_id: UUID, payment_method: str) -> PurchaseResult:
        """
        Buy a listing.

        Raises:
            InvalidPurchaseInputError: Unknown or unaccepted payment method
            ListingNotAvailableError: Listing missing or already sold
            SelfPurchaseError: Buyer owns the listing
            PurchaseIntegrityError: Listing has no owner of record
            PaymentUnavailableError: Gateway unconfigured or unreachable
            PaymentFailedError: Gateway rejected the checkout
            AlreadySoldError: Lost a race with another purchase
            PurchasePersistenceError: Database failed while recording
        """
        listing = self._validate(buyer, listing_id, payment_method)

        session = None
        if payment_method == PaymentMethod.CARD:
            session = self._start_checkout(buyer, listing)

        order, conversation = self._record(buyer, listing, payment_method, session)

        checkout_url = None
        if session is not None:
            checkout_url = self._checkout_url(session)

        logger.info(
            "Purchase complete: order %s, listing %s, buyer %s, method %s",
            order.id, listing.id, buyer.id, payment_method,
        )
        return PurchaseResult(
            order=order,
            conversation=conversation,
            checkout_url=checkout_url,
        )

    def _validate(self, buyer, listing_id, payment_method) -> Listing:
        stage = PurchaseStage.VALIDATING

        if payment_method not in PaymentMethod.values:
            logger.info("Purchase rejected: unknown payment method %r", payment_method)
            raise InvalidPurchaseInputError(
                "Payment method must be 'card' or 'in_person'", stage=stage
            )

        try:
            listing = get_active_listing(listing_id=listing_id)
        except ListingNotFoundError:
            logger.info("Purchase rejected: listing %s not available", listing_id)
            raise ListingNotAvailableError("Listing is not available", stage=stage)

        if listing.owner_id == buyer.id:
            logger.info("Purchase rejected: buyer %s owns listing %s", buyer.id, listing.id)
            raise SelfPurchaseError("You cannot buy your own listing", stage=stage)

        if listing.owner_id is None:
            logger.error(
                "Data integrity violation: active listing %s has no owner", listing.id
            )
            raise PurchaseIntegrityError(
                f"Listing {listing.id} has no owner of record", stage=stage
            )

        if not listing.accepts(payment_method):
            logger.info(
                "Purchase rejected: listing %s does not accept %s", listing.id, payment_method
            )
            raise InvalidPurchaseInputError(
                "The seller does not accept this payment method", stage=stage
            )

        return listing

    def _start_checkout(self, buyer, listing) -> CheckoutSession:
        stage = PurchaseStage.PAYING

        if not self.gateway.is_configured:
            logger.warning("Card purchase of listing %s with no payment gateway", listing.id)
            raise PaymentUnavailableError("Payment gateway is not configured", stage=stage)

        success_url, cancel_url = checkout_redirect_urls(listing)
        try:
            return self.gateway.create_checkout_session(
                amount_cents=listing.price_cents,
                title=listing.title,
                description=listing.description,
                success_url=success_url,
                cancel_url=cancel_url,
                metadata={
                    'listing_id': str(listing.id),
                    'buyer_id': str(buyer.id),
                },
            )
        except GatewayUnavailableError as e:
            raise PaymentUnavailableError(str(e), stage=stage) from e
        except PaymentGatewayError as e:
            raise PaymentFailedError(str(e), stage=stage) from e

    def _record(self, buyer, listing, payment_method, session):
        stage = PurchaseStage.RECORDING
        sold_at = self.clock()

        try:
            with transaction.atomic():
                order = create_order(
                    listing=listing,
                    buyer=buyer,
                    payment_method=payment_method,
                    status=INITIAL_STATUS[payment_method],
                    gateway_session_id=session.session_id if session else None,
                )

                stage = PurchaseStage.FINALIZING
                mark_sold(listing_id=listing.id, sold_at=sold_at)
                conversation = start_conversation(
                    order=order,
                    opening_message=opening_message_for(payment_method),
                )
        except ListingConflictError as e:
            logger.info("Purchase failed: listing %s sold concurrently", listing.id)
            raise AlreadySoldError("Listing has already been sold", stage=stage) from e
        except ListingNotFoundError as e:
            logger.info("Purchase failed: listing %s removed during purchase", listing.id)
            raise ListingNotAvailableError("Listing is not available", stage=stage) from e
        except ConversationIntegrityError as e:
            logger.error("Data integrity violation: %s", e)
            raise PurchaseIntegrityError(str(e), stage=stage) from e
        except IntegrityError as e:
            # Another open order already holds this listing
            logger.info("Purchase failed: listing %s already has an order", listing.id)
            raise AlreadySoldError("Listing has already been sold", stage=stage) from e
        except DatabaseError as e:
            logger.exception("Failed to record purchase of listing %s", listing.id)
            raise PurchasePersistenceError(str(e), stage=stage) from e

        listing.is_active = False
        listing.sold_at = sold_at
        return order, conversation

    def _checkout_url(self, session: CheckoutSession) -> str:
        try:
            info = self.gateway.retrieve_session(session.session_id)
        except PaymentGatewayError as e:
            logger.warning(
                "Could not re-read checkout session %s, using creation URL: %s",
                session.session_id, e,
            )
            return session.url
        return info.url or session.url
