"""
Order ledger.

Orders are inserted once by the purchase flow and then only read.
"""

from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.marketplace.models import Listing
from apps.orders.models import Order

from .exceptions import OrderNotFoundError


@transaction.atomic
def create_order(
    *,
    listing: Listing,
    buyer: User,
    payment_method: str,
    status: str,
    gateway_session_id: Optional[str] = None,
) -> Order:
    """
    Insert a new order for a listing.

    The listing's current price is copied onto the order. Raises
    IntegrityError if the listing already has an open order.
    """
    return Order.objects.create(
        listing=listing,
        buyer=buyer,
        payment_method=payment_method,
        status=status,
        gateway_session_id=gateway_session_id,
        amount_cents=listing.price_cents,
    )


def _orders():
    return Order.objects.select_related('listing', 'listing__owner', 'buyer')


def list_orders_for_buyer(*, buyer: User) -> QuerySet[Order]:
    return _orders().filter(buyer=buyer).order_by('-created_at')


def list_orders_for_seller(*, seller: User) -> QuerySet[Order]:
    return _orders().filter(listing__owner=seller).order_by('-created_at')


def list_orders_for_user(*, user: User) -> QuerySet[Order]:
    """Orders where the user is either side of the sale."""
    return (
        _orders()
        .filter(Q(buyer=user) | Q(listing__owner=user))
        .order_by('-created_at')
    )


def get_order_for_participant(*, order_id: UUID, user: User) -> Order:
    """
    Get an order visible to the user.

    Raises:
        OrderNotFoundError: If it doesn't exist or the user is neither
            buyer nor seller
    """
    try:
        return list_orders_for_user(user=user).get(id=order_id)
    except (Order.DoesNotExist, ValidationError, ValueError):
        raise OrderNotFoundError(f"Order {order_id} not found")
