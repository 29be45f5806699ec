"""
Conversation management service.

Every conversation belongs to exactly one order. Its participants are
the order's buyer and the listing's owner, and it is opened with a
single message from the buyer.
"""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Max, Q, QuerySet

from apps.accounts.models import User
from apps.conversations.models import Conversation, Message
from apps.marketplace.models import PaymentMethod
from apps.orders.models import Order

from .exceptions import (
    ConversationNotFoundError,
    NotParticipantError,
    EmptyMessageError,
    ConversationIntegrityError,
)

logger = logging.getLogger(__name__)

OPENING_MESSAGES = {
    PaymentMethod.CARD: (
        "Hi, I just purchased this item via card. "
        "When can we arrange delivery/pickup?"
    ),
    PaymentMethod.IN_PERSON: (
        "Hi, I reserved this item for in-person payment. "
        "When and where can we meet on campus?"
    ),
}


def opening_message_for(payment_method: str) -> str:
    """Buyer's first message for a purchase made with the given method."""
    return OPENING_MESSAGES[payment_method]


@transaction.atomic
def start_conversation(*, order: Order, opening_message: str) -> Conversation:
    """
    Open the buyer and seller thread for an order.

    Args:
        order: Freshly created order, with its listing loaded
        opening_message: Text of the buyer's first message

    Returns:
        Created Conversation with one message

    Raises:
        ConversationIntegrityError: If the listing has no owner, or the
            owner is the buyer
        EmptyMessageError: If opening_message is blank
    """
    seller_id = order.listing.owner_id

    if seller_id is None:
        raise ConversationIntegrityError(
            f"Listing {order.listing_id} has no owner of record"
        )
    if seller_id == order.buyer_id:
        raise ConversationIntegrityError(
            f"Order {order.id} buyer is also the seller"
        )

    content = (opening_message or '').strip()
    if not content:
        raise EmptyMessageError("Message content cannot be empty")

    conversation = Conversation.objects.create(
        order=order,
        buyer_id=order.buyer_id,
        seller_id=seller_id,
    )
    Message.objects.create(
        conversation=conversation,
        sender_id=order.buyer_id,
        content=content,
        sequence=1,
    )

    logger.info("Conversation %s opened for order %s", conversation.id, order.id)
    return conversation


def list_conversations_for_user(*, user: User) -> QuerySet[Conversation]:
    """Conversations where the user is buyer or seller, newest first."""
    return (
        Conversation.objects
        .filter(Q(buyer=user) | Q(seller=user))
        .select_related('buyer', 'seller', 'order__listing')
        .order_by('-created_at')
    )


def get_conversation_for_participant(*, conversation_id: UUID, user: User) -> Conversation:
    """
    Get a conversation the user takes part in.

    Raises:
        ConversationNotFoundError: If it doesn't exist or the user isn't
            a participant
    """
    try:
        return (
            list_conversations_for_user(user=user)
            .get(id=conversation_id)
        )
    except (Conversation.DoesNotExist, ValidationError, ValueError):
        raise ConversationNotFoundError(f"Conversation {conversation_id} not found")


def list_messages(*, conversation: Conversation) -> QuerySet[Message]:
    """Messages in display order."""
    return (
        conversation.messages
        .select_related('sender')
        .order_by('created_at', 'sequence')
    )


@transaction.atomic
def post_message(*, conversation_id: UUID, sender: User, content: str) -> Message:
    """
    Append a message to a conversation.

    The conversation row is locked while the next sequence number is
    taken.

    Raises:
        ConversationNotFoundError: If the conversation doesn't exist
        NotParticipantError: If the sender is not buyer or seller
        EmptyMessageError: If content is blank
    """
    try:
        conversation = Conversation.objects.select_for_update().get(id=conversation_id)
    except (Conversation.DoesNotExist, ValidationError, ValueError):
        raise ConversationNotFoundError(f"Conversation {conversation_id} not found")

    if not conversation.is_participant(sender):
        raise NotParticipantError("Only the buyer and seller can post here")

    content = (content or '').strip()
    if not content:
        raise EmptyMessageError("Message content cannot be empty")

    last = conversation.messages.aggregate(last=Max('sequence'))['last'] or 0

    return Message.objects.create(
        conversation=conversation,
        sender=sender,
        content=content,
        sequence=last + 1,
    )
