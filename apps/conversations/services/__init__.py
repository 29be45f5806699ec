"""
Conversations app services layer.

Threads are opened by the purchase flow and are only readable and
writable by their two participants.
"""

from .exceptions import (
    ConversationsServiceError,
    ConversationNotFoundError,
    NotParticipantError,
    EmptyMessageError,
    ConversationIntegrityError,
)
from .conversation_management import (
    opening_message_for,
    start_conversation,
    list_conversations_for_user,
    get_conversation_for_participant,
    list_messages,
    post_message,
)

__all__ = [
    # Exceptions
    'ConversationsServiceError',
    'ConversationNotFoundError',
    'NotParticipantError',
    'EmptyMessageError',
    'ConversationIntegrityError',
    # Services
    'opening_message_for',
    'start_conversation',
    'list_conversations_for_user',
    'get_conversation_for_participant',
    'list_messages',
    'post_message',
]
