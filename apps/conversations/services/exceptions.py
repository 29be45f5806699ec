"""
Domain-specific exceptions for conversations app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ConversationsServiceError(Exception):
    """Base exception for all conversations service errors."""
    pass


class ConversationNotFoundError(ConversationsServiceError):
    """Raised when a conversation does not exist or the user can't see it."""
    pass


class NotParticipantError(ConversationsServiceError):
    """Raised when a user acts on a conversation they are not part of."""
    pass


class EmptyMessageError(ConversationsServiceError):
    """Raised when message content is blank."""
    pass


class ConversationIntegrityError(ConversationsServiceError):
    """Raised when an order can't back a valid buyer and seller thread."""
    pass
