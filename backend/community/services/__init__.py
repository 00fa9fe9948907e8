from community.services.conversations import ConversationAggregator
from community.services.directory import UserDirectory
from community.services.messaging import MessagingService

__all__ = [
    "ConversationAggregator",
    "MessagingService",
    "UserDirectory",
]
