from community.models.message import PrivateMessage
from community.models.notification import Notification
from community.models.user import User, UserBlock

__all__ = [
    "User",
    "UserBlock",
    "PrivateMessage",
    "Notification",
]
