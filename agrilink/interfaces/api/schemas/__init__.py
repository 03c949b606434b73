from .base import APIModel, ErrorResponse
from .locale import LocaleOption, LocaleRead, LocaleUpdate, LocaleUpdateResponse
from .message import (
    ConversationListRead,
    ConversationRead,
    MessageCreate,
    MessageRead,
    MessageThreadRead,
    UnreadCountRead,
)
from .notification import (
    NotificationListRead,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)
from .subscription import (
    SubscribeRequest,
    SubscriptionPlanListRead,
    SubscriptionPlanRead,
    SubscriptionRead,
    SubscriptionStatusRead,
    SubscriptionSweepRead,
)
from .user import ProfileUpdate, UserRead, UserSummaryRead

__all__ = [
    "APIModel",
    "ErrorResponse",
    "LocaleOption",
    "LocaleRead",
    "LocaleUpdate",
    "LocaleUpdateResponse",
    "ConversationListRead",
    "ConversationRead",
    "MessageCreate",
    "MessageRead",
    "MessageThreadRead",
    "UnreadCountRead",
    "NotificationListRead",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "SubscribeRequest",
    "SubscriptionPlanListRead",
    "SubscriptionPlanRead",
    "SubscriptionRead",
    "SubscriptionStatusRead",
    "SubscriptionSweepRead",
    "ProfileUpdate",
    "UserRead",
    "UserSummaryRead",
]
