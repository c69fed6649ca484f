"""ORM models package export."""

from romeiro.models.accommodation import (
    Accommodation,
    AccommodationReview,
    AccommodationType,
    BasicAccommodation,
    Room,
    RoomBlockedDate,
)
from romeiro.models.business import Business, BusinessReview
from romeiro.models.content import AppSetting, Attraction, News, Video
from romeiro.models.directory import (
    Banner,
    Partner,
    PilgrimService,
    PilgrimTip,
    UsefulPhone,
)
from romeiro.models.notification import (
    Notification,
    NotificationActionType,
    NotificationType,
    PushDevice,
    UserNotification,
)
from romeiro.models.user import User, UserRole

__all__ = [
    "Accommodation",
    "AccommodationReview",
    "AccommodationType",
    "AppSetting",
    "Attraction",
    "Banner",
    "BasicAccommodation",
    "Business",
    "BusinessReview",
    "News",
    "Notification",
    "NotificationActionType",
    "NotificationType",
    "Partner",
    "PilgrimService",
    "PilgrimTip",
    "PushDevice",
    "Room",
    "RoomBlockedDate",
    "UsefulPhone",
    "User",
    "UserNotification",
    "UserRole",
    "Video",
]
