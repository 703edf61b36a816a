"""
알림 시스템

업적 달성 알림 게이트웨이 (로그 / 디스코드)
"""

from service.notification.notification_gateway import (
    NotificationGateway,
    LoggingNotificationGateway,
)
from service.notification.discord_notifier import (
    DiscordNotificationGateway,
    create_achievement_embed,
)

__all__ = [
    "NotificationGateway",
    "LoggingNotificationGateway",
    "DiscordNotificationGateway",
    "create_achievement_embed",
]
