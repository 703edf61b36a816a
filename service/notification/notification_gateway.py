"""
알림 게이트웨이 인터페이스

업적 엔진은 notify(title, description) 하나만 호출합니다.
호출은 fire-and-forget이며, 반환값이나 전송 결과를 기다리지 않습니다.
"""
import logging
from typing import Protocol, runtime_checkable

from config.notification import NOTIFICATION

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationGateway(Protocol):
    """알림 전송 인터페이스"""

    def notify(self, title: str, description: str) -> None:
        ...


class LoggingNotificationGateway:
    """로그로만 알림을 남기는 기본 게이트웨이"""

    def notify(self, title: str, description: str) -> None:
        body = NOTIFICATION.ACHIEVEMENT_BODY_FORMAT.format(title=title, description=description)
        logger.info(f"{NOTIFICATION.ACHIEVEMENT_TITLE} {body}")
