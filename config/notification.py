"""
알림 시스템 설정
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationConfig:
    """업적 달성 알림 설정"""

    ACHIEVEMENT_TITLE: str = "Achievement Unlocked! 🏆"
    """업적 달성 알림 제목"""

    ACHIEVEMENT_BODY_FORMAT: str = "{title}: {description}"
    """업적 달성 알림 본문 ({title}, {description})"""

    ACHIEVEMENT_EMBED_COLOR: int = 0xF1C40F
    """업적 달성 임베드 색상 (금색)"""


# 싱글톤 설정 객체
NOTIFICATION = NotificationConfig()
