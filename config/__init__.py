"""
EcoHero 설정 상수

업적 카탈로그, 이벤트 트리거, 알림 관련 상수를 여기서 관리합니다.
각 도메인별 설정은 config/ 하위 모듈에 정의되어 있습니다.
"""
from config.achievements import (
    ACHIEVEMENT_DEFINITIONS,
    AchievementTriggerConfig, ACHIEVEMENT_TRIGGERS,
)
from config.notification import NotificationConfig, NOTIFICATION

__all__ = [
    # achievements
    "ACHIEVEMENT_DEFINITIONS",
    "AchievementTriggerConfig", "ACHIEVEMENT_TRIGGERS",
    # notification
    "NotificationConfig", "NOTIFICATION",
]
