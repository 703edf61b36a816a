"""
EcoHero 데이터 모델

Tortoise ORM은 이 모듈에서 Model 클래스를 탐색합니다 ({"models": ["models"]}).
"""

from models.achievement import AchievementDefinition, AchievementTier, ActivityCategory
from models.user_achievement import UserAchievement

__all__ = [
    "AchievementDefinition",
    "AchievementTier",
    "ActivityCategory",
    "UserAchievement",
]
