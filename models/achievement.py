"""
업적 정의 모델

카탈로그에 등록되는 불변 업적 정의입니다. DB에 저장되지 않습니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from exceptions import InvalidAchievementDefinitionError


class AchievementTier(str, Enum):
    """업적 등급"""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @property
    def rank(self) -> int:
        """정렬용 등급 순위 (bronze = 0)"""
        return _TIER_ORDER.index(self)


_TIER_ORDER = (
    AchievementTier.BRONZE,
    AchievementTier.SILVER,
    AchievementTier.GOLD,
    AchievementTier.PLATINUM,
)


class ActivityCategory(str, Enum):
    """활동 카테고리"""

    MEALS = "meals"            # 식단
    TRANSPORT = "transport"    # 교통
    PLASTIC = "plastic"        # 플라스틱
    ENERGY = "energy"          # 에너지
    WATER = "water"            # 물
    LIFESTYLE = "lifestyle"    # 생활 습관
    OTHER = "other"            # 기타


@dataclass(frozen=True)
class AchievementDefinition:
    """
    업적 정의 (카탈로그 항목)

    category가 None이면 카테고리 공통 업적입니다 (연속 기록, 레벨 등).
    """

    badge_id: str
    title: str
    description: str
    tier: AchievementTier
    icon_name: str
    progress_required: float
    category: Optional[ActivityCategory] = None

    def __post_init__(self):
        if not self.badge_id:
            raise InvalidAchievementDefinitionError(self.badge_id, "badge_id가 비어 있습니다")
        if self.progress_required <= 0:
            raise InvalidAchievementDefinitionError(
                self.badge_id, f"progress_required는 0보다 커야 합니다 ({self.progress_required})"
            )

    def __str__(self) -> str:
        return f"AchievementDefinition(badge_id={self.badge_id}, tier={self.tier.value})"
