"""
업적 통계

업적 갤러리/리포트 화면에 표시할 달성 현황 요약입니다.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable

from models.achievement import AchievementTier
from models.user_achievement import UserAchievement


@dataclass
class TierProgress:
    """등급별 달성 현황"""
    unlocked: int = 0
    total: int = 0


@dataclass
class AchievementStats:
    """유저 업적 달성 현황"""
    total: int = 0
    unlocked: int = 0
    by_tier: Dict[AchievementTier, TierProgress] = field(
        default_factory=lambda: {tier: TierProgress() for tier in AchievementTier}
    )

    @property
    def locked(self) -> int:
        return self.total - self.unlocked

    @property
    def completion_rate(self) -> float:
        """달성률 (%)"""
        if self.total == 0:
            return 0.0
        return self.unlocked / self.total * 100

    @classmethod
    def from_achievements(cls, achievements: Iterable[UserAchievement]) -> "AchievementStats":
        stats = cls()
        for achievement in achievements:
            tier_progress = stats.by_tier[AchievementTier(achievement.tier)]
            stats.total += 1
            tier_progress.total += 1
            if achievement.is_unlocked:
                stats.unlocked += 1
                tier_progress.unlocked += 1
        return stats
