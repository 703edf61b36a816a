"""
유저 업적 모델
"""

from tortoise import fields
from tortoise.models import Model

from models.achievement import AchievementTier, ActivityCategory


class UserAchievement(Model):
    """
    유저 업적 진행 상태

    각 유저의 배지별 진행도와 달성 여부를 추적합니다.
    표시 정보와 목표 진행도는 생성 시점에 카탈로그 정의에서 복사됩니다.
    """

    id = fields.UUIDField(pk=True)
    user_id = fields.CharField(max_length=128, index=True)    # 소유 유저 (FK 아님)
    badge_id = fields.CharField(max_length=64)                # 카탈로그 배지 ID

    title = fields.CharField(max_length=100)
    description = fields.TextField()
    tier = fields.CharEnumField(AchievementTier)
    category = fields.CharEnumField(ActivityCategory, null=True)
    icon_name = fields.CharField(max_length=64)

    progress_current = fields.FloatField(default=0.0)         # 현재 진행도
    progress_required = fields.FloatField()                   # 목표 진행도

    is_unlocked = fields.BooleanField(default=False)          # 달성 여부
    unlocked_at = fields.DatetimeField(null=True)             # 달성 시각 (한 번만 기록)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user_achievement"
        unique_together = ("user_id", "badge_id")

    def __str__(self) -> str:
        return (
            f"UserAchievement(user_id={self.user_id}, badge_id={self.badge_id}, "
            f"progress={self.progress_current}/{self.progress_required})"
        )

    @property
    def progress_percent(self) -> float:
        """진행률 (0.0 ~ 1.0)"""
        if self.is_unlocked or self.progress_required <= 0:
            return 1.0
        return max(0.0, min(1.0, self.progress_current / self.progress_required))

    @property
    def progress_percent_int(self) -> int:
        """진행률 (0 ~ 100)"""
        return int(self.progress_percent * 100)

    @property
    def remaining(self) -> float:
        """달성까지 남은 진행도"""
        return max(0.0, self.progress_required - self.progress_current)
