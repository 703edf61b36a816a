"""
UserAchievement Repository

유저 업적 데이터 접근 레이어입니다.
엔진은 AchievementRepository 인터페이스에만 의존하며, 기본 구현은 Tortoise ORM을 사용합니다.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from tortoise.transactions import in_transaction

from models.achievement import AchievementDefinition
from models.user_achievement import UserAchievement


class AchievementRepository(ABC):
    """유저 업적 저장소 인터페이스"""

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[UserAchievement]:
        """
        유저의 모든 업적 레코드 조회

        Args:
            user_id: 유저 ID

        Returns:
            UserAchievement 목록 (정렬 보장 없음)
        """

    @abstractmethod
    async def find_one(self, user_id: str, badge_id: str) -> Optional[UserAchievement]:
        """
        (유저, 배지) 레코드 조회

        Args:
            user_id: 유저 ID
            badge_id: 배지 ID

        Returns:
            레코드 (없으면 None)
        """

    @abstractmethod
    async def create_many(
        self,
        user_id: str,
        definitions: Iterable[AchievementDefinition]
    ) -> List[UserAchievement]:
        """
        정의 목록으로 진행도 0인 레코드를 일괄 생성

        하나라도 실패하면 전체가 롤백되어야 합니다.

        Args:
            user_id: 유저 ID
            definitions: 생성할 업적 정의 목록

        Returns:
            생성된 레코드 목록
        """

    @abstractmethod
    async def save(self, achievement: UserAchievement) -> None:
        """레코드 변경 사항 저장"""


class TortoiseAchievementRepository(AchievementRepository):
    """Tortoise ORM 기반 유저 업적 저장소"""

    async def find_by_user(self, user_id: str) -> List[UserAchievement]:
        return await UserAchievement.filter(user_id=user_id).all()

    async def find_one(self, user_id: str, badge_id: str) -> Optional[UserAchievement]:
        return await UserAchievement.get_or_none(user_id=user_id, badge_id=badge_id)

    async def create_many(
        self,
        user_id: str,
        definitions: Iterable[AchievementDefinition]
    ) -> List[UserAchievement]:
        created = []
        async with in_transaction() as connection:
            for definition in definitions:
                achievement = await UserAchievement.create(
                    user_id=user_id,
                    badge_id=definition.badge_id,
                    title=definition.title,
                    description=definition.description,
                    tier=definition.tier,
                    category=definition.category,
                    icon_name=definition.icon_name,
                    progress_current=0.0,
                    progress_required=definition.progress_required,
                    is_unlocked=False,
                    using_db=connection,
                )
                created.append(achievement)
        return created

    async def save(self, achievement: UserAchievement) -> None:
        await achievement.save()
