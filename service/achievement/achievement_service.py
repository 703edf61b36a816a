"""
업적 서비스 (Achievement Service)

유저 업적 레코드를 초기화하고, 진행도를 갱신하며, 목표 도달 시 업적을 정확히 한 번 달성 처리합니다.
새로 달성된 업적은 세션 큐에 쌓여 화면이 순서대로 꺼내 갑니다.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Callable, Dict, Hashable, List, Optional, Tuple

from tortoise.exceptions import BaseORMException

from config.achievements import ACHIEVEMENT_TRIGGERS
from DTO.achievement_stats import AchievementStats
from DTO.impact_profile import ImpactProfile
from exceptions import AchievementNotFoundError, AchievementPersistenceError
from models.achievement import AchievementTier
from models.repos.achievement_repo import AchievementRepository, TortoiseAchievementRepository
from models.user_achievement import UserAchievement
from service.achievement.catalog import AchievementCatalog
from service.achievement.unlock_queue import UnlockQueue
from service.event import EventBus, GameEvent, GameEventType
from service.notification import LoggingNotificationGateway, NotificationGateway

logger = logging.getLogger(__name__)


class KeyedLock:
    """
    키별 asyncio.Lock

    대기자가 모두 빠져나간 키의 락은 즉시 제거되므로 사용한 키 수만큼 메모리가 늘어나지 않습니다.
    """

    def __init__(self):
        self._entries: Dict[Hashable, Tuple[asyncio.Lock, int]] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock, users = self._entries.get(key, (None, 0))
        if lock is None:
            lock = asyncio.Lock()
        self._entries[key] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._entries[key]
            if users <= 1:
                del self._entries[key]
            else:
                self._entries[key] = (lock, users - 1)

    def __len__(self) -> int:
        return len(self._entries)


class AchievementService:
    """
    업적 진행 엔진

    같은 (유저, 배지) 레코드에 대한 조회-수정-저장은 레코드별 락으로 직렬화되므로,
    여러 코루틴이 동시에 목표를 넘겨도 달성 처리와 알림은 한 번만 일어납니다.
    """

    def __init__(
        self,
        repository: AchievementRepository = None,
        catalog: AchievementCatalog = None,
        notification_gateway: NotificationGateway = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Args:
            repository: 유저 업적 저장소 (없으면 Tortoise 구현 사용)
            catalog: 업적 카탈로그 (없으면 기본 카탈로그)
            notification_gateway: 달성 알림 게이트웨이 (없으면 로그 출력)
            event_bus: 달성 이벤트를 발행할 이벤트 버스 (없으면 발행하지 않음)
        """
        self.repository = repository or TortoiseAchievementRepository()
        self.catalog = catalog or AchievementCatalog.default()
        self.notification_gateway = notification_gateway or LoggingNotificationGateway()
        self.event_bus = event_bus

        self._unlock_queue = UnlockQueue()
        self._record_locks = KeyedLock()
        self._user_locks = KeyedLock()

    # =========================================================================
    # 초기화
    # =========================================================================

    async def initialize_achievements(self, user_id: str) -> List[UserAchievement]:
        """
        유저 업적 레코드 초기화

        카탈로그 정의 중 레코드가 없는 배지만 진행도 0으로 생성합니다.
        세션 시작마다 호출해도 중복 레코드가 생기지 않습니다.

        Args:
            user_id: 유저 ID

        Returns:
            새로 생성된 레코드 목록

        Raises:
            AchievementPersistenceError: 저장소 오류 (생성은 전부 롤백됨)
        """
        async with self._user_locks.hold(user_id):
            try:
                existing = await self.repository.find_by_user(user_id)
                existing_badge_ids = {a.badge_id for a in existing}

                missing = [
                    definition for definition in self.catalog.all()
                    if definition.badge_id not in existing_badge_ids
                ]
                if not missing:
                    logger.debug(f"Achievements already initialized: user_id={user_id}")
                    return []

                created = await self.repository.create_many(user_id, missing)
            except BaseORMException as e:
                logger.error(
                    f"Failed to initialize achievements: user_id={user_id}, error={e}",
                    exc_info=True
                )
                raise AchievementPersistenceError("initialize", user_id) from e

        logger.info(f"Initialized achievements: user_id={user_id}, created={len(created)}")
        return created

    # =========================================================================
    # 진행도 갱신
    # =========================================================================

    async def update_progress(
        self,
        badge_id: str,
        user_id: str,
        amount: float,
        strict: bool = False
    ) -> Optional[UserAchievement]:
        """
        진행도 증가 (누적형: 총 절감량 등)

        Args:
            badge_id: 배지 ID
            user_id: 유저 ID
            amount: 증가량
            strict: True면 레코드가 없을 때 None 대신 예외 발생

        Returns:
            변경된 레코드 (레코드가 없거나 이미 달성했거나 저장 실패 시 None)

        Raises:
            AchievementNotFoundError: strict=True이고 레코드가 없는 경우
        """
        return await self._apply_progress(
            badge_id, user_id, lambda current: current + amount, strict
        )

    async def set_progress(
        self,
        badge_id: str,
        user_id: str,
        value: float,
        strict: bool = False
    ) -> Optional[UserAchievement]:
        """
        진행도 설정 (스냅샷형: 연속 기록, 레벨 등)

        누적이 아닌 현재값을 그대로 반영하므로 진행도가 줄어들 수도 있습니다.

        Args:
            badge_id: 배지 ID
            user_id: 유저 ID
            value: 설정값
            strict: True면 레코드가 없을 때 None 대신 예외 발생

        Returns:
            변경된 레코드 (레코드가 없거나 이미 달성했거나 저장 실패 시 None)

        Raises:
            AchievementNotFoundError: strict=True이고 레코드가 없는 경우
        """
        return await self._apply_progress(badge_id, user_id, lambda _current: value, strict)

    async def _apply_progress(
        self,
        badge_id: str,
        user_id: str,
        compute: Callable[[float], float],
        strict: bool
    ) -> Optional[UserAchievement]:
        async with self._record_locks.hold((user_id, badge_id)):
            try:
                achievement = await self.repository.find_one(user_id, badge_id)
            except BaseORMException as e:
                logger.error(
                    f"Failed to fetch achievement: user_id={user_id}, badge_id={badge_id}, error={e}",
                    exc_info=True
                )
                return None

            if achievement is None:
                if strict:
                    raise AchievementNotFoundError(badge_id, user_id)
                # 배지 ID 오타 또는 초기화되지 않은 유저
                logger.warning(f"Achievement record not found: user_id={user_id}, badge_id={badge_id}")
                return None

            if achievement.is_unlocked:
                logger.debug(f"Achievement already unlocked: user_id={user_id}, badge_id={badge_id}")
                return None

            previous = (achievement.progress_current, achievement.is_unlocked, achievement.unlocked_at)

            achievement.progress_current = float(compute(achievement.progress_current))
            just_unlocked = achievement.progress_current >= achievement.progress_required
            if just_unlocked:
                achievement.is_unlocked = True
                achievement.unlocked_at = datetime.now(timezone.utc)

            try:
                await self.repository.save(achievement)
            except BaseORMException as e:
                (
                    achievement.progress_current,
                    achievement.is_unlocked,
                    achievement.unlocked_at,
                ) = previous
                logger.error(
                    f"Failed to save achievement progress: user_id={user_id}, "
                    f"badge_id={badge_id}, error={e}",
                    exc_info=True
                )
                return None

            # 큐 순서는 커밋 순서와 같아야 함
            if just_unlocked:
                self._unlock_queue.push(achievement)

        # 알림과 이벤트 발행은 레코드 락 해제 후
        if just_unlocked:
            await self._announce_unlock(achievement)

        return achievement

    async def _announce_unlock(self, achievement: UserAchievement) -> None:
        """달성 후처리: 알림, 이벤트 발행"""
        try:
            self.notification_gateway.notify(achievement.title, achievement.description)
        except Exception as e:
            logger.warning(
                f"Achievement notification failed: badge_id={achievement.badge_id}, error={e}",
                exc_info=True
            )

        logger.info(
            f"Achievement unlocked: user_id={achievement.user_id}, "
            f"badge_id={achievement.badge_id}, title={achievement.title}"
        )

        if self.event_bus is not None:
            await self.event_bus.publish(GameEvent(
                type=GameEventType.ACHIEVEMENT_UNLOCKED,
                user_id=achievement.user_id,
                data={
                    "badge_id": achievement.badge_id,
                    "title": achievement.title,
                    "description": achievement.description,
                    "tier": AchievementTier(achievement.tier).value,
                },
            ))

    # =========================================================================
    # 이벤트별 일괄 갱신
    # =========================================================================

    async def _set_progress_for(
        self,
        badge_ids,
        user_id: str,
        value: float
    ) -> List[UserAchievement]:
        unlocked = []
        for badge_id in badge_ids:
            achievement = await self.set_progress(badge_id, user_id, value)
            if achievement is not None and achievement.is_unlocked:
                unlocked.append(achievement)
        return unlocked

    async def check_activity_achievements(
        self,
        user_id: str,
        profile: ImpactProfile
    ) -> List[UserAchievement]:
        """
        활동 기록 후 업적 갱신

        Args:
            user_id: 유저 ID
            profile: 누적 환경 영향 스냅샷

        Returns:
            이번 호출로 달성된 업적 목록
        """
        triggers = ACHIEVEMENT_TRIGGERS
        activity_count = float(profile.total_activities_logged)

        unlocked = await self._set_progress_for(
            (triggers.FIRST_ACTIVITY_BADGE,), user_id, min(activity_count, 1)
        )
        unlocked += await self._set_progress_for(triggers.ACTIVITY_COUNT_BADGES, user_id, activity_count)
        unlocked += await self._set_progress_for(
            triggers.CARBON_BADGES, user_id, float(profile.total_carbon_saved_kg)
        )
        unlocked += await self._set_progress_for(
            triggers.WATER_BADGES, user_id, float(profile.total_water_saved_liters)
        )
        unlocked += await self._set_progress_for(
            triggers.PLASTIC_BADGES, user_id, float(profile.total_plastic_saved_items)
        )
        return unlocked

    async def check_streak_achievements(self, user_id: str, current_streak: int) -> List[UserAchievement]:
        """연속 기록 업적 갱신"""
        return await self._set_progress_for(ACHIEVEMENT_TRIGGERS.STREAK_BADGES, user_id, float(current_streak))

    async def check_level_achievements(self, user_id: str, current_level: int) -> List[UserAchievement]:
        """레벨 업적 갱신"""
        return await self._set_progress_for(ACHIEVEMENT_TRIGGERS.LEVEL_BADGES, user_id, float(current_level))

    async def check_sorting_achievements(self, user_id: str, correct_sorts: int) -> List[UserAchievement]:
        """분리수거 게임 업적 갱신"""
        return await self._set_progress_for(ACHIEVEMENT_TRIGGERS.SORTING_BADGES, user_id, float(correct_sorts))

    async def check_challenge_achievements(
        self,
        user_id: str,
        completed_challenges: int
    ) -> List[UserAchievement]:
        """챌린지 완료 업적 갱신"""
        return await self._set_progress_for(
            ACHIEVEMENT_TRIGGERS.CHALLENGE_BADGES, user_id, float(completed_challenges)
        )

    # =========================================================================
    # 조회
    # =========================================================================

    async def get_achievements(self, user_id: str) -> List[UserAchievement]:
        """
        유저의 모든 업적 (등급 순 → 제목 순)

        Args:
            user_id: 유저 ID

        Returns:
            업적 목록 (조회 실패 시 빈 목록)
        """
        try:
            achievements = await self.repository.find_by_user(user_id)
        except BaseORMException as e:
            logger.error(f"Failed to fetch achievements: user_id={user_id}, error={e}", exc_info=True)
            return []

        return sorted(achievements, key=lambda a: (AchievementTier(a.tier).rank, a.title))

    async def get_unlocked_achievements(self, user_id: str) -> List[UserAchievement]:
        return [a for a in await self.get_achievements(user_id) if a.is_unlocked]

    async def get_locked_achievements(self, user_id: str) -> List[UserAchievement]:
        return [a for a in await self.get_achievements(user_id) if not a.is_unlocked]

    async def get_achievement(self, badge_id: str, user_id: str) -> Optional[UserAchievement]:
        """특정 업적 조회 (없거나 조회 실패 시 None)"""
        try:
            return await self.repository.find_one(user_id, badge_id)
        except BaseORMException as e:
            logger.error(
                f"Failed to fetch achievement: user_id={user_id}, badge_id={badge_id}, error={e}",
                exc_info=True
            )
            return None

    async def get_achievement_stats(self, user_id: str) -> AchievementStats:
        """전체/등급별 달성 현황"""
        return AchievementStats.from_achievements(await self.get_achievements(user_id))

    # =========================================================================
    # 달성 큐
    # =========================================================================

    def pop_next_unlock(self) -> Optional[UserAchievement]:
        """다음에 표시할 달성 업적 꺼내기 (FIFO)"""
        return self._unlock_queue.pop()

    def clear_pending_unlocks(self) -> None:
        """표시 대기 중인 달성 업적 모두 비우기 (오버레이를 닫은 경우)"""
        self._unlock_queue.clear()

    @property
    def has_pending_unlocks(self) -> bool:
        return bool(self._unlock_queue)

    @property
    def pending_unlocks(self) -> Tuple[UserAchievement, ...]:
        return self._unlock_queue.snapshot()
