"""
업적 진행 추적기 (Achievement Progress Tracker)

옵저버 패턴을 사용하여 앱 이벤트를 구독하고,
업적 서비스의 이벤트별 갱신을 자동으로 호출합니다.
"""

import logging

from DTO.impact_profile import ImpactProfile
from service.achievement.achievement_service import AchievementService
from service.event import EventBus, GameEvent, GameEventType

logger = logging.getLogger(__name__)


class AchievementProgressTracker:
    """
    업적 진행 추적기 (옵저버)

    활동 기록, 연속 기록, 레벨, 분리수거 게임, 챌린지 이벤트를 구독하고
    이벤트 데이터의 현재 누적값으로 업적 진행도를 갱신합니다.
    """

    def __init__(self, event_bus: EventBus, achievement_service: AchievementService):
        """
        Args:
            event_bus: 이벤트 버스
            achievement_service: 업적 서비스
        """
        self.event_bus = event_bus
        self.achievement_service = achievement_service
        self._register_listeners()
        logger.info("AchievementProgressTracker initialized")

    def _register_listeners(self) -> None:
        """이벤트 리스너 등록"""
        self.event_bus.subscribe(GameEventType.SESSION_STARTED, self.on_session_started)
        self.event_bus.subscribe(GameEventType.ACTIVITY_LOGGED, self.on_activity_logged)
        self.event_bus.subscribe(GameEventType.STREAK_UPDATED, self.on_streak_updated)
        self.event_bus.subscribe(GameEventType.LEVEL_CHANGED, self.on_level_changed)
        self.event_bus.subscribe(GameEventType.SORTING_SCORED, self.on_sorting_scored)
        self.event_bus.subscribe(GameEventType.CHALLENGE_COMPLETED, self.on_challenge_completed)
        logger.debug("Event listeners registered")

    def unregister(self) -> None:
        """이벤트 리스너 해제"""
        self.event_bus.unsubscribe(GameEventType.SESSION_STARTED, self.on_session_started)
        self.event_bus.unsubscribe(GameEventType.ACTIVITY_LOGGED, self.on_activity_logged)
        self.event_bus.unsubscribe(GameEventType.STREAK_UPDATED, self.on_streak_updated)
        self.event_bus.unsubscribe(GameEventType.LEVEL_CHANGED, self.on_level_changed)
        self.event_bus.unsubscribe(GameEventType.SORTING_SCORED, self.on_sorting_scored)
        self.event_bus.unsubscribe(GameEventType.CHALLENGE_COMPLETED, self.on_challenge_completed)

    async def on_session_started(self, event: GameEvent) -> None:
        """세션 시작 이벤트 핸들러"""
        await self.achievement_service.initialize_achievements(event.user_id)

    async def on_activity_logged(self, event: GameEvent) -> None:
        """활동 기록 이벤트 핸들러"""
        profile = ImpactProfile(
            total_activities_logged=event.data.get("total_activities", 0),
            total_carbon_saved_kg=event.data.get("total_carbon_saved_kg", 0.0),
            total_water_saved_liters=event.data.get("total_water_saved_liters", 0.0),
            total_plastic_saved_items=event.data.get("total_plastic_saved_items", 0),
        )
        await self.achievement_service.check_activity_achievements(event.user_id, profile)

    async def on_streak_updated(self, event: GameEvent) -> None:
        """연속 기록 갱신 이벤트 핸들러"""
        # 연속 기록은 set 방식 (누적이 아닌 현재값)
        await self.achievement_service.check_streak_achievements(
            event.user_id, event.data.get("current_streak", 0)
        )

    async def on_level_changed(self, event: GameEvent) -> None:
        """레벨 변경 이벤트 핸들러"""
        await self.achievement_service.check_level_achievements(
            event.user_id, event.data.get("current_level", 0)
        )

    async def on_sorting_scored(self, event: GameEvent) -> None:
        """분리수거 게임 채점 이벤트 핸들러"""
        await self.achievement_service.check_sorting_achievements(
            event.user_id, event.data.get("correct_sorts", 0)
        )

    async def on_challenge_completed(self, event: GameEvent) -> None:
        """챌린지 완료 이벤트 핸들러"""
        await self.achievement_service.check_challenge_achievements(
            event.user_id, event.data.get("completed_challenges", 0)
        )
