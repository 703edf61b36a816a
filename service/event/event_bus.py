"""
이벤트 버스 (Event Bus)

옵저버 패턴을 사용하여 앱 내 이벤트를 발행하고 구독합니다.
활동 기록, 연속 기록, 레벨 등 각 시스템은 이벤트를 발행하기만 하면 되고,
구독자(업적 추적기, 화면 등)가 자동으로 처리합니다.
"""

import logging
from datetime import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Any

logger = logging.getLogger(__name__)


class GameEventType(Enum):
    """앱 이벤트 타입"""

    # 세션 이벤트
    SESSION_STARTED = "session_started"         # 로그인/세션 시작

    # 활동 이벤트
    ACTIVITY_LOGGED = "activity_logged"         # 친환경 활동 기록

    # 성장 이벤트
    STREAK_UPDATED = "streak_updated"           # 연속 기록 갱신
    LEVEL_CHANGED = "level_changed"             # 레벨 변경

    # 미니게임/챌린지 이벤트
    SORTING_SCORED = "sorting_scored"           # 분리수거 게임 라운드 채점
    CHALLENGE_COMPLETED = "challenge_completed"  # 챌린지 완료

    # 업적 이벤트
    ACHIEVEMENT_UNLOCKED = "achievement_unlocked"  # 업적 달성


@dataclass
class GameEvent:
    """앱 이벤트"""

    type: GameEventType
    user_id: str
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=datetime.now)

    def __repr__(self) -> str:
        return f"GameEvent(type={self.type.value}, user_id={self.user_id}, data={self.data})"


class EventBus:
    """
    이벤트 버스 (싱글톤)

    앱 내 모든 이벤트를 중앙에서 관리합니다.
    발행자(Publisher)는 이벤트를 발행하고, 구독자(Subscriber)는 이벤트를 수신합니다.

    Example:
        >>> event_bus = EventBus()
        >>>
        >>> # 구독
        >>> async def on_streak_updated(event: GameEvent):
        ...     print(f"Streak: {event.data['current_streak']}")
        >>>
        >>> event_bus.subscribe(GameEventType.STREAK_UPDATED, on_streak_updated)
        >>>
        >>> # 발행
        >>> await event_bus.publish(GameEvent(
        ...     type=GameEventType.STREAK_UPDATED,
        ...     user_id="u1",
        ...     data={"current_streak": 7}
        ... ))
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._subscribers = {}
            logger.info("EventBus instance created")
        return cls._instance

    def subscribe(self, event_type: GameEventType, callback: Callable) -> None:
        """
        이벤트 구독

        Args:
            event_type: 구독할 이벤트 타입
            callback: 이벤트 발생 시 호출할 콜백 함수 (async function)
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []

        if callback not in self._subscribers[event_type]:
            self._subscribers[event_type].append(callback)
            logger.debug(f"Subscribed to {event_type.value}: {callback.__name__}")

    def unsubscribe(self, event_type: GameEventType, callback: Callable) -> None:
        """
        구독 취소

        Args:
            event_type: 구독 취소할 이벤트 타입
            callback: 구독 취소할 콜백 함수
        """
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
                logger.debug(f"Unsubscribed from {event_type.value}: {callback.__name__}")
            except ValueError:
                pass

    async def publish(self, event: GameEvent) -> None:
        """
        이벤트 발행

        구독자들에게 이벤트를 전파합니다.
        각 구독자의 콜백이 순차적으로 호출되며, 에러가 발생해도 다른 구독자에게 영향을 주지 않습니다.

        Args:
            event: 발행할 이벤트
        """
        callbacks: List[Callable] = list(self._subscribers.get(event.type, []))
        if not callbacks:
            logger.debug(f"No subscribers for event: {event.type.value}")
            return

        logger.debug(f"Publishing event: {event}")

        for callback in callbacks:
            try:
                await callback(event)
            except Exception as e:
                logger.error(
                    f"Error in event callback {callback.__name__} for {event.type.value}: {e}",
                    exc_info=True
                )

    def get_subscriber_count(self, event_type: GameEventType) -> int:
        """
        특정 이벤트 타입의 구독자 수 반환

        Args:
            event_type: 이벤트 타입

        Returns:
            구독자 수
        """
        return len(self._subscribers.get(event_type, []))

    def clear_all_subscribers(self) -> None:
        """모든 구독자 제거 (테스트용)"""
        self._subscribers.clear()
        logger.info("All subscribers cleared")
