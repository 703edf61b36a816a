"""
업적 달성 큐

이번 세션에서 새로 달성되어 아직 화면에 표시되지 않은 업적을 순서대로 보관합니다.
프로세스 메모리에만 존재하며 재시작 시 사라집니다 (달성 상태 자체는 DB에 저장됨).
"""

from collections import deque
from typing import Deque, Optional, Tuple

from models.user_achievement import UserAchievement


class UnlockQueue:
    """FIFO 업적 달성 큐"""

    def __init__(self):
        self._items: Deque[UserAchievement] = deque()

    def push(self, achievement: UserAchievement) -> None:
        self._items.append(achievement)

    def pop(self) -> Optional[UserAchievement]:
        """가장 오래된 항목을 꺼냄 (비어 있으면 None)"""
        if not self._items:
            return None
        return self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> Tuple[UserAchievement, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
