"""
업적 카탈로그 (Achievement Catalog)

빌드 시점에 고정되는 업적 정의 레지스트리입니다.
전역 상수 대신 엔진에 주입되므로 테스트에서 다른 카탈로그로 교체할 수 있습니다.
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

from exceptions import DuplicateBadgeError
from models.achievement import AchievementDefinition, AchievementTier, ActivityCategory


class AchievementCatalog:
    """
    불변 업적 정의 목록

    Example:
        >>> catalog = AchievementCatalog.default()
        >>> catalog.get("first_steps").progress_required
        1
        >>> catalog.get("unknown") is None
        True
    """

    def __init__(self, definitions: Iterable[AchievementDefinition]):
        self._definitions: Tuple[AchievementDefinition, ...] = tuple(definitions)
        self._by_badge_id: Dict[str, AchievementDefinition] = {}

        for definition in self._definitions:
            if definition.badge_id in self._by_badge_id:
                raise DuplicateBadgeError(definition.badge_id)
            self._by_badge_id[definition.badge_id] = definition

    @classmethod
    def default(cls) -> "AchievementCatalog":
        """config/achievements.py의 기본 카탈로그"""
        from config.achievements import ACHIEVEMENT_DEFINITIONS
        return cls(ACHIEVEMENT_DEFINITIONS)

    def all(self) -> Tuple[AchievementDefinition, ...]:
        """모든 정의 (등록 순서)"""
        return self._definitions

    def get(self, badge_id: str) -> Optional[AchievementDefinition]:
        """배지 ID로 정의 조회 (없으면 None)"""
        return self._by_badge_id.get(badge_id)

    def badge_ids(self) -> Tuple[str, ...]:
        return tuple(d.badge_id for d in self._definitions)

    def by_tier(self, tier: AchievementTier) -> Tuple[AchievementDefinition, ...]:
        return tuple(d for d in self._definitions if d.tier == tier)

    def by_category(self, category: Optional[ActivityCategory]) -> Tuple[AchievementDefinition, ...]:
        """카테고리별 정의 (None이면 카테고리 공통 업적)"""
        return tuple(d for d in self._definitions if d.category == category)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, badge_id: object) -> bool:
        return badge_id in self._by_badge_id

    def __iter__(self) -> Iterator[AchievementDefinition]:
        return iter(self._definitions)
