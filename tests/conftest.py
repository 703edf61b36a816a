"""
pytest 설정 및 공통 픽스처 정의
"""
import sys
from pathlib import Path
from typing import AsyncGenerator, Generator, Iterable, List, Tuple

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tortoise.exceptions import OperationalError

from models.achievement import AchievementDefinition, AchievementTier, ActivityCategory
from models.repos.achievement_repo import TortoiseAchievementRepository
from models.user_achievement import UserAchievement
from service.achievement import AchievementCatalog, AchievementService
from service.event import EventBus


# =============================================================================
# pytest 설정
# =============================================================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# =============================================================================
# 데이터베이스 픽스처
# =============================================================================


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[None, None]:
    """
    테스트용 인메모리 SQLite 데이터베이스
    각 테스트 함수마다 새로운 DB 생성
    """
    from tortoise import Tortoise

    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["models"]}
    )
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


# =============================================================================
# 테스트 더블
# =============================================================================


class RecordingNotificationGateway:
    """notify 호출을 기록하는 알림 게이트웨이"""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def notify(self, title: str, description: str) -> None:
        self.calls.append((title, description))


class ExplodingNotificationGateway:
    """항상 실패하는 알림 게이트웨이"""

    def __init__(self):
        self.attempts = 0

    def notify(self, title: str, description: str) -> None:
        self.attempts += 1
        raise RuntimeError("notification backend unavailable")


class FlakyAchievementRepository(TortoiseAchievementRepository):
    """
    실패를 주입할 수 있는 저장소

    fail_save: save 호출 시 OperationalError
    fail_create_after: 지정한 개수만큼 생성한 뒤 트랜잭션 도중 OperationalError
    """

    def __init__(self):
        self.fail_save = False
        self.fail_create_after = None

    async def save(self, achievement: UserAchievement) -> None:
        if self.fail_save:
            raise OperationalError("database is locked")
        await super().save(achievement)

    async def create_many(self, user_id: str, definitions: Iterable[AchievementDefinition]):
        if self.fail_create_after is None:
            return await super().create_many(user_id, definitions)
        return await super().create_many(user_id, self._failing(definitions))

    def _failing(self, definitions):
        for index, definition in enumerate(definitions):
            if index >= self.fail_create_after:
                raise OperationalError("disk I/O error")
            yield definition


# =============================================================================
# 업적 픽스처
# =============================================================================


@pytest.fixture
def event_bus() -> Generator[EventBus, None, None]:
    """구독자가 비어 있는 이벤트 버스"""
    bus = EventBus()
    bus.clear_all_subscribers()
    yield bus
    bus.clear_all_subscribers()


@pytest.fixture
def notification_gateway() -> RecordingNotificationGateway:
    return RecordingNotificationGateway()


@pytest.fixture
def exploding_gateway() -> ExplodingNotificationGateway:
    return ExplodingNotificationGateway()


@pytest.fixture
def flaky_repository() -> FlakyAchievementRepository:
    return FlakyAchievementRepository()


@pytest.fixture
def small_catalog() -> AchievementCatalog:
    """목표치를 직접 제어하기 위한 소형 카탈로그"""
    return AchievementCatalog([
        AchievementDefinition(
            badge_id="badge_a",
            title="Badge A",
            description="Reach 50",
            tier=AchievementTier.BRONZE,
            icon_name="a.circle",
            progress_required=50,
        ),
        AchievementDefinition(
            badge_id="badge_b",
            title="Badge B",
            description="Reach 10",
            tier=AchievementTier.SILVER,
            icon_name="b.circle",
            category=ActivityCategory.WATER,
            progress_required=10,
        ),
    ])


@pytest.fixture
def achievement_service(test_db, notification_gateway, event_bus) -> AchievementService:
    """기본 카탈로그 + Tortoise 저장소를 사용하는 업적 서비스"""
    return AchievementService(
        notification_gateway=notification_gateway,
        event_bus=event_bus,
    )


@pytest.fixture
def small_service(test_db, small_catalog, notification_gateway, event_bus) -> AchievementService:
    """소형 카탈로그를 사용하는 업적 서비스"""
    return AchievementService(
        catalog=small_catalog,
        notification_gateway=notification_gateway,
        event_bus=event_bus,
    )
