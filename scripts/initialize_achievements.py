"""
유저 업적 초기화 스크립트

지정한 유저들의 누락된 업적 레코드를 생성합니다.
카탈로그에 배지가 추가된 뒤 기존 유저에게 반영할 때 사용합니다.

사용법:
    python scripts/initialize_achievements.py <user_id> [<user_id> ...]
"""
import asyncio
import logging
import os
import sys

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from db.connection import build_db_url, close_db, init_db
from exceptions import AchievementPersistenceError
from service.achievement import AchievementService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


async def initialize_users(user_ids: list[str]) -> int:
    """
    유저별 업적 레코드 초기화

    Returns:
        생성된 레코드 총 개수
    """
    await init_db(build_db_url())

    service = AchievementService()
    total_created = 0
    try:
        for user_id in user_ids:
            try:
                created = await service.initialize_achievements(user_id)
            except AchievementPersistenceError as e:
                logger.error(f"초기화 실패: {e}")
                continue
            total_created += len(created)
            logger.info(f"{user_id}: {len(created)}개 업적 생성")
    finally:
        await close_db()

    logger.info(f"업적 초기화 완료! 총 {total_created}개 레코드 생성")
    return total_created


def main():
    user_ids = sys.argv[1:]
    if not user_ids:
        print(__doc__)
        sys.exit(1)
    asyncio.run(initialize_users(user_ids))


if __name__ == "__main__":
    main()
