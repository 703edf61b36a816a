"""
데이터베이스 연결

.env의 DATABASE_* 값으로 Tortoise ORM 연결 URL을 만들고 초기화합니다.
"""
import os

from dotenv import load_dotenv
from tortoise import Tortoise

TORTOISE_MODULES = {"models": ["models"]}
"""Tortoise 모델 모듈 등록 정보"""


def build_db_url() -> str:
    """
    환경변수로부터 DB URL 생성

    Returns:
        Tortoise 연결 URL (예: mysql://user:pw@host:3306/ecohero)

    Raises:
        RuntimeError: 필수 환경변수 누락
    """
    load_dotenv()

    engine = os.getenv('DATABASE_ENGINE') or "mysql"
    host = os.getenv('DATABASE_URL')
    user = os.getenv('DATABASE_USER')
    password = os.getenv('DATABASE_PASSWORD')
    port = int(os.getenv('DATABASE_PORT') or 0)
    table = os.getenv('DATABASE_TABLE')

    if engine == "sqlite":
        return f"sqlite://{table or ':memory:'}"

    if not host or not user or not password or not port or not table:
        raise RuntimeError("데이터 베이스 설정에 필요한 정보가 부족합니다 .env를 확인해주세요")

    return f"{engine}://{user}:{password}@{host}:{port}/{table}"


async def init_db(db_url: str, generate_schemas: bool = True) -> None:
    """Tortoise 초기화 및 스키마 생성"""
    await Tortoise.init(db_url=db_url, modules=TORTOISE_MODULES)
    if generate_schemas:
        await Tortoise.generate_schemas()


async def close_db() -> None:
    await Tortoise.close_connections()
