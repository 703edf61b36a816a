# bot.py
import os
import discord
from discord.ext import commands
from dotenv import load_dotenv

import logging

from db.connection import build_db_url, close_db, init_db
from service.achievement import AchievementProgressTracker, AchievementService
from service.event import EventBus
from service.notification import DiscordNotificationGateway, LoggingNotificationGateway

# 로그 기본 설정
logging.basicConfig(
    level=logging.INFO,  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

load_dotenv()

TOKEN = os.getenv('DISCORD_TOKEN')
ACHIEVEMENT_CHANNEL_ID = int(os.getenv('ACHIEVEMENT_CHANNEL_ID') or 0)


class EcoHeroBot(commands.Bot):
    """
    업적 엔진 호스트

    DB 연결, 업적 서비스, 이벤트 추적기를 묶어 실행합니다.
    활동/연속 기록/레벨 시스템은 같은 EventBus에 이벤트를 발행합니다.
    """

    def __init__(self):
        intents = discord.Intents.default()
        super().__init__(command_prefix="!", intents=intents)
        self.event_bus = EventBus()
        self.notification_gateway = None
        self.achievement_service = None
        self.achievement_tracker = None

    async def setup_hook(self):
        logging.info("데이터 베이스 연결 시작")
        await init_db(build_db_url())
        logging.info("데이터 베이스 연결")

        if ACHIEVEMENT_CHANNEL_ID:
            channel = await self.fetch_channel(ACHIEVEMENT_CHANNEL_ID)
            self.notification_gateway = DiscordNotificationGateway(channel)
            logging.info(f"업적 알림 채널: {ACHIEVEMENT_CHANNEL_ID}")
        else:
            self.notification_gateway = LoggingNotificationGateway()
            logging.info("ACHIEVEMENT_CHANNEL_ID 미설정, 업적 알림은 로그로만 남깁니다")

        self.achievement_service = AchievementService(
            notification_gateway=self.notification_gateway,
            event_bus=self.event_bus,
        )
        self.achievement_tracker = AchievementProgressTracker(self.event_bus, self.achievement_service)

    async def on_ready(self):
        logging.info(f"Logged in as {self.user} (ID: {self.user.id})")

    async def close(self):
        if isinstance(self.notification_gateway, DiscordNotificationGateway):
            await self.notification_gateway.flush()
        await super().close()
        await close_db()
        logging.info("데이터 베이스 연결 종료")


if __name__ == "__main__":
    if not TOKEN:
        raise RuntimeError("환경변수 DISCORD_TOKEN을 .env에 설정해주세요")

    bot = EcoHeroBot()
    bot.run(TOKEN)
