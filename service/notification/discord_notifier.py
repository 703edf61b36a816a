"""
디스코드 알림 게이트웨이

업적 달성 알림을 지정된 채널에 임베드로 전송합니다.
전송은 실행 중인 이벤트 루프의 백그라운드 태스크로 예약되므로
업적 진행도 업데이트가 전송 지연이나 실패에 영향을 받지 않습니다.
"""
import asyncio
import logging
from typing import Set

import discord

from config.notification import NOTIFICATION

logger = logging.getLogger(__name__)


def create_achievement_embed(title: str, description: str) -> discord.Embed:
    """
    업적 달성 임베드 생성

    Args:
        title: 업적 제목
        description: 업적 설명

    Returns:
        알림용 임베드
    """
    return discord.Embed(
        title=NOTIFICATION.ACHIEVEMENT_TITLE,
        description=NOTIFICATION.ACHIEVEMENT_BODY_FORMAT.format(title=title, description=description),
        color=NOTIFICATION.ACHIEVEMENT_EMBED_COLOR,
    )


class DiscordNotificationGateway:
    """
    채널 기반 업적 알림

    Args:
        channel: 알림을 보낼 채널 (TextChannel, DMChannel, User 등 Messageable)
    """

    def __init__(self, channel: discord.abc.Messageable):
        self.channel = channel
        self._pending: Set[asyncio.Task] = set()

    def notify(self, title: str, description: str) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop, achievement notification dropped: {title}")
            return

        embed = create_achievement_embed(title, description)
        task = loop.create_task(self._send(embed))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _send(self, embed: discord.Embed) -> None:
        try:
            await self.channel.send(embed=embed)
        except discord.HTTPException as e:
            logger.warning(f"Failed to send achievement notification: {e}")

    @property
    def pending_count(self) -> int:
        """전송 대기 중인 알림 수"""
        return len(self._pending)

    async def flush(self) -> None:
        """전송 중인 알림이 모두 끝날 때까지 대기 (종료 시 사용)"""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
