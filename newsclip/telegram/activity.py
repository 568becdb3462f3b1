"""Busy indicator for a running batch: repeats a Telegram chat action until the batch settles."""
import asyncio
import logging

from telegram import Bot
from telegram.constants import ChatAction

from newsclip.bot_client import ActivityIndicator
from newsclip.constants import TELEGRAM_ACTION_INTERVAL

logger = logging.getLogger(__name__)


class ChatActionIndicator(ActivityIndicator):
    """``async with ChatActionIndicator(bot, chat_id): await batch``"""

    def __init__(
        self,
        bot: Bot,
        chat_id: str,
        action: str = ChatAction.TYPING,
        interval: float = TELEGRAM_ACTION_INTERVAL,
    ) -> None:
        self._bot = bot
        self._chat_id = int(chat_id)
        self._action = action
        self._interval = interval
        self._done = asyncio.Event()
        self._pulse: asyncio.Task | None = None
        self.sent = 0

    @property
    def active(self) -> bool:
        return self._pulse is not None and not self._pulse.done()

    async def _send_action(self) -> None:
        try:
            await self._bot.send_chat_action(chat_id=self._chat_id, action=self._action)
            self.sent += 1
        except Exception as exc:
            logger.debug("Chat action failed: %s", exc)

    async def _repeat(self) -> None:
        while not self._done.is_set():
            await self._send_action()
            try:
                await asyncio.wait_for(self._done.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                continue

    async def start(self) -> None:
        if self.active:
            return
        self._done.clear()
        self._pulse = asyncio.create_task(self._repeat())

    async def stop(self) -> None:
        self._done.set()
        match self._pulse:
            case None:
                return
            case pulse:
                self._pulse = None
                await pulse
