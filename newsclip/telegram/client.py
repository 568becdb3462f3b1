"""TelegramClient — upload queue, batch analysis and CSV export over python-telegram-bot."""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from telegram import Bot, Document, PhotoSize, Update
from telegram.constants import ChatAction
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from newsclip.bot_client import BotClient
from newsclip.config import Config
from newsclip.constants import (
    ACCEPTED_IMAGE_TYPES,
    ALBUM_DEBOUNCE_SECONDS,
    CMD_ANALYZE,
    CMD_CLEAR,
    CMD_EXPORT,
    CMD_HELP,
    CMD_RESULTS,
    CMD_STATUS,
    CSV_FILENAME,
    MSG_ANALYZING,
    MSG_BLOCKED_CHAT,
    MSG_CLEARED,
    MSG_ERR_BATCH,
    MSG_ERR_NO_FILES,
    MSG_HELP,
    MSG_NO_RESULTS,
    MSG_QUEUED,
    MSG_SEND_FAIL,
    MSG_STATUS,
    PHOTO_MIME_TYPE,
    TELEGRAM_MAX_MESSAGE_LEN,
    UPLOAD_FILENAME,
)
from newsclip.export import chunk_messages, render_table, to_csv_bytes
from newsclip.models import ImageReader, UploadedImage
from newsclip.pipeline import BatchAnalyzer
from newsclip.telegram.activity import ChatActionIndicator

logger = logging.getLogger(__name__)

# handler body: (sender, bot) -> None
ChatCallback = Callable[[str, Bot], Awaitable[None]]


def _make_reader(attachment: Document | PhotoSize) -> ImageReader:
    """Defer the download until the image's own pipeline reads it."""
    async def _read() -> bytes:
        tg_file = await attachment.get_file()
        return bytes(await tg_file.download_as_bytearray())

    return _read


class TelegramClient(BotClient):

    def __init__(self, config: Config, analyzer: BatchAnalyzer) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = config.allowed_chat_id
        self._analyzer = analyzer
        self._app: Optional[Application] = None
        self._queues: dict[str, list[UploadedImage]] = {}
        self._ack_tasks: dict[str, asyncio.Task] = {}

    # ── BotClient interface ───────────────────────────────────────────────────

    def run(self) -> None:
        self._app = Application.builder().token(self._token).build()
        self._app.add_handler(
            TGMessageHandler(filters.PHOTO | filters.Document.IMAGE, self._make_upload_handler())
        )
        commands: dict[str, ChatCallback] = {
            CMD_ANALYZE: self.handle_analyze,
            CMD_RESULTS: self.handle_results,
            CMD_EXPORT: self.handle_export,
            CMD_CLEAR: self.handle_clear,
            CMD_STATUS: self.handle_status,
            CMD_HELP: self.handle_help,
        }
        for name, callback in commands.items():
            self._app.add_handler(CommandHandler(name, self._make_command_handler(callback)))
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return False
            case app:
                try:
                    await app.bot.send_message(chat_id=int(to), text=text)
                    return True
                except Exception as exc:
                    logger.error(MSG_SEND_FAIL, exc)
                    return False

    async def send_document(self, to: str, data: bytes, filename: str) -> bool:
        match self._app:
            case None:
                logger.error("send_document called before run()")
                return False
            case app:
                try:
                    await app.bot.send_document(chat_id=int(to), document=data, filename=filename)
                    return True
                except Exception as exc:
                    logger.error(MSG_SEND_FAIL, exc)
                    return False

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def queued(self, chat_id: str) -> int:
        return len(self._queues.get(chat_id, []))

    def _take_queue(self, chat_id: str) -> list[UploadedImage]:
        """Empty the chat's queue and drop its pending acknowledgement."""
        match self._ack_tasks.pop(chat_id, None):
            case None:
                pass
            case task:
                task.cancel()
        return self._queues.pop(chat_id, [])

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        return str(update.effective_chat.id) == self._allowed_chat_id.strip()

    def _update_to_upload(self, update: Update) -> Optional[UploadedImage]:
        msg = update.message
        if msg is None:
            return None
        match (msg.document, msg.photo):
            case (Document() as doc, _) if doc.mime_type in ACCEPTED_IMAGE_TYPES:
                extension = ACCEPTED_IMAGE_TYPES[doc.mime_type]
                return UploadedImage(
                    file_name=doc.file_name or UPLOAD_FILENAME % (doc.file_unique_id, extension),
                    mime_type=doc.mime_type,
                    read=_make_reader(doc),
                )
            case (None, [*_, largest]):
                extension = ACCEPTED_IMAGE_TYPES[PHOTO_MIME_TYPE]
                return UploadedImage(
                    file_name=UPLOAD_FILENAME % (largest.file_unique_id, extension),
                    mime_type=PHOTO_MIME_TYPE,
                    read=_make_reader(largest),
                )
            case _:
                return None

    async def _send_long(self, to: str, entries: list[str]) -> None:
        for text in chunk_messages(entries, TELEGRAM_MAX_MESSAGE_LEN):
            await self.send_message(to, text)

    # ── command bodies ───────────────────────────────────────────────────────

    async def handle_analyze(self, sender: str, bot: Bot) -> None:
        match self._take_queue(sender):
            case []:
                await self.send_message(sender, MSG_ERR_NO_FILES)
                return
            case images:
                pass

        await self.send_message(sender, MSG_ANALYZING % len(images))
        async with ChatActionIndicator(bot, sender, ChatAction.TYPING):
            results = await self._analyzer.run(images)

        match self._analyzer.error:
            case str() as error:
                await self.send_message(sender, error)
            case None:
                await self._send_long(sender, render_table(results))
                await self.send_document(sender, to_csv_bytes(results), CSV_FILENAME)

    async def handle_results(self, sender: str, bot: Bot) -> None:
        await self._send_long(sender, render_table(self._analyzer.results))

    async def handle_export(self, sender: str, bot: Bot) -> None:
        match self._analyzer.results:
            case []:
                await self.send_message(sender, MSG_NO_RESULTS)
            case results:
                await self.send_document(sender, to_csv_bytes(results), CSV_FILENAME)

    async def handle_clear(self, sender: str, bot: Bot) -> None:
        self._take_queue(sender)
        await self.send_message(sender, MSG_CLEARED)

    async def handle_status(self, sender: str, bot: Bot) -> None:
        client = self._analyzer.client
        await self.send_message(
            sender,
            MSG_STATUS
            % (client.backend, client.model, self.queued(sender), len(self._analyzer.results)),
        )

    async def handle_help(self, sender: str, bot: Bot) -> None:
        await self.send_message(sender, MSG_HELP)

    async def _ack_queued(self, sender: str) -> None:
        await asyncio.sleep(ALBUM_DEBOUNCE_SECONDS)
        self._ack_tasks.pop(sender, None)
        await self.send_message(sender, MSG_QUEUED % self.queued(sender))

    # ── internal handler factory ──────────────────────────────────────────────

    def _make_upload_handler(self) -> Callable:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass

            sender = str(update.effective_chat.id)
            match self._update_to_upload(update):
                case None:
                    return
                case image:
                    self._queues.setdefault(sender, []).append(image)

            # One acknowledgement per album burst.
            match self._ack_tasks.get(sender):
                case None:
                    pass
                case pending:
                    pending.cancel()
            self._ack_tasks[sender] = asyncio.create_task(self._ack_queued(sender))

        return _handler

    def _make_command_handler(self, callback: ChatCallback) -> Callable:
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass

            sender = str(update.effective_chat.id)
            try:
                await callback(sender, context.bot)
            except Exception:
                logger.exception("Command handler failed")
                await self.send_message(sender, MSG_ERR_BATCH)

        return _handler
