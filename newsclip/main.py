"""Entry point — wires Config → vision client → BatchAnalyzer → TelegramClient."""
import logging

from rich.logging import RichHandler

from newsclip.config import Config
from newsclip.constants import (
    BACKEND_CLAUDE,
    BACKEND_GEMINI,
    BACKEND_OPENAI,
    MSG_BACKEND_SELECTED,
    MSG_BOT_STARTING,
)
from newsclip.pipeline import BatchAnalyzer
from newsclip.telegram.client import TelegramClient
from newsclip.vision.claude import ClaudeVisionClient
from newsclip.vision.client import ArticleVisionClient
from newsclip.vision.gemini import GeminiVisionClient
from newsclip.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


_BACKENDS: dict[str, type[ArticleVisionClient]] = {
    BACKEND_GEMINI: GeminiVisionClient,
    BACKEND_CLAUDE: ClaudeVisionClient,
    BACKEND_OPENAI: OpenAIVisionClient,
}


def build_vision_client(config: Config) -> ArticleVisionClient:
    return _BACKENDS[config.vision_backend](config.vision_api_key, config.vision_model)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    vision = build_vision_client(config)
    logger.info(MSG_BACKEND_SELECTED, vision.backend, vision.model)

    client = TelegramClient(config, BatchAnalyzer(vision))
    client.run()


if __name__ == "__main__":
    main()
