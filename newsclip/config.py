from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from newsclip.constants import (
    BACKEND_CLAUDE,
    BACKEND_GEMINI,
    BACKEND_OPENAI,
    MSG_ERR_NO_CREDENTIAL,
)
from newsclip.errors import StartupConfigError


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_id: str
    log_level: str
    gemini_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    vision_model: Optional[str] = None

    @property
    def vision_backend(self) -> str:
        match (self.gemini_api_key, self.anthropic_api_key, self.openai_api_key):
            case (str() as k, _, _) if k:
                return BACKEND_GEMINI
            case (_, str() as k, _) if k:
                return BACKEND_CLAUDE
            case _:
                return BACKEND_OPENAI

    @property
    def vision_api_key(self) -> str:
        return {
            BACKEND_GEMINI: self.gemini_api_key,
            BACKEND_CLAUDE: self.anthropic_api_key,
            BACKEND_OPENAI: self.openai_api_key,
        }[self.vision_backend] or ""

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        return cls._validate(
            telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN"),
            allowed_chat_id=os.getenv("ALLOWED_CHAT_ID"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            vision_model=os.getenv("VISION_MODEL") or None,
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        log_level: str,
        gemini_api_key: Optional[str],
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        vision_model: Optional[str],
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise StartupConfigError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match allowed_chat_id:
            case None | "":
                raise StartupConfigError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass

        match (gemini_api_key, anthropic_api_key, openai_api_key):
            case (None, None, None):
                raise StartupConfigError(MSG_ERR_NO_CREDENTIAL)
            case _:
                pass

        return Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            log_level=log_level,
            gemini_api_key=gemini_api_key,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            vision_model=vision_model,
        )
