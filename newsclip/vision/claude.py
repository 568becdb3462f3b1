"""ClaudeVisionClient — Anthropic Claude backend; the schema is enforced through a forced tool call."""
import logging

from anthropic import AsyncAnthropic

from newsclip.constants import (
    ARTICLE_EXTRACTION_PROMPT,
    ARTICLE_TOOL_DESCRIPTION,
    ARTICLE_TOOL_NAME,
    BACKEND_CLAUDE,
    CLAUDE_MAX_TOKENS,
    CLAUDE_VISION_MODEL,
)
from newsclip.errors import TransportFailure
from newsclip.models import ArticleExtraction, EncodedImagePart
from newsclip.vision.client import ARTICLE_SCHEMA, ArticleVisionClient, parse_extraction

logger = logging.getLogger(__name__)


class ClaudeVisionClient(ArticleVisionClient):
    backend = BACKEND_CLAUDE

    @property
    def default_model(self) -> str:
        return CLAUDE_VISION_MODEL

    async def analyze(self, image: EncodedImagePart) -> ArticleExtraction:
        client = AsyncAnthropic(api_key=self._api_key)
        try:
            message = await client.messages.create(
                model=self.model,
                max_tokens=CLAUDE_MAX_TOKENS,
                tools=[
                    {
                        "name": ARTICLE_TOOL_NAME,
                        "description": ARTICLE_TOOL_DESCRIPTION,
                        "input_schema": ARTICLE_SCHEMA,
                    }
                ],
                tool_choice={"type": "tool", "name": ARTICLE_TOOL_NAME},
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": ARTICLE_EXTRACTION_PROMPT},
                            {
                                "type": "image",
                                "source": {
                                    "type": "base64",
                                    "media_type": image.mime_type,
                                    "data": image.data,
                                },
                            },
                        ],
                    }
                ],
            )
        except Exception as exc:
            logger.exception("Error calling Claude API")
            raise TransportFailure() from exc

        tool_input = next(
            (block.input for block in message.content if block.type == "tool_use"),
            None,
        )
        return parse_extraction(tool_input)
