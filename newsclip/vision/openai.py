"""OpenAIVisionClient — OpenAI GPT-4o backend with a strict json_schema response format."""
import logging

from openai import AsyncOpenAI

from newsclip.constants import (
    ARTICLE_EXTRACTION_PROMPT,
    ARTICLE_SCHEMA_NAME,
    BACKEND_OPENAI,
    OPENAI_VISION_MODEL,
)
from newsclip.errors import TransportFailure
from newsclip.models import ArticleExtraction, EncodedImagePart
from newsclip.vision.client import ARTICLE_SCHEMA, ArticleVisionClient, parse_extraction

logger = logging.getLogger(__name__)

# Strict mode rejects schemas that allow extra keys.
_STRICT_SCHEMA = {**ARTICLE_SCHEMA, "additionalProperties": False}


class OpenAIVisionClient(ArticleVisionClient):
    backend = BACKEND_OPENAI

    @property
    def default_model(self) -> str:
        return OPENAI_VISION_MODEL

    async def analyze(self, image: EncodedImagePart) -> ArticleExtraction:
        client = AsyncOpenAI(api_key=self._api_key)
        try:
            response = await client.chat.completions.create(
                model=self.model,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": ARTICLE_SCHEMA_NAME,
                        "strict": True,
                        "schema": _STRICT_SCHEMA,
                    },
                },
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": ARTICLE_EXTRACTION_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": f"data:{image.mime_type};base64,{image.data}"
                                },
                            },
                        ],
                    }
                ],
            )
        except Exception as exc:
            logger.exception("Error calling OpenAI API")
            raise TransportFailure() from exc
        match response.choices:
            case [first, *_]:
                return parse_extraction(first.message.content)
            case _:
                return parse_extraction(None)
