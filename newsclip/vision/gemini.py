"""GeminiVisionClient — Google Gemini backend with a JSON response schema."""
import base64
import logging

from google import genai
from google.genai import types

from newsclip.constants import ARTICLE_EXTRACTION_PROMPT, BACKEND_GEMINI, GEMINI_VISION_MODEL
from newsclip.errors import TransportFailure
from newsclip.models import ArticleExtraction, EncodedImagePart
from newsclip.vision.client import ARTICLE_SCHEMA, ArticleVisionClient, parse_extraction

logger = logging.getLogger(__name__)

_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        name: types.Schema(type=types.Type.STRING, description=field["description"])
        for name, field in ARTICLE_SCHEMA["properties"].items()
    },
    required=ARTICLE_SCHEMA["required"],
)


class GeminiVisionClient(ArticleVisionClient):
    backend = BACKEND_GEMINI

    @property
    def default_model(self) -> str:
        return GEMINI_VISION_MODEL

    async def analyze(self, image: EncodedImagePart) -> ArticleExtraction:
        client = genai.Client(api_key=self._api_key)
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=[
                    types.Part.from_text(text=ARTICLE_EXTRACTION_PROMPT),
                    types.Part.from_bytes(
                        data=base64.standard_b64decode(image.data),
                        mime_type=image.mime_type,
                    ),
                ],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=_RESPONSE_SCHEMA,
                ),
            )
        except Exception as exc:
            logger.exception("Error calling Gemini API")
            raise TransportFailure() from exc
        return parse_extraction(response.text)
