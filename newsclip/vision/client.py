"""ArticleVisionClient — abstract base for article extraction backends."""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from newsclip.errors import SchemaFailure
from newsclip.models import ArticleExtraction, EncodedImagePart
from newsclip.text import reflow_paragraphs

logger = logging.getLogger(__name__)

ARTICLE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {
            "type": "string",
            "description": "The single largest, most prominent headline of the article.",
        },
        "text": {
            "type": "string",
            "description": "The article body, reflowed into paragraphs separated by one blank line.",
        },
    },
    "required": ["title", "text"],
}


def parse_extraction(payload: str | dict | None) -> ArticleExtraction:
    """Validate a model reply (JSON text or already-decoded object). Raises SchemaFailure."""
    match payload:
        case str() as raw:
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as exc:
                logger.error("Model reply is not JSON: %.200r", raw)
                raise SchemaFailure() from exc
        case dict():
            data = payload
        case _:
            logger.error("Model reply is empty or of unexpected type: %r", type(payload))
            raise SchemaFailure()

    match data:
        case {"title": str() as title, "text": str() as text}:
            return ArticleExtraction(title=title.strip(), text=reflow_paragraphs(text))
        case _:
            logger.error("Model reply does not match the article schema: %.200r", data)
            raise SchemaFailure()


class ArticleVisionClient(ABC):
    backend: str = ""

    def __init__(self, api_key: str, model: str | None = None) -> None:
        self._api_key = api_key
        self.model = model or self.default_model

    @property
    @abstractmethod
    def default_model(self) -> str: ...

    @abstractmethod
    async def analyze(self, image: EncodedImagePart) -> ArticleExtraction:
        """Extract the matching article's title and text. Raises AnalysisFailure."""
        ...
