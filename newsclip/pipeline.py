"""BatchAnalyzer — fans out encoder → vision client over every uploaded image."""
import asyncio
import logging
import time

from newsclip.constants import (
    ERROR_TEXT_PREFIX,
    ERROR_TITLE,
    MSG_BATCH_DONE,
    MSG_BATCH_START,
    MSG_ERR_BATCH,
    MSG_ERR_UNKNOWN,
    MSG_FILE_FAILED,
    UPLOAD_FOLDER_NAME,
)
from newsclip.encoder import encode_image
from newsclip.errors import EmptyBatchError, NewsclipError
from newsclip.models import AnalysisResult, UploadedImage
from newsclip.vision.client import ArticleVisionClient

logger = logging.getLogger(__name__)


class BatchAnalyzer:
    """Runs one independent pipeline per image and collects a result for each.

    A failing image yields an ``Error`` row; it never aborts the batch. Results are
    published only once every image has settled and replace the previous run's.
    """

    def __init__(
        self,
        client: ArticleVisionClient,
        folder_name: str = UPLOAD_FOLDER_NAME,
    ) -> None:
        self.client = client
        self._folder_name = folder_name
        self.results: list[AnalysisResult] = []
        self.is_loading = False
        self.error: str | None = None

    async def run(self, images: list[UploadedImage]) -> list[AnalysisResult]:
        match images:
            case []:
                raise EmptyBatchError()
            case _:
                pass

        self.is_loading = True
        self.error = None
        self.results = []
        start = time.time()
        logger.info(MSG_BATCH_START, len(images))
        try:
            self.results = list(
                await asyncio.gather(*map(self._analyze_one, images))
            )
        except Exception:
            logger.exception("Failed to process files")
            self.error = MSG_ERR_BATCH
        finally:
            self.is_loading = False

        logger.info(
            MSG_BATCH_DONE,
            len(self.results),
            time.time() - start,
            sum(r.is_article for r in self.results),
            sum(r.is_error for r in self.results),
        )
        return self.results

    async def _analyze_one(self, image: UploadedImage) -> AnalysisResult:
        try:
            part = await encode_image(image)
            extraction = await self.client.analyze(part)
        except NewsclipError as exc:
            logger.warning(MSG_FILE_FAILED + ": %s", image.file_name, exc.user_message)
            return self._error_result(image, exc.user_message)
        except Exception:
            logger.exception(MSG_FILE_FAILED, image.file_name)
            return self._error_result(image, MSG_ERR_UNKNOWN)

        return AnalysisResult(
            folder_name=self._folder_name,
            file_name=image.file_name,
            title=extraction.title,
            text=extraction.text,
        )

    def _error_result(self, image: UploadedImage, message: str) -> AnalysisResult:
        return AnalysisResult(
            folder_name=self._folder_name,
            file_name=image.file_name,
            title=ERROR_TITLE,
            text=ERROR_TEXT_PREFIX + message,
        )
