from dataclasses import dataclass
from typing import Awaitable, Callable

from newsclip.constants import ERROR_TITLE, NOT_FOUND_TEXT

# Reads the whole image; called once, inside that file's own pipeline.
ImageReader = Callable[[], Awaitable[bytes]]


@dataclass(frozen=True)
class UploadedImage:
    file_name: str
    mime_type: str
    read: ImageReader


@dataclass(frozen=True)
class EncodedImagePart:
    data: str
    mime_type: str


@dataclass(frozen=True)
class ArticleExtraction:
    title: str
    text: str


@dataclass(frozen=True)
class AnalysisResult:
    folder_name: str
    file_name: str
    title: str
    text: str

    @property
    def is_error(self) -> bool:
        return self.title == ERROR_TITLE

    @property
    def is_article(self) -> bool:
        """True when the row holds real article text, not an error or the not-found sentinel."""
        return not self.is_error and self.text != NOT_FOUND_TEXT
