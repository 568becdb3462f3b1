"""Error taxonomy — every failure carries a message that is safe to show the user."""
from newsclip.constants import (
    MSG_ERR_MODEL,
    MSG_ERR_NO_FILES,
    MSG_ERR_READ,
)


class NewsclipError(Exception):
    default_message = ""

    def __init__(self, user_message: str | None = None) -> None:
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class StartupConfigError(NewsclipError, ValueError):
    """Missing or invalid startup configuration. Fatal."""


class EmptyBatchError(NewsclipError, ValueError):
    default_message = MSG_ERR_NO_FILES


class ReadFailure(NewsclipError):
    default_message = MSG_ERR_READ


class AnalysisFailure(NewsclipError):
    default_message = MSG_ERR_MODEL


class TransportFailure(AnalysisFailure):
    """The model endpoint could not be reached or returned an error."""


class SchemaFailure(AnalysisFailure):
    """The model reply was not a JSON object with string title and text."""
