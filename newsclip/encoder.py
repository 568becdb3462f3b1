"""Image encoder — UploadedImage → base64 EncodedImagePart."""
import base64
import logging

from newsclip.constants import MSG_ERR_EMPTY_FILE
from newsclip.errors import ReadFailure
from newsclip.models import EncodedImagePart, UploadedImage

logger = logging.getLogger(__name__)


async def encode_image(image: UploadedImage) -> EncodedImagePart:
    """Read the whole image and base64-encode it. Raises ReadFailure."""
    try:
        content = await image.read()
    except Exception as exc:
        logger.warning("Reading %s failed: %s", image.file_name, exc)
        raise ReadFailure() from exc

    match len(content):
        case 0:
            raise ReadFailure(MSG_ERR_EMPTY_FILE)
        case _:
            pass

    return EncodedImagePart(
        data=base64.standard_b64encode(bytes(content)).decode(),
        mime_type=image.mime_type,
    )
