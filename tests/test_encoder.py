"""Image encoder tests."""
import base64

import pytest

from newsclip.constants import MSG_ERR_EMPTY_FILE, MSG_ERR_READ
from newsclip.encoder import encode_image
from newsclip.errors import ReadFailure
from newsclip.models import UploadedImage


def make_image(content: bytes = b"\x89PNG-data", mime_type: str = "image/png") -> UploadedImage:
    async def _read() -> bytes:
        return content

    return UploadedImage(file_name="page1.png", mime_type=mime_type, read=_read)


async def test_encode_image_base64_encodes_whole_content():
    part = await encode_image(make_image(b"\x00\x01binary\xff"))

    assert base64.standard_b64decode(part.data) == b"\x00\x01binary\xff"


async def test_encode_image_preserves_mime_type():
    part = await encode_image(make_image(mime_type="image/webp"))

    assert part.mime_type == "image/webp"


async def test_encode_image_accepts_bytearray():
    part = await encode_image(make_image(bytearray(b"abc")))

    assert part.data == base64.standard_b64encode(b"abc").decode()


async def test_encode_image_read_error_raises_read_failure():
    async def _broken() -> bytes:
        raise OSError("disk gone")

    image = UploadedImage(file_name="bad.jpg", mime_type="image/jpeg", read=_broken)

    with pytest.raises(ReadFailure) as exc_info:
        await encode_image(image)

    assert exc_info.value.user_message == MSG_ERR_READ
    assert isinstance(exc_info.value.__cause__, OSError)


async def test_encode_image_empty_file_raises_read_failure():
    with pytest.raises(ReadFailure, match=MSG_ERR_EMPTY_FILE):
        await encode_image(make_image(b""))


def test_uploaded_image_is_immutable():
    image = make_image()

    with pytest.raises(Exception):
        image.file_name = "other.png"
