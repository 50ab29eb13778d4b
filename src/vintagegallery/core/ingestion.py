"""Image ingestion: turn a user-selected file into an encoded image string.

The encoded form is a ``data:`` URL embedding both the media type and the
base64 file content, so a record carries its image inline and can be
rendered without a further network fetch.

No size or type validation is performed here.  Any file, including
non-images, is accepted and encoded.
"""

import asyncio
import base64
import binascii
import io
import logging
import mimetypes
from pathlib import Path
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from .config import GalleryConfig
from .errors import ReadFailure

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:"
BASE64_MARKER = ";base64,"


class ImageIngestionPipeline:
    """Encode files into self-contained image strings.

    Reads run in a worker thread so the event loop keeps serving other
    work while a large file is loaded.
    """

    def __init__(self, config: GalleryConfig):
        self.config = config

    async def encode(self, file: str | Path | BinaryIO) -> str:
        """Read a file and return it as an encoded image string.

        Args:
            file: Filesystem path or binary file object (anything with
                ``read()``; its ``name`` attribute is used for type detection)

        Returns:
            String of the form ``data:<media-type>;base64,<content>``

        Raises:
            ReadFailure: If the file cannot be read.  No partial encoding is
                ever returned.
        """
        name = _file_name(file)
        try:
            content = await asyncio.to_thread(_read_bytes, file)
        except (OSError, ValueError) as e:
            raise ReadFailure(f"Could not read {name or 'file'}: {e}") from e

        media_type = self.detect_media_type(name, content)
        encoded = base64.b64encode(content).decode("ascii")
        logger.debug(f"Encoded {name or 'file object'} ({len(content)} bytes) as {media_type}")
        return f"{DATA_URL_PREFIX}{media_type}{BASE64_MARKER}{encoded}"

    def detect_media_type(self, name: str | None, content: bytes) -> str:
        """Work out the media type tag for a file.

        The file name wins when it carries a known extension.  Otherwise the
        content is sniffed with Pillow, and anything unrecognised falls back
        to the configured media type.
        """
        if name:
            guessed, _ = mimetypes.guess_type(name)
            if guessed:
                return guessed

        try:
            with Image.open(io.BytesIO(content)) as image:
                sniffed = image.get_format_mimetype()
        except (UnidentifiedImageError, OSError):
            sniffed = None

        return sniffed or self.config.fallback_media_type


def decode_image(encoded: str) -> Image.Image:
    """Load an encoded image string back into a Pillow image.

    Used by the view to render gallery cards and the upload preview.

    Raises:
        ReadFailure: If the string is not a base64 data URL or its content
            is not an image Pillow can open
    """
    if not encoded.startswith(DATA_URL_PREFIX) or BASE64_MARKER not in encoded:
        raise ReadFailure("Not an encoded image string")

    _, payload = encoded.split(BASE64_MARKER, 1)
    try:
        content = base64.b64decode(payload, validate=True)
        image = Image.open(io.BytesIO(content))
        image.load()
    except (binascii.Error, UnidentifiedImageError, OSError) as e:
        raise ReadFailure(f"Could not decode image: {e}") from e
    return image


def _file_name(file: str | Path | BinaryIO) -> str | None:
    if isinstance(file, (str, Path)):
        return Path(file).name
    name = getattr(file, "name", None)
    return Path(name).name if isinstance(name, str) else None


def _read_bytes(file: str | Path | BinaryIO) -> bytes:
    if isinstance(file, (str, Path)):
        return Path(file).read_bytes()
    content = file.read()
    if not isinstance(content, bytes):
        raise ValueError("file object must be opened in binary mode")
    return content
