"""Image acquisition: decode a file or raw bytes into a pixel surface."""

import io
import logging
import os

from PIL import Image

from .errors import ImageDecodeError

logger = logging.getLogger(__name__)


def load_image(source):
    """Decode ``source`` (a path or raw bytes) into a fully loaded PIL image.

    Raises:
        ImageDecodeError: the file is missing, unreadable or not an image
    """
    if isinstance(source, (bytes, bytearray)):
        stream = io.BytesIO(source)
        label = f"<{len(source)} bytes>"
    else:
        stream = os.fspath(source)
        label = stream

    try:
        image = Image.open(stream)
        image.load()
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageDecodeError(details={"source": label, "original": str(exc)}) from exc

    logger.debug("Decoded %s: %dx%d %s", label, image.width, image.height, image.mode)
    return image
