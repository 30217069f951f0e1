"""Reading and writing image files."""

import logging
import os
import tempfile
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import InputError, OutputError

logger = logging.getLogger(__name__)


def load_image(path) -> Image.Image:
    """Open an image file and return it in RGB mode.

    Raises:
        InputError: If the file is missing, unreadable or not an image
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img = img.convert("RGB")
    except FileNotFoundError:
        raise InputError(path, "no such file") from None
    except UnidentifiedImageError:
        raise InputError(path, "unsupported or unrecognized image format") from None
    except Image.DecompressionBombError as e:
        raise InputError(path, f"image too large: {e}") from e
    except (OSError, ValueError) as e:
        raise InputError(path, str(e)) from e
    logger.info(f"Loaded {path} ({img.width}x{img.height})")
    return img


def image_format(path: Path) -> str:
    """Pillow format name for the extension of ``path``."""
    extensions = Image.registered_extensions()
    fmt = extensions.get(path.suffix.lower())
    if fmt is None:
        raise OutputError(path, f"unsupported file extension {path.suffix!r}")
    return fmt


def save_image(img: Image.Image, path) -> None:
    """Write ``img`` to ``path`` without ever leaving a half-written file there.

    The image goes to a temporary file next to the destination first and is
    then moved over it.

    Raises:
        OutputError: If the extension is unknown or the file cannot be written
    """
    path = Path(path)
    fmt = image_format(path)
    directory = path.parent
    if not directory.is_dir():
        raise OutputError(path, f"directory {directory} does not exist")

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.stem}-", suffix=path.suffix, dir=directory
        )
    except OSError as e:
        raise OutputError(path, e.strerror or str(e)) from e

    try:
        with os.fdopen(fd, "wb") as f:
            img.save(f, format=fmt)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except (OSError, ValueError, KeyError) as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise OutputError(path, str(e)) from e
    logger.info(f"Saved: {path}")
