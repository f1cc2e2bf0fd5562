import logging
import os
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .. import config


def format_hint(name: str) -> str:
    ext = os.path.splitext(name)[1].lower()
    return config.IMAGE_FORMAT_HINTS.get(ext, config.DEFAULT_IMAGE_FORMAT)


def load_image(path: Path) -> Optional[Image.Image]:
    """Returns the decoded photo, or None if it is missing or unreadable."""
    path = Path(path)
    if not path.exists():
        logging.warning(f"File {path} not found")
        return None

    try:
        with Image.open(path, formats=[format_hint(path.name)]) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, OSError) as e:
        logging.warning(f"Cannot read image {path}: {e}")
        return None
