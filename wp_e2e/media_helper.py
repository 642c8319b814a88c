"""
Upload fixtures for media tests.

Creates a small, uniquely coloured PNG on disk so every upload is a new
file as far as the media library is concerned.
"""

from __future__ import annotations

import logging
import os
import random
import tempfile
import uuid
from dataclasses import dataclass

from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileDetails:
    """
    An image fixture on disk.

    Attributes:
        image_name: Name without extension; the media library uses it as alt text.
        file_name: Name with extension.
        file_path: Absolute path to the file.
        owns_directory: True when the containing directory was created for
            this file and is removed with it.
    """

    image_name: str
    file_name: str
    file_path: str
    owns_directory: bool = False


def create_file(directory: str | None = None, size: int = 64) -> FileDetails:
    """
    Write a new image fixture.

    Args:
        directory: Where to write it; a fresh temporary directory by default.
        size: Width and height in pixels.

    Returns:
        Details of the written file.
    """
    image_name = f"image-{uuid.uuid4().hex[:12]}"
    file_name = f"{image_name}.png"
    owns_directory = directory is None
    target_dir = tempfile.mkdtemp(prefix="wp-e2e-media-") if owns_directory else directory
    file_path = os.path.join(target_dir, file_name)

    colour = (random.randint(0, 255), random.randint(0, 255), random.randint(0, 255))
    image = Image.new("RGB", (size, size), color=colour)
    image.save(file_path, format="PNG")

    logger.debug("Created upload fixture %s", file_path)
    return FileDetails(
        image_name=image_name,
        file_name=file_name,
        file_path=file_path,
        owns_directory=owns_directory,
    )


def delete_file(file_details: FileDetails) -> None:
    """
    Remove an image fixture from disk, and its directory if it created one.

    Raises:
        OSError: If the file or its directory cannot be removed.
    """
    os.remove(file_details.file_path)
    if file_details.owns_directory:
        os.rmdir(os.path.dirname(file_details.file_path))
    logger.debug("Deleted upload fixture %s", file_details.file_path)
