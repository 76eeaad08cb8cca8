"""Image and key utilities for the thumbnail generator."""

from typing import Iterable, Tuple

from PIL import Image

THUMBNAIL_FOLDER = "thumbnails/"
THUMBNAIL_SIZE = (200, 200)
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg")


def is_supported_image(
    key: str, extensions: Iterable[str] = SUPPORTED_EXTENSIONS
) -> bool:
    """Check whether ``key`` ends in one of ``extensions``, ignoring case."""
    return key.lower().endswith(tuple(ext.lower() for ext in extensions))


def derive_thumbnail_key(source_key: str, folder: str = THUMBNAIL_FOLDER) -> str:
    """
    Calculate the thumbnail key for a source object key.

    The key is lower-cased, then the thumbnail folder is placed in front of
    the file name, one directory above the immediate parent:

        "sunset.jpg"             -> "thumbnails/sunset.jpg"
        "2024/sunset.jpg"        -> "thumbnails/sunset.jpg"
        "photos/2024/sunset.jpg" -> "photosthumbnails/sunset.jpg"

    The slice before the folder stops short of the separating slash, so
    deeper keys lose it. Existing thumbnail paths rely on this layout.

    Args:
        source_key: Original S3 key
        folder: Folder inserted before the file name

    Returns:
        Destination S3 key
    """
    key = source_key.lower()
    end_slash = key.rfind("/")

    if end_slash <= 0:
        return folder + key

    name = key[end_slash + 1 :]
    begin_slash = key[: end_slash - 1].rfind("/")
    if begin_slash > 0:
        return key[:begin_slash] + folder + name
    return folder + name


def make_thumbnail(
    img: "Image.Image", size: Tuple[int, int] = THUMBNAIL_SIZE
) -> "Image.Image":
    """
    Convert an image to grayscale and resize it to exactly ``size``.

    The aspect ratio is not preserved: the image is stretched or squashed
    to fill the target box.

    Args:
        img: PIL Image to transform
        size: Target (width, height)

    Returns:
        New single-channel PIL Image
    """
    grayscale = img.convert("L")
    return grayscale.resize(size, Image.Resampling.BICUBIC)
