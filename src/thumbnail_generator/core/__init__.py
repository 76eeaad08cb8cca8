"""Core utilities and shared components for the thumbnail generator."""

from .image_utils import (
    derive_thumbnail_key,
    is_supported_image,
    make_thumbnail,
)
from .logging_config import get_logger, setup_logger
from .exceptions import (
    ThumbnailGeneratorError,
    ImageProcessingError,
    S3Error,
    EventParsingError,
    ConfigurationError,
    with_error_handling,
)
from .models import NotificationBatch, ObjectRecord, ThumbnailConfig, ThumbnailItem

__all__ = [
    "NotificationBatch",
    "ObjectRecord",
    "ThumbnailConfig",
    "ThumbnailItem",
    "derive_thumbnail_key",
    "is_supported_image",
    "make_thumbnail",
    "setup_logger",
    "get_logger",
    "ThumbnailGeneratorError",
    "ImageProcessingError",
    "S3Error",
    "EventParsingError",
    "ConfigurationError",
    "with_error_handling",
]
