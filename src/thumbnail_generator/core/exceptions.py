"""Custom exceptions and error translation for the thumbnail generator."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from botocore.exceptions import BotoCoreError, ClientError
from PIL import UnidentifiedImageError

from .logging_config import get_logger


class ThumbnailGeneratorError(Exception):
    """Base exception for all thumbnail generator errors."""


class S3Error(ThumbnailGeneratorError):
    """Error raised when fetching or storing an object fails."""


class ImageProcessingError(ThumbnailGeneratorError):
    """Error raised when an image cannot be decoded, transformed or encoded."""


class EventParsingError(ThumbnailGeneratorError):
    """Error raised for a notification record missing its bucket or key."""


class ConfigurationError(ThumbnailGeneratorError):
    """Error raised for invalid configuration options."""


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Translate storage and image library errors into pipeline errors.

    Errors that are already ``ThumbnailGeneratorError`` pass through
    untouched; anything unrecognised is re-raised as is.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # type: ignore[override]
        logger = get_logger("thumbnail-generator.errors")
        try:
            return func(*args, **kwargs)
        except ThumbnailGeneratorError:
            raise
        except (ClientError, BotoCoreError) as exc:
            logger.debug(f"S3 call failed in {func.__name__}: {exc}")
            raise S3Error(f"S3 operation failed in {func.__name__}: {exc}") from exc
        except (UnidentifiedImageError, OSError, SyntaxError) as exc:
            logger.debug(f"Image handling failed in {func.__name__}: {exc}")
            raise ImageProcessingError(
                f"Image processing failed in {func.__name__}: {exc}"
            ) from exc

    return wrapper  # type: ignore[return-value]
