"""Factory classes for creating configured service instances."""

import logging
from typing import Any, Optional

import boto3

from .logging_config import setup_logger
from .models import ThumbnailConfig
from .observability import LogContext
from .protocols import S3ClientProtocol, LoggerProtocol
from .services import ImageProcessorService, ThumbnailService


class LoggerAdapter:
    """Adapter to make standard logger compatible with LoggerProtocol."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[LogContext] = None,
        **kwargs: Any,
    ) -> None:
        exc_info = kwargs.pop("exc_info", False)
        if context is not None:
            message = context.format_message(message, **kwargs)
        self._logger.log(level, message, exc_info=exc_info)

    def debug(
        self, message: str, context: Optional[LogContext] = None, **kwargs: Any
    ) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, context, **kwargs)

    def info(
        self, message: str, context: Optional[LogContext] = None, **kwargs: Any
    ) -> None:
        """Log info message."""
        self._log(logging.INFO, message, context, **kwargs)

    def warning(
        self, message: str, context: Optional[LogContext] = None, **kwargs: Any
    ) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, context, **kwargs)

    def error(
        self, message: str, context: Optional[LogContext] = None, **kwargs: Any
    ) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, context, **kwargs)


class LoggerFactory:
    """Factory for creating logger instances."""

    @staticmethod
    def create_logger(name: str, level: Optional[str] = None) -> LoggerProtocol:
        """Create a configured logger instance."""
        return LoggerAdapter(setup_logger(name, level=level))


class S3ClientFactory:
    """Factory for creating S3 client instances."""

    @staticmethod
    def create_s3_client(**kwargs: Any) -> S3ClientProtocol:
        """Create S3 client; credentials and region come from the environment."""
        session = boto3.Session()
        return session.client("s3", **kwargs)  # type: ignore


class ThumbnailServiceFactory:
    """Factory for creating the thumbnail service."""

    @staticmethod
    def create_service(
        s3_client: Optional[S3ClientProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
        config: Optional[ThumbnailConfig] = None,
    ) -> ThumbnailService:
        """Create a fully configured thumbnail service."""
        if s3_client is None:
            s3_client = S3ClientFactory.create_s3_client()

        if logger is None:
            logger = LoggerFactory.create_logger("thumbnail-generator")

        return ThumbnailService(
            s3_client=s3_client,
            image_processor=ImageProcessorService(),
            logger=logger,
            config=config,
        )
