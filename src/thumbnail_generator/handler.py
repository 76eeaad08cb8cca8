"""AWS Lambda entry point for S3 object-created notifications."""

from typing import Any, Dict, Optional

from .core import NotificationBatch
from .core.factories import ThumbnailServiceFactory
from .core.services import ThumbnailService


class ThumbnailHandler:
    """Callable handler bound to a thumbnail service.

    The service, and with it the S3 client, is built on first use and then
    reused by warm invocations of the same process.
    """

    def __init__(self, service: Optional[ThumbnailService] = None):
        self._service = service

    @property
    def service(self) -> ThumbnailService:
        if self._service is None:
            self._service = ThumbnailServiceFactory.create_service()
        return self._service

    def __call__(self, event: Dict[str, Any], context: Any = None) -> None:
        batch = NotificationBatch.from_event(event)
        request_id = getattr(context, "aws_request_id", None)
        self.service.process_batch(batch, request_id=request_id)
        return None


_default_handler = ThumbnailHandler()


def lambda_handler(event: Dict[str, Any], context: Any) -> None:
    """Create thumbnails for every JPEG in the notification."""
    return _default_handler(event, context)
