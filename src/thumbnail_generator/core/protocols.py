"""Protocol definitions for dependency injection and testability."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol

from .models import NotificationBatch, ObjectRecord, ThumbnailItem


class S3ClientProtocol(Protocol):
    """The two S3 operations the handler needs."""

    def get_object(self, Bucket: str, Key: str) -> Dict[str, Any]:
        """Get object from S3."""
        ...

    def put_object(
        self, Bucket: str, Key: str, Body: bytes, ContentType: str
    ) -> Dict[str, Any]:
        """Put object to S3."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log error message."""
        ...


class RecordProcessor(ABC):
    """Abstract processor turning notification records into thumbnails."""

    @abstractmethod
    def process_record(self, record: ObjectRecord) -> Optional[ThumbnailItem]:
        """Process one record; ``None`` means it was skipped."""
        ...

    @abstractmethod
    def process_batch(self, batch: NotificationBatch) -> List[ThumbnailItem]:
        """Process every record of a batch in order."""
        ...
