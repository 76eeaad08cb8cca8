"""Shared data models for the thumbnail generator."""

from typing import Any, Dict, List, Tuple
from urllib.parse import unquote_plus

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ConfigurationError, EventParsingError
from .image_utils import SUPPORTED_EXTENSIONS, THUMBNAIL_FOLDER, THUMBNAIL_SIZE


class ThumbnailConfig(BaseModel):
    """Settings for thumbnail generation."""

    model_config = ConfigDict(frozen=True)

    supported_extensions: Tuple[str, ...] = SUPPORTED_EXTENSIONS
    size: Tuple[int, int] = THUMBNAIL_SIZE
    folder: str = THUMBNAIL_FOLDER
    content_type: str = "image/jpeg"

    @field_validator("supported_extensions")
    @classmethod
    def _normalize_extensions(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ConfigurationError("At least one supported extension is required")
        for ext in value:
            if not ext.startswith("."):
                raise ConfigurationError(f"Extension must start with '.': {ext!r}")
        return tuple(ext.lower() for ext in value)


class ObjectRecord(BaseModel):
    """One notification entry: the bucket and key of a created object."""

    model_config = ConfigDict(frozen=True)

    bucket: str
    key: str

    @classmethod
    def from_event_record(cls, record: Dict[str, Any]) -> "ObjectRecord":
        """Build a record from one entry of an S3 event's ``Records`` list."""
        try:
            s3 = record["s3"]
            bucket = s3["bucket"]["name"]
            key = s3["object"]["key"]
        except (KeyError, TypeError) as exc:
            raise EventParsingError(
                f"Notification record is missing bucket or key: {exc}"
            ) from exc

        # Keys arrive form-encoded in S3 notifications
        return cls(bucket=bucket, key=unquote_plus(key))


class NotificationBatch(BaseModel):
    """All object records delivered to one invocation, in order."""

    records: List[ObjectRecord] = Field(default_factory=list)

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "NotificationBatch":
        """Parse an S3 event dict; a missing ``Records`` list is an empty batch."""
        raw_records = (event or {}).get("Records") or []
        return cls(records=[ObjectRecord.from_event_record(r) for r in raw_records])

    def __len__(self) -> int:
        return len(self.records)


class ThumbnailItem(BaseModel):
    """A thumbnail to be written, once its destination key is known."""

    bucket: str
    source_key: str
    thumbnail_key: str
