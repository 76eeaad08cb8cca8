"""Service implementations for the thumbnail generator."""

import io
from contextlib import closing
from typing import List, Optional, Tuple

from PIL import Image

from .exceptions import with_error_handling
from .image_utils import (
    THUMBNAIL_SIZE,
    derive_thumbnail_key,
    is_supported_image,
    make_thumbnail,
)
from .models import NotificationBatch, ObjectRecord, ThumbnailConfig, ThumbnailItem
from .observability import LogContext
from .protocols import LoggerProtocol, RecordProcessor, S3ClientProtocol


@with_error_handling
def download_object(s3_client: S3ClientProtocol, bucket: str, key: str) -> bytes:
    """Read the full body of ``s3://bucket/key`` into memory."""
    response = s3_client.get_object(Bucket=bucket, Key=key)
    with closing(response["Body"]) as body:
        return body.read()


@with_error_handling
def upload_object(
    s3_client: S3ClientProtocol,
    bucket: str,
    key: str,
    data: bytes,
    content_type: str,
) -> None:
    """Write ``data`` to ``s3://bucket/key``, overwriting any existing object."""
    s3_client.put_object(Bucket=bucket, Key=key, Body=data, ContentType=content_type)


class ImageProcessorService:
    """Pure image processing service with no I/O dependencies."""

    @with_error_handling
    def create_thumbnail(
        self, image_bytes: bytes, size: Tuple[int, int] = THUMBNAIL_SIZE
    ) -> bytes:
        """Decode image bytes, grayscale and resize them, encode as JPEG."""
        with Image.open(io.BytesIO(image_bytes)) as image:
            image.load()
            thumbnail = make_thumbnail(image, size)

        output_stream = io.BytesIO()
        with thumbnail:
            thumbnail.save(output_stream, format="JPEG")
        output_stream.seek(0)
        return output_stream.getvalue()


class ThumbnailService(RecordProcessor):
    """Creates a thumbnail for every supported object in a notification batch.

    The batch is processed sequentially and stops at the first failure:
    thumbnails written before the failing record are kept, records after
    it are never attempted, and the error is re-raised to the caller.
    """

    def __init__(
        self,
        s3_client: S3ClientProtocol,
        image_processor: ImageProcessorService,
        logger: LoggerProtocol,
        config: Optional[ThumbnailConfig] = None,
    ):
        self._s3_client = s3_client
        self._image_processor = image_processor
        self._logger = logger
        self._config = config or ThumbnailConfig()

    def process_record(
        self, record: ObjectRecord, log_context: Optional[LogContext] = None
    ) -> Optional[ThumbnailItem]:
        """Create and upload the thumbnail for one record."""
        context = (log_context or LogContext()).with_metadata(
            bucket=record.bucket, key=record.key
        )
        self._logger.info(f"----> File: {record.key}", context)

        if not is_supported_image(record.key, self._config.supported_extensions):
            self._logger.info(
                f"File extension is not supported - {record.key}", context
            )
            return None

        thumbnail_key = derive_thumbnail_key(record.key, self._config.folder)
        if thumbnail_key == record.key:
            self._logger.warning(
                f"Thumbnail key equals source key, skipping - {record.key}", context
            )
            return None

        self._logger.debug(
            "Downloading image", context.with_operation("download_image")
        )
        image_bytes = download_object(self._s3_client, record.bucket, record.key)

        self._logger.debug(
            "Creating thumbnail", context.with_operation("create_thumbnail")
        )
        thumbnail_bytes = self._image_processor.create_thumbnail(
            image_bytes, self._config.size
        )

        self._logger.info(f"----> Thumbnail file Key: {thumbnail_key}", context)
        upload_object(
            self._s3_client,
            record.bucket,
            thumbnail_key,
            thumbnail_bytes,
            self._config.content_type,
        )

        return ThumbnailItem(
            bucket=record.bucket, source_key=record.key, thumbnail_key=thumbnail_key
        )

    def process_batch(
        self, batch: NotificationBatch, request_id: Optional[str] = None
    ) -> List[ThumbnailItem]:
        """Process records in order, stopping at the first failure."""
        log_context = LogContext(component="thumbnail_service")
        if request_id:
            log_context.correlation_id = request_id

        if not batch.records:
            self._logger.info("Notification contained no records", log_context)
            return []

        uploaded: List[ThumbnailItem] = []
        for record in batch.records:
            try:
                item = self.process_record(record, log_context)
            except Exception as exc:
                error_context = log_context.with_metadata(
                    bucket=record.bucket, key=record.key
                )
                self._logger.error(
                    f"Error getting object {record.key} from bucket {record.bucket}",
                    error_context,
                )
                self._logger.error(
                    "Make sure they exist and your bucket is in the same region "
                    "as this function",
                    error_context,
                )
                self._logger.error(str(exc), error_context, exc_info=True)
                raise

            if item is not None:
                uploaded.append(item)

        self._logger.info(f"Processed {len(batch)}", log_context)
        return uploaded
