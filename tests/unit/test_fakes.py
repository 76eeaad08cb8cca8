"""Tests for fake implementations to ensure they work correctly."""

import io

import pytest
from botocore.exceptions import ClientError
from PIL import Image

from thumbnail_generator.core.observability import LogContext
from thumbnail_generator.testing.fakes import (
    FakeS3Client,
    FakeLogger,
    create_test_image,
    make_s3_event,
    setup_test_s3_environment,
)


class TestFakeS3Client:
    """Tests for FakeS3Client to ensure it behaves correctly."""

    def test_create_bucket(self):
        client = FakeS3Client()

        bucket = client.create_bucket("test-bucket")

        assert bucket.name == "test-bucket"
        assert len(bucket.objects) == 0
        assert client.get_bucket("test-bucket") is bucket

    def test_get_object_success(self):
        client = FakeS3Client()
        client.create_bucket("test-bucket").add_object("test.jpg", b"data")

        response = client.get_object(Bucket="test-bucket", Key="test.jpg")

        assert response["Body"].read() == b"data"
        assert response["ContentLength"] == 4
        assert client.get_calls == [("test-bucket", "test.jpg")]

    def test_get_object_not_found(self):
        client = FakeS3Client()
        client.create_bucket("test-bucket")

        with pytest.raises(ClientError) as excinfo:
            client.get_object(Bucket="test-bucket", Key="nonexistent.jpg")

        assert excinfo.value.response["Error"]["Code"] == "NoSuchKey"

    def test_get_object_bucket_not_found(self):
        client = FakeS3Client()

        with pytest.raises(ClientError) as excinfo:
            client.get_object(Bucket="nonexistent", Key="test.jpg")

        assert excinfo.value.response["Error"]["Code"] == "NoSuchBucket"

    def test_put_object_success(self):
        client = FakeS3Client()
        client.create_bucket("test-bucket")

        response = client.put_object(
            Bucket="test-bucket", Key="t.jpg", Body=b"x", ContentType="image/jpeg"
        )

        assert response["ResponseMetadata"]["HTTPStatusCode"] == 200
        assert client.get_bucket("test-bucket").get_object("t.jpg").body == b"x"
        assert client.put_calls == [("test-bucket", "t.jpg")]

    def test_fail_on_keys(self):
        client = setup_test_s3_environment()
        client.fail_on("sunset.jpg", code="SlowDown")

        with pytest.raises(ClientError) as excinfo:
            client.get_object(Bucket="imgs", Key="sunset.jpg")

        assert excinfo.value.response["Error"]["Code"] == "SlowDown"
        assert client.get_calls == [("imgs", "sunset.jpg")]
        # other keys are unaffected
        client.get_object(Bucket="imgs", Key="logo.png")


class TestFakeLogger:
    """Tests for FakeLogger."""

    def test_records_levels_and_context(self):
        logger = FakeLogger()
        context = LogContext(correlation_id="c1").with_metadata(key="x.jpg")

        logger.info("hello", context)
        logger.error("boom", exc_info=True)

        assert logger.messages() == ["hello", "boom"]
        assert logger.get_logs("INFO")[0]["correlation_id"] == "c1"
        assert logger.get_logs("INFO")[0]["key"] == "x.jpg"
        assert logger.get_logs("ERROR")[0]["exc_info"] is True


class TestHelpers:
    """Tests for image and event builders."""

    def test_create_test_image(self):
        data = create_test_image(120, 80)

        with Image.open(io.BytesIO(data)) as image:
            assert image.format == "JPEG"
            assert image.size == (120, 80)

    def test_make_s3_event(self):
        event = make_s3_event("imgs", "a.jpg", "b.jpg")

        assert len(event["Records"]) == 2
        assert event["Records"][1]["s3"]["bucket"]["name"] == "imgs"
        assert event["Records"][1]["s3"]["object"]["key"] == "b.jpg"
