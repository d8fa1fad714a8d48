"""Tests for articles.content module."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from articles.content import LocalContentStore, S3ContentStore, get_content_store
from articles.errors import NotFound, StoreError
from common.config import BinderConfig, LocalConfig, S3Config
from conftest import NOW

ARTICLE_ID = "01HKZ0000000000000000000AA"


class TestS3ContentStore:
    def test_put_uploads_to_partitioned_key(self) -> None:
        s3 = MagicMock()
        content_store = S3ContentStore(s3, "bucket", prefix="articles")

        location = content_store.put(ARTICLE_ID, "<p>body</p>", "text/html", NOW)

        key = f"articles/year=2024/month=01/day=01/{ARTICLE_ID}.html"
        assert location == f"s3://bucket/{key}"
        s3.put_object.assert_called_once_with(
            Bucket="bucket",
            Key=key,
            Body=b"<p>body</p>",
            ContentType="text/html; charset=utf-8",
        )

    def test_put_failure_raises_store_error(self) -> None:
        s3 = MagicMock()
        s3.put_object.side_effect = ClientError({"Error": {"Code": "AccessDenied"}}, "PutObject")
        with pytest.raises(StoreError):
            S3ContentStore(s3, "bucket").put(ARTICLE_ID, "text", "text/plain", NOW)

    def test_read_returns_text(self) -> None:
        s3 = MagicMock()
        s3.get_object.return_value = {"Body": MagicMock(read=MagicMock(return_value=b"body"))}
        assert S3ContentStore(s3, "bucket").read("s3://bucket/articles/a.txt") == "body"
        s3.get_object.assert_called_once_with(Bucket="bucket", Key="articles/a.txt")

    def test_read_missing_key_raises_not_found(self) -> None:
        s3 = MagicMock()
        s3.get_object.side_effect = ClientError({"Error": {"Code": "NoSuchKey"}}, "GetObject")
        with pytest.raises(NotFound):
            S3ContentStore(s3, "bucket").read("s3://bucket/articles/a.txt")

    def test_read_non_s3_location_raises_not_found(self) -> None:
        with pytest.raises(NotFound):
            S3ContentStore(MagicMock(), "bucket").read("file:///tmp/a.txt")


class TestLocalContentStore:
    def test_put_and_read(self, content_store) -> None:
        location = content_store.put(ARTICLE_ID, "body text", "text/plain", NOW)
        assert location.startswith("file://")
        assert location.endswith(f"{ARTICLE_ID}.txt")
        assert content_store.read(location) == "body text"

    def test_put_and_read_in_directory_with_space(self, tmp_path) -> None:
        content_store = LocalContentStore(tmp_path / "my content")
        location = content_store.put(ARTICLE_ID, "<p>spaced</p>", "text/html", NOW)
        assert "%20" in location
        assert content_store.read(location) == "<p>spaced</p>"

    def test_read_non_file_location_raises_not_found(self, content_store) -> None:
        with pytest.raises(NotFound):
            content_store.read("s3://bucket/key.txt")

    def test_read_missing_raises_not_found(self, content_store, tmp_path) -> None:
        with pytest.raises(NotFound):
            content_store.read((tmp_path / "missing.txt").as_uri())


class TestGetContentStore:
    def test_local(self, tmp_path) -> None:
        config = BinderConfig(storage="local", local=LocalConfig(data_dir=str(tmp_path)))
        assert isinstance(get_content_store(config), LocalContentStore)

    def test_s3(self, monkeypatch) -> None:
        monkeypatch.setattr("common.aws.boto3", MagicMock())
        config = BinderConfig(storage="dynamodb", s3=S3Config(bucket="bucket"))
        content_store = get_content_store(config)
        assert isinstance(content_store, S3ContentStore)
        assert content_store.bucket == "bucket"
