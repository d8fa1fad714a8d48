"""
Storage for extracted article text.

Blobs are written once at ingestion and referenced from the article record by
a location URI (``s3://bucket/key`` or ``file://path``).
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse
from urllib.request import url2pathname

from botocore.exceptions import ClientError

from articles.errors import NotFound, StoreError
from common.aws import build_s3_key, build_s3_uri, parse_s3_uri, read_text_from_s3, upload_text_to_s3

if TYPE_CHECKING:
    from common.config import BinderConfig

logger = logging.getLogger(__name__)

EXTENSIONS = {"text/html": "html", "text/plain": "txt"}


class ContentStore(ABC):
    """Abstract base class for article text storage."""

    @abstractmethod
    def put(self, article_id: str, text: str, content_type: str, timestamp: datetime) -> str:
        """
        Store article text.

        Returns:
            Location URI of the stored blob.
        """

    @abstractmethod
    def read(self, location: str) -> str:
        """
        Read article text from a location returned by put().

        Raises:
            NotFound: If no blob exists at that location.
        """


class S3ContentStore(ContentStore):
    """Content store writing one object per article under a date-partitioned prefix."""

    def __init__(self, s3, bucket: str, prefix: str = "articles"):
        self.s3 = s3
        self.bucket = bucket
        self.prefix = prefix

    def put(self, article_id: str, text: str, content_type: str, timestamp: datetime) -> str:
        filename = f"{article_id}.{EXTENSIONS.get(content_type, 'txt')}"
        key = build_s3_key(self.prefix, timestamp, filename)
        try:
            upload_text_to_s3(self.s3, text, self.bucket, key, content_type=content_type)
        except ClientError as exc:
            raise StoreError(f"Failed to upload content for {article_id}: {exc}") from exc
        return build_s3_uri(self.bucket, key)

    def read(self, location: str) -> str:
        try:
            bucket, key = parse_s3_uri(location)
        except ValueError as exc:
            raise NotFound(f"No content at {location}") from exc
        try:
            return read_text_from_s3(self.s3, bucket, key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                raise NotFound(f"No content at {location}") from exc
            raise StoreError(f"Failed to read content at {location}: {exc}") from exc


class LocalContentStore(ContentStore):
    """Content store writing one file per article into a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def put(self, article_id: str, text: str, content_type: str, timestamp: datetime) -> str:
        path = self.directory / f"{article_id}.{EXTENSIONS.get(content_type, 'txt')}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Failed to write content for {article_id}: {exc}") from exc
        logger.info("Saved %d characters to %s", len(text), path)
        return path.resolve().as_uri()

    def read(self, location: str) -> str:
        parsed = urlparse(location)
        if parsed.scheme != "file":
            raise NotFound(f"No content at {location}")
        path = Path(url2pathname(parsed.path))
        if not path.exists():
            raise NotFound(f"No content at {location}")
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Failed to read content at {location}: {exc}") from exc


def get_content_store(config: BinderConfig) -> ContentStore:
    """Create the content store for the configured backend."""
    if config.is_dynamodb:
        from common.aws import get_s3_client

        s3 = get_s3_client(region=config.s3.region, endpoint_url=config.s3.endpoint_url)
        return S3ContentStore(s3, config.s3.bucket, prefix=config.s3.content_prefix)

    return LocalContentStore(Path(config.local.data_dir) / config.local.content_dir)
