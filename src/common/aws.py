import logging
from datetime import datetime

import boto3
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_s3_client(region: str | None = None, endpoint_url: str | None = None):
    """Create S3 client."""
    return boto3.client("s3", region_name=region, endpoint_url=endpoint_url)


def get_dynamodb_table(table_name: str, region: str | None = None, endpoint_url: str | None = None):
    """Create a DynamoDB Table resource."""
    dynamodb = boto3.resource("dynamodb", region_name=region, endpoint_url=endpoint_url)
    return dynamodb.Table(table_name)


def build_s3_key(prefix: str, timestamp: datetime, filename: str) -> str:
    """Build a partitioned S3 key path."""
    return (
        f"{prefix}/"
        f"year={timestamp.year:04d}/"
        f"month={timestamp.month:02d}/"
        f"day={timestamp.day:02d}/"
        f"{filename}"
    )


def build_s3_uri(bucket: str, key: str) -> str:
    return f"s3://{bucket}/{key}"


def parse_s3_uri(uri: str) -> tuple[str, str]:
    """Split an s3://bucket/key URI into (bucket, key)."""
    if not uri.startswith("s3://"):
        raise ValueError(f"Not an S3 URI: {uri}")
    bucket, _, key = uri[len("s3://"):].partition("/")
    if not bucket or not key:
        raise ValueError(f"Not an S3 URI: {uri}")
    return bucket, key


def upload_text_to_s3(s3, text: str, bucket: str, key: str, content_type: str = "text/plain") -> None:
    """Upload a text document to S3 as UTF-8."""
    s3.put_object(
        Bucket=bucket,
        Key=key,
        Body=text.encode("utf-8"),
        ContentType=f"{content_type}; charset=utf-8",
    )
    logger.info("Uploaded %d characters to s3://%s/%s", len(text), bucket, key)


def read_text_from_s3(s3, bucket: str, key: str) -> str:
    """Read a UTF-8 text document from S3."""
    response = s3.get_object(Bucket=bucket, Key=key)
    return response["Body"].read().decode("utf-8")
