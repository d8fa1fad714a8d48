"""Create the DynamoDB article table and S3 content bucket if they do not exist."""

from __future__ import annotations

import argparse
import logging

import boto3
from botocore.exceptions import ClientError
from dotenv import load_dotenv

load_dotenv()

from common.aws import get_s3_client
from common.config import load_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def create_table(table_name: str, region: str | None, endpoint_url: str | None) -> None:
    client = boto3.client("dynamodb", region_name=region, endpoint_url=endpoint_url)
    try:
        client.create_table(
            TableName=table_name,
            KeySchema=[{"AttributeName": "ulid", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "ulid", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
    except ClientError as exc:
        if exc.response["Error"]["Code"] != "ResourceInUseException":
            raise
        logger.info("Table %s already exists", table_name)
        return

    client.get_waiter("table_exists").wait(TableName=table_name)
    logger.info("Created table %s", table_name)


def create_bucket(bucket: str, region: str | None, endpoint_url: str | None) -> None:
    s3 = get_s3_client(region=region, endpoint_url=endpoint_url)
    try:
        s3.head_bucket(Bucket=bucket)
        logger.info("Bucket %s already exists", bucket)
        return
    except ClientError as exc:
        if exc.response["Error"]["Code"] not in ("404", "NoSuchBucket"):
            raise

    kwargs = {"Bucket": bucket}
    if region and region != "us-east-1":
        kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}
    s3.create_bucket(**kwargs)
    logger.info("Created bucket %s", bucket)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default=None, help="Config name (default: $BINDER_CONFIG or prod)")
    args = parser.parse_args()

    config = load_config(args.config)
    if not config.is_dynamodb:
        raise SystemExit("Config does not use DynamoDB storage; nothing to create.")

    create_table(config.dynamodb.table_name, config.dynamodb.region, config.dynamodb.endpoint_url)
    create_bucket(config.s3.bucket, config.s3.region, config.s3.endpoint_url)


if __name__ == "__main__":
    main()
