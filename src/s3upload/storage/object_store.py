from __future__ import annotations
import os
from typing import Protocol
import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from s3upload.config.credentials import BucketConfig, Credentials
from s3upload.errors import ConfigError, StorageError
from s3upload.logging_config import get_logger


logger = get_logger(__name__)


class StorageClient(Protocol):
    def put_object(self, bucket: str, key: str, body: bytes, content_type: str = "", acl: str | None = None) -> None:
        """Store body under key. Raises StorageError on failure."""
        ...


class ObjectStore:
    """boto3-backed StorageClient. One instance is shared by all upload threads."""

    def __init__(self, credentials: Credentials, region: str, endpoint: str | None = None):
        client_kwargs = {
            "config": Config(signature_version="s3v4"),
            "region_name": region,
            "aws_access_key_id": credentials.access_key_id,
            "aws_secret_access_key": credentials.secret_access_key,
        }
        if endpoint:
            client_kwargs["endpoint_url"] = endpoint
        self.client = boto3.client("s3", **client_kwargs)

    @classmethod
    def for_bucket(cls, credentials: Credentials, bucket: BucketConfig) -> ObjectStore:
        endpoint = os.getenv("AWS_S3_ENDPOINT") or None
        try:
            return cls(credentials, region=bucket.region, endpoint=endpoint)
        except (BotoCoreError, ValueError) as e:
            raise ConfigError(f"invalid storage settings for bucket {bucket.name!r}: {e}") from e

    def put_object(self, bucket: str, key: str, body: bytes, content_type: str = "", acl: str | None = None) -> None:
        params = {
            "Bucket": bucket,
            "Key": key,
            "Body": body,
        }
        if content_type:
            params["ContentType"] = content_type
        if acl:
            params["ACL"] = acl
        try:
            self.client.put_object(**params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            logger.debug("put_object rejected: bucket=%s key=%s code=%s", bucket, key, code)
            raise StorageError(f"error putting object {key!r} to bucket {bucket!r}: {e}") from e
        except BotoCoreError as e:
            raise StorageError(f"error putting object {key!r} to bucket {bucket!r}: {e}") from e
        logger.info("Stored object: bucket=%s key=%s bytes=%s acl=%s", bucket, key, len(body), acl)
