from __future__ import annotations
import time
from typing import Callable
from s3upload.config.credentials import BucketConfig
from s3upload.config.run_options import RunOptions
from s3upload.errors import LocalReadError, NetworkError, NotFoundError, StorageError
from s3upload.logging_config import get_logger
from s3upload.objects.fetcher import Fetcher
from s3upload.objects.resolver import resolve
from s3upload.objects.models import UploadResult
from s3upload.storage.object_store import StorageClient
from s3upload.urls import build_url

logger = get_logger(__name__)


def upload(
    identifier: str,
    options: RunOptions,
    bucket: BucketConfig,
    store: StorageClient,
    fetcher: Fetcher,
    now: Callable[[], float] = time.time,
    notify: Callable[[str], None] = print,
) -> UploadResult:
    try:
        obj = resolve(identifier, options.add_timestamp, fetcher, now=now, notify=notify)
    except (LocalReadError, NotFoundError, NetworkError) as e:
        logger.warning("Could not resolve identifier", extra={"identifier": identifier, "error": str(e)})
        wrapped = type(e)(f"unable to read file: {e}")
        wrapped.__cause__ = e
        return UploadResult.failure(identifier, wrapped)

    try:
        store.put_object(
            bucket=bucket.name,
            key=obj.key,
            body=obj.content,
            content_type=obj.content_type,
            acl=options.acl,
        )
    except StorageError as e:
        logger.warning(
            "Upload failed",
            extra={"identifier": identifier, "bucket": bucket.name, "key": obj.key, "error": str(e)},
        )
        return UploadResult.failure(identifier, e)

    url = build_url(obj.key, bucket, options.private)
    logger.info(
        "Uploaded object",
        extra={"identifier": identifier, "key": obj.key, "size_bytes": obj.size, "url": url},
    )
    return UploadResult.success(identifier, url)
