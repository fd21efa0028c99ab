from __future__ import annotations
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Sequence
from s3upload.config.credentials import BucketConfig
from s3upload.config.run_options import RunOptions
from s3upload.errors import UploadError
from s3upload.logging_config import get_logger
from s3upload.objects.fetcher import Fetcher
from s3upload.objects.models import UploadResult
from s3upload.storage.object_store import StorageClient
from s3upload.upload import upload

logger = get_logger(__name__)


def report_result(result: UploadResult) -> None:
    if result.ok:
        print(f"uploaded {result.url}", flush=True)
    else:
        print(f"failed to upload object: {result.error}", file=sys.stderr, flush=True)


def run_all(
    identifiers: Sequence[str],
    options: RunOptions,
    bucket: BucketConfig,
    store: StorageClient,
    fetcher: Fetcher,
    on_result: Callable[[UploadResult], None] | None = None,
) -> list[UploadResult]:
    """
    Upload every identifier concurrently, one thread per identifier.

    Returns exactly one result per identifier in completion order. A task
    that dies with an unexpected exception is reported as a failure rather
    than dropped.
    """
    if not identifiers:
        return []

    results: list[UploadResult] = []
    started_at = time.perf_counter()
    with ThreadPoolExecutor(max_workers=len(identifiers), thread_name_prefix="upload") as executor:
        future_to_identifier = {
            executor.submit(upload, identifier, options, bucket, store, fetcher): identifier
            for identifier in identifiers
        }
        for future in as_completed(future_to_identifier):
            identifier = future_to_identifier[future]
            try:
                result = future.result()
            except Exception as e:
                logger.exception("Upload task crashed", extra={"identifier": identifier})
                error = UploadError(f"unexpected error: {e}")
                error.__cause__ = e
                result = UploadResult.failure(identifier, error)
            results.append(result)
            if on_result is not None:
                on_result(result)

    failed = sum(1 for r in results if not r.ok)
    logger.info(
        "Upload run complete",
        extra={
            "total": len(results),
            "succeeded": len(results) - failed,
            "failed": failed,
            "elapsed_seconds": round(time.perf_counter() - started_at, 3),
        },
    )
    return results
