"""Shared fakes for the storage and fetch boundaries."""

from __future__ import annotations

import logging
import threading

import pytest

from s3upload.config.credentials import BucketConfig, Credentials
from s3upload.config.run_options import RunOptions
from s3upload.errors import StorageError


class FakeStore:
    """Records every PUT; keys listed in fail_keys are rejected."""

    def __init__(self, fail_keys: set[str] | None = None) -> None:
        self.fail_keys = fail_keys or set()
        self.calls: list[dict] = []
        self._lock = threading.Lock()

    def put_object(self, bucket, key, body, content_type="", acl=None):
        with self._lock:
            self.calls.append(
                {"bucket": bucket, "key": key, "body": body, "content_type": content_type, "acl": acl}
            )
        if key in self.fail_keys:
            raise StorageError(f"AccessDenied for {key}")


class FakeFetcher:
    """Serves canned (status, body) pairs; URLs mapped to an exception raise it."""

    def __init__(self, responses: dict | None = None) -> None:
        self.responses = responses or {}
        self.requested: list[str] = []

    def get(self, url):
        self.requested.append(url)
        response = self.responses.get(url, (404, b""))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    botocore_level = logging.getLogger("botocore").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("botocore").setLevel(botocore_level)


@pytest.fixture
def bucket() -> BucketConfig:
    return BucketConfig(region="us-east-1", name="b")


@pytest.fixture
def cname_bucket() -> BucketConfig:
    return BucketConfig(region="eu-west-1", name="cdn.example.com", cname=True)


@pytest.fixture
def credentials(bucket) -> Credentials:
    return Credentials(access_key_id="AKIDEXAMPLE", secret_access_key="secret", buckets={"default": bucket})


@pytest.fixture
def options() -> RunOptions:
    return RunOptions()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()
