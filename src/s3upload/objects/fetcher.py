from __future__ import annotations
import os
from typing import Callable, Protocol
import requests
from s3upload.errors import ConfigError, NetworkError
from s3upload.logging_config import get_logger

USER_AGENT = 's3upload/0.1'
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0

logger = get_logger(__name__)


class Fetcher(Protocol):
    def get(self, url: str) -> tuple[int, bytes]:
        """Return (status code, body). Raises NetworkError on transport failure."""
        ...


def _get_fetch_timeout() -> float:
    raw = os.getenv("S3UPLOAD_FETCH_TIMEOUT")
    if not raw:
        return DEFAULT_FETCH_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"S3UPLOAD_FETCH_TIMEOUT must be a number, got: {raw!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"S3UPLOAD_FETCH_TIMEOUT must be > 0, got: {timeout}")
    return timeout


def create_http_session() -> requests.Session:
    # No retry adapter: a failed fetch is reported once.
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


class HttpFetcher:
    """Fetches each URL on its own requests.Session; sessions never cross upload threads."""

    def __init__(self, session_factory: Callable[[], requests.Session] = create_http_session, timeout: float | None = None):
        self.session_factory = session_factory
        self.timeout = timeout if timeout is not None else _get_fetch_timeout()

    def get(self, url: str) -> tuple[int, bytes]:
        with self.session_factory() as session:
            try:
                response = session.get(url, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"GET {url} failed: {e}") from e
            with response:
                logger.debug("Fetched remote content: url=%s status=%s bytes=%s", url, response.status_code, len(response.content))
                return response.status_code, response.content
