from __future__ import annotations
import mimetypes
import os
import posixpath
import time
from typing import Callable
from s3upload.errors import LocalReadError, NotFoundError
from s3upload.logging_config import get_logger
from s3upload.objects.fetcher import Fetcher
from s3upload.objects.keys import base_name, build_key
from s3upload.objects.models import ObjectInfo

URL_PREFIXES = ("http://", "https://")
# Built once at import; worker threads only read from it.
_MIME_TYPES = mimetypes.MimeTypes()

logger = get_logger(__name__)


def is_url(identifier: str) -> bool:
    return identifier.startswith(URL_PREFIXES)


def content_type_for(identifier: str) -> str:
    """Content type from the identifier's extension, or '' when unknown."""
    extension = posixpath.splitext(base_name(identifier))[1]
    if not extension:
        return ""
    known = _MIME_TYPES.types_map[True]
    return known.get(extension) or known.get(extension.lower(), "")


def build_object_info(content: bytes, identifier: str, add_timestamp: bool, now: Callable[[], float] = time.time) -> ObjectInfo:
    return ObjectInfo(
        content=content,
        key=build_key(identifier, add_timestamp, now=now),
        content_type=content_type_for(identifier),
    )


def read_local_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise LocalReadError(f"{path}: {e.strerror or e}") from e


def fetch_remote_content(url: str, fetcher: Fetcher) -> bytes:
    status, body = fetcher.get(url)
    if status != 200:
        logger.warning("Remote fetch returned non-OK status: url=%s status=%s", url, status)
        raise NotFoundError(f"not found: {url}")
    return body


def resolve(
    identifier: str,
    add_timestamp: bool,
    fetcher: Fetcher,
    now: Callable[[], float] = time.time,
    notify: Callable[[str], None] = print,
) -> ObjectInfo:
    """
    Turn an identifier into an ObjectInfo ready for upload.

    Existing local paths are read from disk. Anything else with an http(s)
    scheme is fetched; notify() is told first so the user knows a download
    is happening. Everything else raises NotFoundError.
    """
    try:
        os.stat(identifier)
    except FileNotFoundError as e:
        if not is_url(identifier):
            raise NotFoundError(f"{identifier}: no such file or directory") from e
    except OSError as e:
        raise LocalReadError(f"{identifier}: {e.strerror or e}") from e
    else:
        content = read_local_file(identifier)
        logger.debug("Read local file: path=%s bytes=%s", identifier, len(content))
        return build_object_info(content, identifier, add_timestamp, now=now)

    notify(f"{identifier} is not a local file, will attempt to fetch it as an URL")
    content = fetch_remote_content(identifier, fetcher)
    return build_object_info(content, identifier, add_timestamp, now=now)
