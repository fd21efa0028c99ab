from __future__ import annotations
import posixpath
import time
from typing import Callable


def base_name(identifier: str) -> str:
    stripped = identifier.rstrip("/")
    if not stripped:
        return "/" if identifier else "."
    return posixpath.basename(stripped)


def build_key(identifier: str, add_timestamp: bool, now: Callable[[], float] = time.time) -> str:
    """
    Derive the storage key for an identifier from its base name.

    The base name is split on every '.'. The first segment is the stem; the
    extension is only kept when there are exactly two segments, so
    'archive.tar.gz' becomes 'archive' and 'README' stays 'README'.
    With add_timestamp the stem gets '-<unix seconds>' appended.
    """
    segments = base_name(identifier).split(".")
    key = f"{segments[0]}-{int(now())}" if add_timestamp else segments[0]
    if len(segments) == 2:
        key += f".{segments[1]}"
    return key
