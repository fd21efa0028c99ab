from __future__ import annotations
from dataclasses import dataclass, field
from s3upload.errors import UploadError


@dataclass(frozen=True)
class ObjectInfo:
    content: bytes = field(repr=False)
    key: str
    content_type: str = ""

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class UploadResult:
    """Outcome of one upload task. Exactly one of url/error is set."""
    identifier: str
    url: str | None = None
    error: UploadError | None = None

    def __post_init__(self):
        if (self.url is None) == (self.error is None):
            raise ValueError("UploadResult requires exactly one of url or error.")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, identifier: str, url: str) -> UploadResult:
        return cls(identifier=identifier, url=url)

    @classmethod
    def failure(cls, identifier: str, error: UploadError) -> UploadResult:
        return cls(identifier=identifier, error=error)
