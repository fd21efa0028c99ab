from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BUCKET = "default"


@dataclass(frozen=True)
class RunOptions:
    private: bool = False
    add_timestamp: bool = False
    target_bucket: str = DEFAULT_BUCKET

    def __post_init__(self):
        if not self.target_bucket or not self.target_bucket.strip():
            raise ValueError("RunOptions.target_bucket must be a non-empty string.")

    @property
    def acl(self) -> str | None:
        # Private uploads send no ACL so the bucket policy applies.
        return None if self.private else "public-read"
