from __future__ import annotations
from s3upload.config.credentials import BucketConfig


def build_private_url(key: str, bucket: BucketConfig) -> str:
    return f"https://s3-{bucket.region}.amazonaws.com/{bucket.name}/{key}"


def build_public_url(key: str, bucket: BucketConfig) -> str:
    if bucket.use_custom_domain:
        return f"http://{bucket.name}/{key}"
    return f"http://{bucket.name}.s3.amazonaws.com/{key}"


def build_url(key: str, bucket: BucketConfig, private: bool) -> str:
    """Private objects always use the regional endpoint, custom domain or not."""
    if private:
        return build_private_url(key, bucket)
    return build_public_url(key, bucket)
