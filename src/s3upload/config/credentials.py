from __future__ import annotations
import os
import tomllib
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from s3upload.errors import ConfigError
from s3upload.logging_config import get_logger

CREDENTIALS_FILE_NAME = ".aws-credentials.toml"
CREDENTIALS_FILE_ENV_VAR = "S3UPLOAD_CREDENTIALS_FILE"
# Same shape botocore accepts for region_name.
REGION_PATTERN = r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$"

logger = get_logger(__name__)


class BucketConfig(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)
    region: str = Field(..., pattern=REGION_PATTERN, description="AWS region the bucket lives in, e.g. 'us-east-1'.")
    name: str = Field(..., min_length=1, description="Bucket name. Doubles as the domain when cname is set.")
    cname: bool = Field(False, description="Bucket name is also a custom domain pointing at the bucket.")

    @property
    def use_custom_domain(self) -> bool:
        return self.cname


class Credentials(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)
    access_key_id: str = Field(..., description="AWS access key id.")
    secret_access_key: str = Field(..., description="AWS secret access key.")
    buckets: dict[str, BucketConfig] = Field(default_factory=dict, description="Bucket alias -> bucket settings.")

    @field_validator("access_key_id", "secret_access_key")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    def bucket(self, alias: str) -> BucketConfig:
        try:
            return self.buckets[alias]
        except KeyError:
            raise ConfigError(f"missing config for bucket: {alias}") from None


def default_credentials_path() -> Path:
    override = os.getenv(CREDENTIALS_FILE_ENV_VAR) or None
    if override:
        return Path(override).expanduser()
    return Path.home() / CREDENTIALS_FILE_NAME


def load_credentials(path: Path | None = None) -> Credentials:
    path = path or default_credentials_path()
    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"invalid config file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {path}: {exc}") from exc

    try:
        credentials = Credentials.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config file: {path}: {exc}") from exc
    logger.debug("Loaded credentials file: path=%s buckets=%s", path, sorted(credentials.buckets))
    return credentials
