"""Tests for loading the credentials TOML."""

import pytest
from pydantic import ValidationError

from s3upload.config.credentials import BucketConfig, default_credentials_path, load_credentials
from s3upload.config.run_options import RunOptions
from s3upload.errors import ConfigError

VALID = """
access_key_id = "AKIDEXAMPLE"
secret_access_key = "secret"

[buckets.default]
region = "us-east-1"
name = "my-bucket"

[buckets.cdn]
region = "eu-west-1"
name = "cdn.example.com"
cname = true
"""


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "creds.toml"
    path.write_text(VALID)
    return path


class TestLoadCredentials:
    def test_parses_buckets(self, credentials_file):
        credentials = load_credentials(credentials_file)

        assert credentials.access_key_id == "AKIDEXAMPLE"
        assert credentials.bucket("default") == BucketConfig(region="us-east-1", name="my-bucket", cname=False)
        assert credentials.bucket("cdn").use_custom_domain

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="invalid config file"):
            load_credentials(tmp_path / "absent.toml")

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("access_key_id = ")
        with pytest.raises(ConfigError):
            load_credentials(path)

    def test_empty_keys_rejected(self, tmp_path):
        path = tmp_path / "empty.toml"
        path.write_text('access_key_id = ""\nsecret_access_key = "s"\n')
        with pytest.raises(ConfigError):
            load_credentials(path)

    def test_bucket_missing_region_rejected(self, tmp_path):
        path = tmp_path / "partial.toml"
        path.write_text('access_key_id = "a"\nsecret_access_key = "s"\n[buckets.default]\nname = "x"\n')
        with pytest.raises(ConfigError):
            load_credentials(path)

    @pytest.mark.parametrize("region", ["us east 1", "-us-east-1", ""])
    def test_malformed_region_rejected(self, tmp_path, region):
        path = tmp_path / "region.toml"
        path.write_text(
            f'access_key_id = "a"\nsecret_access_key = "s"\n[buckets.default]\nregion = "{region}"\nname = "x"\n'
        )
        with pytest.raises(ConfigError):
            load_credentials(path)

    def test_nonstandard_region_accepted(self):
        assert BucketConfig(region="auto", name="x").region == "auto"

    def test_unknown_bucket(self, credentials_file):
        credentials = load_credentials(credentials_file)
        with pytest.raises(ConfigError, match="missing config for bucket: archive"):
            credentials.bucket("archive")


class TestDefaultPath:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("S3UPLOAD_CREDENTIALS_FILE", str(tmp_path / "c.toml"))
        assert default_credentials_path() == tmp_path / "c.toml"

    def test_home_directory(self, monkeypatch, tmp_path):
        monkeypatch.delenv("S3UPLOAD_CREDENTIALS_FILE", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_credentials_path() == tmp_path / ".aws-credentials.toml"


class TestImmutability:
    def test_bucket_config_is_frozen(self):
        bucket = BucketConfig(region="us-east-1", name="b")
        with pytest.raises(ValidationError):
            bucket.name = "other"

    def test_run_options_reject_blank_bucket(self):
        with pytest.raises(ValueError):
            RunOptions(target_bucket=" ")

    def test_run_options_acl(self):
        assert RunOptions().acl == "public-read"
        assert RunOptions(private=True).acl is None
