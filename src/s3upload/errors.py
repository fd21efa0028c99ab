class UploadError(Exception):
    """Base class for every error the uploader reports."""


class ConfigError(UploadError):
    """Credentials file missing or invalid, or the requested bucket is not configured."""


class LocalReadError(UploadError):
    pass


class NotFoundError(UploadError):
    """Identifier is neither a readable local file nor a fetchable URL."""


class NetworkError(UploadError):
    pass


class StorageError(UploadError):
    """Raised when the object store rejects a PUT."""
