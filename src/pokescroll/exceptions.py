"""Errors raised while talking to the catalog and loading configuration."""


class CatalogError(Exception):
    """Base class for failures reading the catalog."""


class FetchError(CatalogError):
    """Transport failure or non-success status from a catalog endpoint."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(CatalogError):
    """Response body did not have the expected shape."""


class ImageLoadError(Exception):
    """An image reference cannot be displayed."""


class ConfigError(ValueError):
    """Invalid configuration file or value."""
