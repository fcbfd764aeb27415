"""Exception types raised by vapas."""


class VapasError(Exception):
    """Base class for all vapas errors."""


class ConfigError(VapasError):
    """A required configuration value is missing or malformed."""


class StorageError(VapasError):
    """The database could not be reached or a query failed."""


class AssetNotFound(VapasError):
    """A requested static asset does not exist on disk."""

    def __init__(self, path):
        super().__init__(f"Asset not found: {path}")
        self.path = path
