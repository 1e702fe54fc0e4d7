"""Errors raised while validating and scanning a target directory."""


class LastmodError(Exception):
    """Base exception for lastmod operations."""


class TargetError(LastmodError):
    """Raised when the target directory cannot be reported on."""


class TargetNotFoundError(TargetError):
    """Raised when the target path does not exist."""


class TargetNotDirectoryError(TargetError):
    """Raised when the target path exists but is not a directory."""


class ScanError(LastmodError):
    """Raised when the immediate children of the target cannot be listed."""


class ConfigError(LastmodError):
    """Raised when configuration values cannot be validated."""
