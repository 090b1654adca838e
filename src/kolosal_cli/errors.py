"""Custom exception hierarchy for kolosal-cli."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class ConfigError(ValueError, AppError):
    """Settings/configuration validation errors."""


class StorageError(AppError):
    """Settings load/save failures."""


class RegistryError(ValueError, AppError):
    """Command registration errors."""
