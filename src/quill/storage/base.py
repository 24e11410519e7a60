"""Storage exceptions."""


class StorageException(Exception):
    """Base exception for storage operations."""

    pass


class SecurityException(StorageException):
    """Security-related storage exception."""

    pass
