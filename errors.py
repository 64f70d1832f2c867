# errors.py
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_ADDRESS = "invalid_address"
    UNKNOWN_HOST = "unknown_host"
    STORAGE = "storage"
    DELETE_NOT_ALLOWED = "delete_not_allowed"
    CONFIGURATION = "configuration"


class DDNSError(Exception):
    """Base class for every error the registry raises.

    ``kind`` lets a caller (an HTTP layer, the CLI) map the error to a
    response without matching on the class hierarchy.
    """

    kind: ErrorKind

    def __init__(self, message: str, identifier: str | None = None):
        super().__init__(message)
        self.identifier = identifier


class InvalidIdentifierError(DDNSError):
    kind = ErrorKind.INVALID_IDENTIFIER


class InvalidAddressError(DDNSError):
    kind = ErrorKind.INVALID_ADDRESS


class UnknownHostError(DDNSError):
    kind = ErrorKind.UNKNOWN_HOST


class StorageError(DDNSError):
    kind = ErrorKind.STORAGE


class DeleteNotAllowedError(DDNSError):
    kind = ErrorKind.DELETE_NOT_ALLOWED


class ConfigurationError(DDNSError):
    kind = ErrorKind.CONFIGURATION
