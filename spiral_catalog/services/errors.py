"""Errors raised by the folder and car services."""

from sqlalchemy.exc import SQLAlchemyError


class ServiceError(Exception):
    """Base class for service failures."""


class NotFoundError(ServiceError):
    """The referenced record does not exist."""

    def __init__(self, kind: str, record_id: int):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class StorageError(ServiceError):
    """
    Any failure reported by the database layer.

    The original exception is chained as __cause__; callers must not expose
    its text to clients.
    """


# The sqlite driver raises a bare OverflowError for integers outside 64 bits
DATABASE_ERRORS = (SQLAlchemyError, OverflowError)
