"""Store failures, tagged by category.

Callers only ever see a generic 500; the category exists so the logs can tell a
duplicate key from a dropped connection.
"""
from enum import Enum

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError


class StoreErrorCategory(str, Enum):
    CONSTRAINT = "constraint"
    CONNECTIVITY = "connectivity"
    DRIVER = "driver"
    OTHER = "other"


class DatabaseError(Exception):
    """Raised by the session manager in place of the underlying SQLAlchemy error."""

    def __init__(self, category: StoreErrorCategory, message: str):
        super().__init__(message)
        self.category = category
        self.message = message


def classify_store_error(exc: SQLAlchemyError) -> StoreErrorCategory:
    # IntegrityError and OperationalError are both DBAPIError subclasses; check them first
    if isinstance(exc, IntegrityError):
        return StoreErrorCategory.CONSTRAINT
    if isinstance(exc, OperationalError):
        return StoreErrorCategory.CONNECTIVITY
    if isinstance(exc, DBAPIError):
        return StoreErrorCategory.DRIVER
    return StoreErrorCategory.OTHER
