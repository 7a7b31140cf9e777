"""Exceptions for the error handler library.

Usage:
    from error_handler.exceptions import EntityNotFoundError

    def load_user(user_id: str) -> User:
        user = repository.get(user_id)
        if user is None:
            raise EntityNotFoundError(f"User {user_id} was not found")
        return user
"""

from error_handler.exceptions.base import (
    BadRequestError,
    ConfigurationError,
    DataIntegrityError,
    EncodingError,
    EntityNotFoundError,
    ErrorHandlerError,
    ResponseSerializationError,
    ResponseStatusError,
)

__all__ = [
    # Library errors
    "ErrorHandlerError",
    "EncodingError",
    "ConfigurationError",
    # Raised by application code
    "EntityNotFoundError",
    "ResponseStatusError",
    "BadRequestError",
    "DataIntegrityError",
    "ResponseSerializationError",
]
