"""Deterministic correlation codes.

A correlation code is a name-based UUID (version 3) computed from the
UTF-8 bytes of a category token followed by a message. The construction
matches Java's ``UUID.nameUUIDFromBytes``, so the same pair yields the same
code in every process, on every platform, at any time.

Example:
    >>> generate("email", "must not be blank")
    UUID('...')
"""

import hashlib
import uuid
from typing import Optional

from error_handler.exceptions import EncodingError


def _to_bytes(value: str, name: str) -> bytes:
    if not isinstance(value, str):
        raise EncodingError(
            f"{name} must be a string",
            details={"type": type(value).__name__},
        )
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"{name} is not encodable as UTF-8", details={"reason": e.reason}) from e


def generate(category: str, message: str) -> uuid.UUID:
    """Generate the correlation code for a (category, message) pair.

    The two byte strings are concatenated without a separator, so
    ``generate("a", "b") == generate("ab", "")``.

    Args:
        category: Category token (a status code, field name, error type...)
        message: Human-readable message

    Returns:
        Version 3 UUID derived from the MD5 digest of both inputs

    Raises:
        EncodingError: If either input is not a string or cannot be encoded
    """
    data = _to_bytes(category, "category") + _to_bytes(message, "message")
    digest = hashlib.md5(data, usedforsecurity=False).digest()
    return uuid.UUID(bytes=digest, version=3)


def generate_or_none(category: str, message: str) -> Optional[uuid.UUID]:
    """Generate a correlation code, returning ``None`` if generation fails.

    Codes are a diagnostic aid, so a failure here must never prevent an
    error response from being built. This is the only place where an
    ``EncodingError`` is degraded to an absent code.
    """
    try:
        return generate(category, message)
    except EncodingError:
        return None
