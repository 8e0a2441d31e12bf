# errors.py
from typing import Optional

from pydantic import ValidationError


class TokenListError(Exception):
    """Base exception for token list errors."""

    pass


class DecodeError(TokenListError, ValueError):
    """Raised when a document does not match the token list schema.

    Attributes:
        field: Dotted wire path of the offending field (e.g. ``tokens.0.chainId``),
            or None when the whole document is unreadable
        reason: Human readable description of the expected shape
    """

    def __init__(self, reason: str, field: Optional[str] = None):
        self.field = field
        self.reason = reason
        if field:
            super().__init__(f"{field}: {reason}")
        else:
            super().__init__(reason)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "DecodeError":
        """Build a decode error from the first error pydantic reported."""
        error = exc.errors()[0]
        if error["type"] == "json_invalid":
            return cls(error["msg"])

        field = ".".join(str(part) for part in error["loc"]) or None
        return cls(error["msg"], field=field)


class TransportError(TokenListError):
    """Raised when a token list cannot be retrieved.

    Covers connection, DNS and TLS failures as well as responses whose status
    is outside the 2xx range.
    """

    def __init__(self, uri: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.uri = uri
        self.status = status
        self.reason = reason

        message = f"Error fetching token list from {uri}"
        if status is not None:
            message += f": HTTP {status}"
        if reason:
            message += f" ({reason})" if status is not None else f": {reason}"
        super().__init__(message)
