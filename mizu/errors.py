"""
Client error taxonomy.

Precondition errors (NotInitializedError, NotAuthenticatedError,
InvalidArgumentError) are always raised before any request is sent.
TransportError and its subclasses wrap backend or network failures and are
never retried by this package.
"""

from typing import Any, Dict, List, Optional


class MizuError(Exception):
    """Base error for the wallet client."""
    pass


class ConfigurationError(MizuError):
    """Client was constructed with missing or invalid arguments."""
    pass


class NotInitializedError(MizuError):
    """Session has not been initialized."""
    pass


class NotAuthenticatedError(MizuError):
    """Operation requires a logged-in session."""
    pass


class InvalidArgumentError(MizuError):
    """Caller supplied an empty or invalid argument."""
    pass


class ExpiredTokenError(MizuError):
    """Session token issued by the backend is already expired."""
    pass


class DecodeError(MizuError):
    """Token or order payload could not be decoded."""
    pass


class TransportError(MizuError):
    """Network or backend failure while executing an operation."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GraphQLError(TransportError):
    """Backend answered with a GraphQL ``errors`` array."""

    def __init__(self, errors: List[Dict[str, Any]], *, status_code: Optional[int] = None):
        messages = "; ".join(
            str(err.get("message", err)) if isinstance(err, dict) else str(err)
            for err in errors
        ) or "unknown error"
        super().__init__(f"GraphQL error: {messages}", status_code=status_code)
        self.errors = errors


class UnexpectedResponseError(TransportError):
    """Response data did not have the shape expected for the operation."""
    pass
