"""
Session token decoding.

Tokens are issued and signed by the wallet backend; the client only reads
their claims to check freshness and find the wallet user id. The signature
is not verified here.
"""

import time
from typing import Any, Dict, Optional

import jwt
from pydantic import ValidationError

from ..errors import DecodeError, ExpiredTokenError
from .models import TokenClaims


HASURA_CLAIMS_NAMESPACE = "https://hasura.io/jwt/claims"
HASURA_USER_ID_CLAIM = "x-hasura-user-id"


def read_claims(token: str) -> Dict[str, Any]:
    """Decode the token body without verifying signature or expiry."""
    if not token or not isinstance(token, str):
        raise DecodeError("Session token is empty")
    try:
        return jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
        )
    except jwt.InvalidTokenError as e:
        raise DecodeError(f"Invalid session token: {e}") from e


def decode_session_token(token: str, now: Optional[float] = None) -> TokenClaims:
    """
    Validate a freshly issued session token and extract its subject.

    Raises:
        DecodeError: token is malformed or lacks ``exp`` / the user id claim
        ExpiredTokenError: ``exp`` is not in the future
    """
    payload = read_claims(token)
    namespace = payload.get(HASURA_CLAIMS_NAMESPACE) or {}
    if not isinstance(namespace, dict):
        raise DecodeError("Session token claims namespace is not an object")

    try:
        claims = TokenClaims(
            exp=payload.get("exp"),
            user_id=namespace.get(HASURA_USER_ID_CLAIM),
        )
    except ValidationError as e:
        raise DecodeError(f"Session token is missing required claims: {e}") from e

    current = time.time() if now is None else now
    if claims.exp <= current:
        raise ExpiredTokenError("Session token has expired")

    return claims
