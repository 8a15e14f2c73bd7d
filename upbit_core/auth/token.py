"""
Token Signing
=============
Per-request JWT assertions binding an access key to the exact query.
"""

import uuid
from typing import Any, Dict, Mapping, Optional

import jwt
import structlog

from ..exceptions import ConfigurationError
from .models import AssertionClaims, Credentials, build_claims
from .query import canonical_query_string, hash_query

logger = structlog.get_logger(__name__)

SIGNING_ALGORITHM = "HS256"


def generate_nonce() -> str:
    """Generate a unique nonce for a single assertion."""
    return str(uuid.uuid4())


class TokenSigner:
    """
    Builds a fresh signed assertion for every outgoing request.

    Tokens are never cached: two calls with identical parameters still get
    distinct nonces and therefore distinct tokens.
    """

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def build_claims(self, params: Optional[Mapping[str, Any]] = None) -> AssertionClaims:
        """
        Build the unsigned payload for ``params``.

        Parameters that canonicalize to an empty querystring carry no hash
        fields at all; the empty string is never hashed.
        """
        query_string = canonical_query_string(params)
        query_hash = hash_query(query_string) if query_string else None
        return build_claims(self.credentials.access_key, generate_nonce(), query_hash)

    def sign(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Sign an assertion for a request.

        Args:
            params: Query or body parameters of the request (optional)

        Returns:
            Compact JWT string

        Raises:
            ConfigurationError: If the secret key cannot be used for signing
        """
        secret = self.credentials.secret_key
        if not isinstance(secret, str) or not secret:
            raise ConfigurationError("Secret key must be a non-empty string")

        claims = self.build_claims(params)
        try:
            return jwt.encode(dict(claims), secret, algorithm=SIGNING_ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error("Failed to sign request token", error_type=type(e).__name__)
            raise ConfigurationError("Secret key is malformed") from e


def decode_token(token: str, secret_key: str) -> Dict[str, Any]:
    """
    Verify a token and return its payload.

    Raises:
        jwt.InvalidSignatureError: If the token was signed with another key
    """
    return jwt.decode(token, secret_key, algorithms=[SIGNING_ALGORITHM])
