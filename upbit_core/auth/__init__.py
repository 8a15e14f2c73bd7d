"""
Request Authentication Module
=============================
JWT assertions bound to each request's parameters.
"""

from .models import Credentials, AssertionClaims, build_claims
from .query import (
    canonical_query_string,
    clean_params,
    hash_query,
    QUERY_HASH_ALGORITHM,
)
from .token import TokenSigner, decode_token, generate_nonce, SIGNING_ALGORITHM
from .headers import create_auth_headers, AUTHORIZATION_HEADER

__all__ = [
    # Models
    "Credentials",
    "AssertionClaims",
    "build_claims",
    # Query
    "canonical_query_string",
    "clean_params",
    "hash_query",
    "QUERY_HASH_ALGORITHM",
    # Token
    "TokenSigner",
    "decode_token",
    "generate_nonce",
    "SIGNING_ALGORITHM",
    # Headers
    "create_auth_headers",
    "AUTHORIZATION_HEADER",
]
