"""
Auth Models
===========
Credentials and assertion payload shapes.
"""

from dataclasses import dataclass, field
from typing import Optional, TypedDict

from .query import QUERY_HASH_ALGORITHM


@dataclass(frozen=True)
class Credentials:
    """An Upbit key pair. The secret half is only ever used as a signing key."""
    access_key: str
    secret_key: str = field(repr=False)


class _AssertionClaims(TypedDict):
    access_key: str
    nonce: str


class AssertionClaims(_AssertionClaims, total=False):
    """JWT payload sent with every request."""
    query_hash: str
    query_hash_alg: str


def build_claims(access_key: str, nonce: str, query_hash: Optional[str] = None) -> AssertionClaims:
    """Build the assertion payload; hash fields are set together or not at all."""
    claims: AssertionClaims = {"access_key": access_key, "nonce": nonce}
    if query_hash is not None:
        claims["query_hash"] = query_hash
        claims["query_hash_alg"] = QUERY_HASH_ALGORITHM
    return claims
