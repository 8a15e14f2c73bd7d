"""
Header Functions
=================
Functions for attaching signed assertions to requests.
"""

from typing import Any, Dict, Mapping, Optional

from .token import TokenSigner

AUTHORIZATION_HEADER = "Authorization"


def bearer(token: str) -> str:
    return f"Bearer {token}"


def create_auth_headers(
    signer: TokenSigner,
    params: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """
    Create headers for a signed request.

    Args:
        signer: Signer holding the client's credentials
        params: The exact parameters that will be transmitted

    Returns:
        Dictionary of headers to include in request
    """
    return {AUTHORIZATION_HEADER: bearer(signer.sign(params))}
