"""
Query Canonicalization
======================
Deterministic querystring encoding and hashing for signed requests.
"""

import hashlib
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

QUERY_HASH_ALGORITHM = "SHA512"


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Return a copy of ``params`` without ``None`` values.

    ``None`` items are removed from sequences, and keys whose sequence ends
    up empty are dropped. Both the signed query and the transmitted body are
    built from this result. The caller's mapping is never modified.
    """
    if not params:
        return {}
    cleaned: Dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            value = [item for item in value if item is not None]
            if not value:
                continue
        elif value is None:
            continue
        cleaned[key] = value
    return cleaned


def _pairs(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs = []
    for key in sorted(params):
        value = params[key]
        if isinstance(value, list):
            # Sequences keep their order as repeated keys; brackets are the caller's key
            pairs.extend((key, _encode_value(item)) for item in value)
        else:
            pairs.append((key, _encode_value(value)))
    return pairs


def canonical_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """
    Encode parameters into their canonical querystring.

    Keys are sorted, ``None`` values are dropped, sequences expand into
    repeated keys and booleans render as ``true``/``false``. The result is
    independent of the mapping's insertion order.

    Args:
        params: Request parameters (may be None)

    Returns:
        Canonical querystring without the leading ``?``
    """
    return urlencode(_pairs(clean_params(params)))


def hash_query(query_string: str) -> str:
    """
    Compute the SHA-512 hex digest of a querystring.

    Args:
        query_string: Canonical querystring

    Returns:
        128-character lowercase hex digest
    """
    return hashlib.sha512(query_string.encode("utf-8")).hexdigest()
