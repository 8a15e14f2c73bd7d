"""
Request Descriptor
==================
Immutable description of one outgoing call.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..auth.query import canonical_query_string, clean_params

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True)
class RequestDescriptor:
    """
    A single API call as built by an endpoint method.

    ``params`` is the one value both signed and transmitted: query methods
    send it as the canonical querystring, body methods as the JSON body.
    """
    method: str
    path: str
    params: Optional[Mapping[str, Any]] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "method", self.method.upper())
        # Snapshot so later changes to the caller's dict cannot diverge from what was signed
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def has_body(self) -> bool:
        return self.method in BODY_METHODS

    @property
    def has_params(self) -> bool:
        return bool(clean_params(self.params))

    @property
    def query_string(self) -> str:
        """Canonical querystring for query methods, empty for body methods."""
        if self.has_body:
            return ""
        return canonical_query_string(self.params)

    @property
    def url(self) -> str:
        """Path plus querystring, relative to the client's base URL."""
        query = self.query_string
        return f"{self.path}?{query}" if query else self.path

    def body(self) -> Optional[Dict[str, Any]]:
        """JSON body for body methods; None otherwise or when empty."""
        if not self.has_body:
            return None
        return clean_params(self.params) or None

    def with_headers(self, headers: Mapping[str, str]) -> "RequestDescriptor":
        """Return a copy with ``headers`` merged over the existing ones."""
        return replace(self, headers={**self.headers, **headers})
