"""
Request Context

The single argument every controller handler, before hook and after
hook receives. Carries the incoming request data and accumulates the
response the router writes back.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from urllib.parse import parse_qs
import json


@dataclass
class Context:
    """
    Per-request context handed to each handler in a route's chain.

    Handlers in the same chain share one Context, so a before hook can
    leave data in ``state`` for the action and the after hook.

    Attributes:
        method: HTTP method of the request
        path: Request path
        query_string: Raw query string
        headers: Request headers (lowercase names)
        body: Raw request body
        state: Free-form per-request storage
        status: Response status code
        response_body: Response payload
        response_headers: Response headers
    """

    method: str
    path: str
    query_string: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    state: Dict[str, Any] = field(default_factory=dict)

    status: int = 200
    response_body: bytes = b""
    response_headers: Dict[str, str] = field(default_factory=dict)

    _aborted: bool = field(default=False, init=False, repr=False)
    _query: Optional[Dict[str, List[str]]] = field(default=None, init=False, repr=False)

    # ------------------------------------------------------------------
    # Request side
    # ------------------------------------------------------------------

    @property
    def query(self) -> Dict[str, List[str]]:
        """Query parameters (parsed lazily)."""
        if self._query is None:
            self._query = parse_qs(self.query_string, keep_blank_values=True)
        return self._query

    def query_param(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get first value of a query parameter."""
        values = self.query.get(key)
        return values[0] if values else default

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)

    # ------------------------------------------------------------------
    # Response side
    # ------------------------------------------------------------------

    def string(self, status: int, text: str) -> None:
        """Write a plain text response."""
        self.status = status
        self.response_headers["content-type"] = "text/plain; charset=utf-8"
        self.response_body = text.encode("utf-8")

    def json(self, status: int, data: Any) -> None:
        """Write a JSON response."""
        self.status = status
        self.response_headers["content-type"] = "application/json"
        self.response_body = json.dumps(data).encode("utf-8")

    def status_only(self, status: int) -> None:
        """Set the status code, leaving the body untouched."""
        self.status = status

    # ------------------------------------------------------------------
    # Chain control
    # ------------------------------------------------------------------

    def abort(self) -> None:
        """Stop the chain: handlers after the current one are not called."""
        self._aborted = True

    def abort_with_status(self, status: int) -> None:
        self.status = status
        self.abort()

    @property
    def is_aborted(self) -> bool:
        return self._aborted
