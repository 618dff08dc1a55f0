"""
Router - Route table that controllers are bound into.

Exposes the two registration calls the controller registrar relies on:

    handle(verb, path, *handlers)   bind a chain under one HTTP verb
    any(path, *handlers)            bind a chain under every known verb

Lookup is an exact static path match per method (no path parameters).
Groups share one table and prefix their registrations with a base path.
"""

from typing import Any, Awaitable, Callable, Dict, List, Protocol, Tuple, Union
from dataclasses import dataclass
import inspect
import logging

from .context import Context
from .methods import ANY_METHODS
from .faults import (
    MethodNotAllowedFault,
    PatternInvalidFault,
    RouteConflictFault,
    RouteNotFoundFault,
    TrailingSlashRedirectFault,
)
from .utils.urls import join_paths, toggle_trailing_slash

logger = logging.getLogger("autoroute.router")

Handler = Callable[[Context], Union[None, Awaitable[None]]]
HandlerChain = Tuple[Handler, ...]


@dataclass(frozen=True)
class RouteEntry:
    """One bound route: verb, absolute path and handler chain."""

    verb: str
    path: str
    handlers: HandlerChain


class RouterGroup(Protocol):
    """Registration capability controllers are bound through."""

    def handle(self, method: str, path: str, *handlers: Handler) -> Any: ...

    def any(self, path: str, *handlers: Handler) -> Any: ...


class _RouteTable:
    """Shared storage: {path: {method: chain}} plus registration order."""

    __slots__ = ("entries", "by_path")

    def __init__(self) -> None:
        self.entries: List[RouteEntry] = []
        self.by_path: Dict[str, Dict[str, HandlerChain]] = {}

    def add(self, method: str, path: str, handlers: HandlerChain) -> None:
        methods = self.by_path.setdefault(path, {})
        if method in methods:
            raise RouteConflictFault(path, method)
        methods[method] = handlers
        self.entries.append(RouteEntry(method, path, handlers))
        logger.debug("Route %s %s -> %d handler(s)", method, path, len(handlers))


class Group:
    """
    A view on the route table rooted at ``base_path``.

    Example:
        api = router.group("/api")
        api.handle("GET", "/users", list_users)   # GET /api/users
    """

    __slots__ = ("_table", "base_path")

    def __init__(self, table: _RouteTable, base_path: str = "/"):
        self._table = table
        self.base_path = join_paths(base_path)

    def group(self, path: str) -> "Group":
        """Create a nested group under this one."""
        return Group(self._table, join_paths(self.base_path, path))

    def handle(self, method: str, path: str, *handlers: Handler) -> "Group":
        """Bind ``handlers`` under ``method`` at ``path`` (relative to the group)."""
        method = method.upper()
        if not method or not method.isalpha():
            raise PatternInvalidFault(path, f"invalid HTTP method {method!r}")
        if not handlers:
            raise PatternInvalidFault(path, "at least one handler is required")
        self._table.add(method, join_paths(self.base_path, path), tuple(handlers))
        return self

    def any(self, path: str, *handlers: Handler) -> "Group":
        """Bind ``handlers`` at ``path`` under every method in ANY_METHODS."""
        for method in ANY_METHODS:
            self.handle(method, path, *handlers)
        return self


class Router(Group):
    """
    Root route group plus request lookup and chain execution.

    Usage::

        router = Router()
        attach_controller(router, ControllerUsers())
        ctx = await router.dispatch(Context("GET", "/users/"))
    """

    __slots__ = ("redirect_trailing_slash", "handle_method_not_allowed")

    def __init__(
        self,
        *,
        redirect_trailing_slash: bool = True,
        handle_method_not_allowed: bool = True,
    ):
        super().__init__(_RouteTable(), "/")
        self.redirect_trailing_slash = redirect_trailing_slash
        self.handle_method_not_allowed = handle_method_not_allowed

    @property
    def routes(self) -> List[RouteEntry]:
        """All bound routes, in registration order."""
        return list(self._table.entries)

    def lookup(self, method: str, path: str) -> HandlerChain:
        """
        Find the handler chain for a request.

        Raises:
            TrailingSlashRedirectFault: Only the slash-toggled path matches
            MethodNotAllowedFault: Path is known but not for this method
            RouteNotFoundFault: Nothing matches
        """
        by_path = self._table.by_path
        methods = by_path.get(path)

        if methods and method in methods:
            return methods[method]

        if self.redirect_trailing_slash:
            alternative = toggle_trailing_slash(path)
            if method in by_path.get(alternative, ()):
                raise TrailingSlashRedirectFault(path, method, alternative)

        if methods and self.handle_method_not_allowed:
            raise MethodNotAllowedFault(path, method, sorted(methods))

        raise RouteNotFoundFault(path, method)

    async def dispatch(self, ctx: Context) -> Context:
        """Look up the route for ``ctx`` and run its chain."""
        handlers = self.lookup(ctx.method, ctx.path)
        await run_chain(handlers, ctx)
        return ctx


async def run_chain(handlers: HandlerChain, ctx: Context) -> None:
    """
    Call each handler with ``ctx`` in order.

    Coroutine results are awaited. After a handler calls ``ctx.abort()``
    the remaining handlers are skipped.
    """
    for handler in handlers:
        result = handler(ctx)
        if inspect.isawaitable(result):
            await result
        if ctx.is_aborted:
            break
