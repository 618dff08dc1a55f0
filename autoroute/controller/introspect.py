"""
Controller introspection.

Enumerates a controller's public methods and checks their call shapes
without invoking them.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Tuple
import functools
import inspect


def is_receiver(instance: Any) -> bool:
    """
    Whether ``instance`` can supply bound methods.

    Classes, None, and values of builtin types (numbers, strings,
    containers, functions, modules) are rejected.
    """
    if instance is None or inspect.isclass(instance):
        return False
    return type(instance).__module__ != "builtins"


def _is_attribute(member: Any) -> bool:
    return inspect.isclass(member) or isinstance(member, (property, functools.cached_property))


def public_methods(instance: Any) -> Dict[str, Callable[..., Any]]:
    """
    Return ``{name: bound method}`` for every public method of ``instance``.

    Methods come from the instance's type, inherited ones included, so an
    override in a subclass replaces the base method. Keys are in name order.

    Any callable type attribute counts, so methods wrapped by decorators
    such as ``functools.lru_cache`` are kept; nested classes and properties
    are not methods.
    """
    methods: Dict[str, Callable[..., Any]] = {}
    for name, member in inspect.getmembers(type(instance)):
        if name.startswith("_") or _is_attribute(member):
            continue
        bound = getattr(instance, name)
        if callable(bound):
            methods[name] = bound
    return methods


def find_hook(
    methods: Dict[str, Callable[..., Any]],
    names: Iterable[str],
) -> Optional[Tuple[str, Callable[..., Any]]]:
    """Return the first of ``names`` present in ``methods``."""
    for name in names:
        if name in methods:
            return name, methods[name]
    return None


def _signature(fn: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def accepts_context(fn: Callable[..., Any]) -> bool:
    """Whether ``fn`` can be called with exactly one positional argument."""
    sig = _signature(fn)
    if sig is None:
        return False
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True


def accepts_no_args(fn: Callable[..., Any]) -> bool:
    """Whether ``fn`` can be called with no arguments."""
    sig = _signature(fn)
    if sig is None:
        return False
    try:
        sig.bind()
    except TypeError:
        return False
    return True


def describe_signature(fn: Callable[..., Any]) -> str:
    """Render ``fn``'s signature for fault messages."""
    sig = _signature(fn)
    name = getattr(fn, "__name__", type(fn).__name__)
    if sig is None:
        return f"{name}(?)"
    prefix = "async " if inspect.iscoroutinefunction(fn) else ""
    return f"{prefix}{name}{sig}"
