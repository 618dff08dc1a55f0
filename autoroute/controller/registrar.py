"""
Controller Registrar - Binds a controller's methods to a router.

Turns a controller instance into route registrations:

1. Validate the instance and enumerate its public methods
2. Derive the controller prefix from its type name (attach only)
3. Run the init hook once, then resolve the before/after wrappers
4. Decode each method name, compose its path, check its call shape
5. Bind the chain (before?, handler, after?) under the decoded verb

Binding is incremental. When a later method fails its signature check,
routes bound earlier in the same call stay registered. Registration
faults are logged at the level mapped from their severity before they
propagate.
"""

from typing import Any, Callable, List, Optional
import inspect
import logging

from ..config import RouteConfig, get_config
from ..faults import (
    InitFailedFault,
    InvalidReceiverKindFault,
    NoMethodsFoundFault,
    RegistrationFault,
    WrongHandlerSignatureFault,
    WrongWrapperSignatureFault,
)
from ..router import Handler, RouteEntry, RouterGroup
from .introspect import (
    accepts_context,
    accepts_no_args,
    describe_signature,
    find_hook,
    is_receiver,
    public_methods,
)
from .naming import decode_method
from .paths import compose_path, controller_prefix

logger = logging.getLogger("autoroute.registrar")

INIT_HOOK = ("init", "Init")
BEFORE_HOOK = ("before", "Before")
AFTER_HOOK = ("after", "After")


def attach_controller(
    router: RouterGroup,
    instance: Any,
    *,
    config: Optional[RouteConfig] = None,
) -> List[RouteEntry]:
    """
    Register a controller under its own prefix.

    ``ControllerUsers().get_profile`` becomes ``GET /users/profile``.
    """
    return register_controller(router, instance, True, config=config)


def embed_controller(
    router: RouterGroup,
    instance: Any,
    *,
    config: Optional[RouteConfig] = None,
) -> List[RouteEntry]:
    """
    Register a controller at the router's current base path.

    ``ControllerUsers().get_profile`` becomes ``GET /profile``.
    """
    return register_controller(router, instance, False, config=config)


def register_controller(
    router: RouterGroup,
    instance: Any,
    prepend_prefix: bool,
    *,
    config: Optional[RouteConfig] = None,
) -> List[RouteEntry]:
    """
    Derive routes from ``instance``'s method names and bind them to ``router``.

    Args:
        router: Registration capability (``handle`` / ``any``)
        instance: Controller object
        prepend_prefix: Prefix paths with the controller's derived base path
        config: Path policy for this call; defaults to the process-wide config

    Returns:
        The bound routes, in binding order

    Raises:
        InvalidReceiverKindFault: ``instance`` is a class, None or builtin value
        NoMethodsFoundFault: ``instance`` has no public methods
        InitFailedFault: The init hook raised
        WrongWrapperSignatureFault: A lifecycle hook has the wrong call shape
        WrongHandlerSignatureFault: A route method has the wrong call shape
    """
    if config is None:
        config = get_config()

    try:
        return _bind_controller(router, instance, prepend_prefix, config)
    except RegistrationFault as fault:
        logger.log(fault.severity.log_level, "Registration failed: %s", fault)
        raise


def _bind_controller(
    router: RouterGroup,
    instance: Any,
    prepend_prefix: bool,
    config: RouteConfig,
) -> List[RouteEntry]:
    if not is_receiver(instance):
        raise InvalidReceiverKindFault(instance)

    name = type(instance).__name__
    methods = public_methods(instance)

    if not methods:
        raise NoMethodsFoundFault(name)

    prefix = controller_prefix(name) if prepend_prefix else None

    _run_init(name, methods)
    before = _wrapper(name, methods, BEFORE_HOOK)
    after = _wrapper(name, methods, AFTER_HOOK)

    entries: List[RouteEntry] = []

    for method_name, method in methods.items():
        binding = decode_method(method_name)
        if binding is None:
            logger.debug("%s.%s is not a route, skipped", name, method_name)
            continue

        path = compose_path(prefix, binding.segment, config.append_trailing_slash)

        if not accepts_context(method):
            raise WrongHandlerSignatureFault(name, method_name, describe_signature(method))

        chain = _chain(before, method, after)

        if binding.is_any:
            router.any(path, *chain)
        else:
            router.handle(binding.verb, path, *chain)

        entries.append(RouteEntry(binding.verb, path, chain))
        logger.debug("%s.%s bound to %s %s", name, method_name, binding.verb, path)

    logger.info(
        "Registered controller %s: %d route(s)%s",
        name,
        len(entries),
        f" under /{prefix}" if prefix else "",
    )
    return entries


def _wrapper(controller: str, methods, names) -> Optional[Handler]:
    hook = find_hook(methods, names)
    if hook is None:
        return None
    hook_name, fn = hook
    if not accepts_context(fn):
        raise WrongWrapperSignatureFault(controller, hook_name, describe_signature(fn))
    return fn


def _run_init(controller: str, methods) -> None:
    hook = find_hook(methods, INIT_HOOK)
    if hook is None:
        return
    hook_name, fn = hook
    if inspect.iscoroutinefunction(fn) or not accepts_no_args(fn):
        raise WrongWrapperSignatureFault(controller, hook_name, describe_signature(fn))

    try:
        fn()
    except Exception as exc:
        raise InitFailedFault(controller, exc) from exc

    logger.debug("%s.%s completed", controller, hook_name)


def _chain(
    before: Optional[Handler],
    handler: Callable[..., Any],
    after: Optional[Handler],
) -> tuple:
    return tuple(h for h in (before, handler, after) if h is not None)
