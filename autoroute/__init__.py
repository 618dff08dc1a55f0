"""
autoroute - Convention-based controller routing.

Public methods of a controller object become HTTP routes by name:

    get_endpoint / GetEndpoint      GET  /<controller>/endpoint
    post_only_method                POST /<controller>/only-method
    action_known / ActionKnown      any  /<controller>/known
    get / Get                       GET  /<controller>/

with optional lifecycle hooks ``init`` (once, at registration),
``before`` and ``after`` (around every handler).
"""

from .config import (
    RouteConfig,
    configure,
    get_config,
    set_append_trailing_slash,
)
from .context import Context
from .controller import (
    ACTION_MARKERS,
    CONTROLLER_PREFIX,
    MethodBinding,
    attach_controller,
    compose_path,
    controller_prefix,
    decode_method,
    embed_controller,
    http_verb,
    register_controller,
)
from .methods import ANY_METHODS, ANY_VERB, RFC_HTTP_METHODS
from .router import Group, RouteEntry, Router, RouterGroup
from .asgi import ASGIAdapter
from .server import run
from .utils import join_paths, kebab_case
from .faults import (
    Fault,
    ConfigInvalidFault,
    RegistrationFault,
    InvalidReceiverKindFault,
    NoMethodsFoundFault,
    InitFailedFault,
    WrongWrapperSignatureFault,
    WrongHandlerSignatureFault,
    RoutingFault,
    RouteNotFoundFault,
    MethodNotAllowedFault,
    RouteConflictFault,
    PatternInvalidFault,
    TrailingSlashRedirectFault,
)

__version__ = "0.1.0"

__all__ = [
    # Registration
    "attach_controller",
    "embed_controller",
    "register_controller",

    # Config
    "RouteConfig",
    "configure",
    "get_config",
    "set_append_trailing_slash",

    # Conventions
    "ACTION_MARKERS",
    "CONTROLLER_PREFIX",
    "ANY_VERB",
    "ANY_METHODS",
    "RFC_HTTP_METHODS",
    "MethodBinding",
    "decode_method",
    "http_verb",
    "compose_path",
    "controller_prefix",
    "kebab_case",
    "join_paths",

    # Routing
    "Router",
    "RouterGroup",
    "Group",
    "RouteEntry",
    "Context",
    "ASGIAdapter",
    "run",

    # Faults
    "Fault",
    "ConfigInvalidFault",
    "RegistrationFault",
    "InvalidReceiverKindFault",
    "NoMethodsFoundFault",
    "InitFailedFault",
    "WrongWrapperSignatureFault",
    "WrongHandlerSignatureFault",
    "RoutingFault",
    "RouteNotFoundFault",
    "MethodNotAllowedFault",
    "RouteConflictFault",
    "PatternInvalidFault",
    "TrailingSlashRedirectFault",
]
