"""
autoroute faults - Structured fault types.

Every error the package raises is a typed Fault with a stable code,
a domain and metadata naming the offending controller, method or route.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
)

from .domains import (
    # Config
    ConfigFault,
    ConfigInvalidFault,
    # Registration
    RegistrationFault,
    InvalidReceiverKindFault,
    NoMethodsFoundFault,
    InitFailedFault,
    WrongWrapperSignatureFault,
    WrongHandlerSignatureFault,
    # Routing
    RoutingFault,
    RouteNotFoundFault,
    MethodNotAllowedFault,
    RouteConflictFault,
    PatternInvalidFault,
    TrailingSlashRedirectFault,
)

__all__ = [
    "Fault",
    "FaultDomain",
    "Severity",

    "ConfigFault",
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
