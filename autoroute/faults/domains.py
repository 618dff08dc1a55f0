"""
autoroute faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults
- REGISTRATION faults (controller inspection and binding)
- ROUTING faults (route table and request matching)
"""

from typing import Any, Optional, Sequence
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            public=False,
            metadata=metadata,
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# REGISTRATION Faults
# ============================================================================

class RegistrationFault(Fault):
    """
    Base class for controller registration faults.

    Raised synchronously by attach/embed/register. Routes bound before the
    fault was raised stay registered with the router.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        controller: str,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        self.controller = controller
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.REGISTRATION,
            severity=severity,
            public=False,
            metadata={"controller": controller, **(metadata or {})},
        )


class InvalidReceiverKindFault(RegistrationFault):
    """Instance is not an object that bound methods can be taken from."""

    def __init__(self, instance: Any, **kwargs):
        kind = type(instance).__name__
        super().__init__(
            code="INVALID_RECEIVER_KIND",
            message=f"Wrong controller instance type: {kind} (value {instance!r})",
            controller=kind,
            metadata={"kind": kind, **kwargs.get("metadata", {})},
        )


class NoMethodsFoundFault(RegistrationFault):
    """Controller exposes no public methods."""

    def __init__(self, controller: str, **kwargs):
        super().__init__(
            code="NO_METHODS_FOUND",
            message=f"Controller instance {controller}: methods not found",
            controller=controller,
            metadata=kwargs.get("metadata"),
        )


class InitFailedFault(RegistrationFault):
    """The controller's init hook raised; nothing was bound."""

    def __init__(self, controller: str, cause: BaseException, **kwargs):
        self.cause = cause
        super().__init__(
            code="INIT_FAILED",
            message=f"Controller {controller} init failed: {cause}",
            controller=controller,
            metadata={"cause": cause, **kwargs.get("metadata", {})},
        )


class WrongWrapperSignatureFault(RegistrationFault):
    """A lifecycle hook (init/before/after) has an incompatible call shape."""

    def __init__(self, controller: str, hook: str, signature: str, **kwargs):
        self.hook = hook
        super().__init__(
            code="WRONG_WRAPPER_SIGNATURE",
            message=f"Controller {controller} has {hook} hook with wrong signature {signature}",
            controller=controller,
            metadata={"hook": hook, "signature": signature, **kwargs.get("metadata", {})},
        )


class WrongHandlerSignatureFault(RegistrationFault):
    """A route-eligible method cannot be called as a handler."""

    def __init__(self, controller: str, method: str, signature: str, **kwargs):
        self.method = method
        super().__init__(
            code="WRONG_HANDLER_SIGNATURE",
            message=(
                f"Controller {controller} has action method {method} "
                f"with wrong signature {signature}"
            ),
            controller=controller,
            metadata={"method": method, "signature": signature, **kwargs.get("metadata", {})},
        )


# ============================================================================
# ROUTING Faults
# ============================================================================

class RoutingFault(Fault):
    """Base class for routing faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        public: bool = True,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.ROUTING,
            severity=severity,
            public=public,
            metadata=metadata,
        )


class RouteNotFoundFault(RoutingFault):
    """Route not found."""

    def __init__(self, path: str, method: str, **kwargs):
        super().__init__(
            code="ROUTE_NOT_FOUND",
            message=f"Route not found: {method} {path}",
            metadata={"path": path, "method": method, **kwargs.get("metadata", {})},
        )


class MethodNotAllowedFault(RoutingFault):
    """Path is registered, but not for this HTTP method."""

    def __init__(self, path: str, method: str, allowed: Sequence[str], **kwargs):
        self.allowed = list(allowed)
        super().__init__(
            code="METHOD_NOT_ALLOWED",
            message=f"Method {method} not allowed for {path} (allowed: {', '.join(self.allowed)})",
            metadata={"path": path, "method": method, "allowed": self.allowed,
                      **kwargs.get("metadata", {})},
        )


class RouteConflictFault(RoutingFault):
    """The same method and path were registered twice."""

    def __init__(self, path: str, method: str, **kwargs):
        super().__init__(
            code="ROUTE_CONFLICT",
            message=f"Route already registered: {method} {path}",
            severity=Severity.FATAL,
            public=False,
            metadata={"path": path, "method": method, **kwargs.get("metadata", {})},
        )


class PatternInvalidFault(RoutingFault):
    """Route pattern is invalid."""

    def __init__(self, pattern: str, reason: str, **kwargs):
        super().__init__(
            code="PATTERN_INVALID",
            message=f"Invalid route pattern '{pattern}': {reason}",
            severity=Severity.FATAL,
            public=False,
            metadata={"pattern": pattern, "reason": reason, **kwargs.get("metadata", {})},
        )


class TrailingSlashRedirectFault(RoutingFault):
    """The path is only registered with its trailing slash toggled."""

    def __init__(self, path: str, method: str, location: str, **kwargs):
        self.location = location
        super().__init__(
            code="TRAILING_SLASH_REDIRECT",
            message=f"{method} {path} is registered as {location}",
            severity=Severity.INFO,
            metadata={"path": path, "method": method, "location": location,
                      **kwargs.get("metadata", {})},
        )
