"""
Method name decoding.

Decides from a method's name alone whether it is a route, and if so
which HTTP verb and path segment it binds to:

    ActionKnown / action_known     -> any verb, "known"
    GetEndpoint / get_endpoint     -> GET, "endpoint"
    PostOnlyMethod                 -> POST, "only-method"
    Get / get                      -> GET, "" (index)
    IgnoreThisMethod               -> not a route

Verb matching is a plain textual prefix test: ``Getter`` decodes to
GET with segment "ter" and ``header`` to HEAD with segment "er".
"""

from dataclasses import dataclass
from typing import Optional

from ..methods import ANY_VERB, RFC_HTTP_METHODS
from ..utils.casing import kebab_case

#: Literal prefixes that bind a method under every HTTP verb.
ACTION_MARKERS = ("Action", "action")


@dataclass(frozen=True)
class MethodBinding:
    """Verb (or ANY_VERB) and path segment decoded from a method name."""

    verb: str
    segment: str

    @property
    def is_any(self) -> bool:
        return self.verb == ANY_VERB


def http_verb(name: str) -> Optional[str]:
    """Return the RFC verb ``name`` starts with, ignoring case."""
    upper = name.upper()
    for verb in RFC_HTTP_METHODS:
        if upper.startswith(verb):
            return verb
    return None


def decode_method(name: str) -> Optional[MethodBinding]:
    """
    Decode a controller method name.

    Args:
        name: Method name as defined on the controller class

    Returns:
        MethodBinding, or None when the method is not a route
    """
    for marker in ACTION_MARKERS:
        if name.startswith(marker):
            return MethodBinding(ANY_VERB, kebab_case(name[len(marker):]))

    verb = http_verb(name)
    if verb is None:
        return None

    return MethodBinding(verb, kebab_case(name[len(verb):]))
