"""
Route path composition.

Joins the controller prefix, the decoded segment and the trailing-slash
policy into the path handed to the router. Paths are absolute; the
router's group joins them onto its own base path.
"""

from typing import Optional

from ..utils.casing import kebab_case

#: Stripped from the front of a controller's type name to form its prefix.
CONTROLLER_PREFIX = "Controller"


def controller_prefix(type_name: str) -> Optional[str]:
    """
    Derive a controller's base path segment from its type name.

    ``ControllerWidget`` -> ``widget``; ``Controller`` -> None.
    """
    if type_name.startswith(CONTROLLER_PREFIX):
        type_name = type_name[len(CONTROLLER_PREFIX):]
    if not type_name:
        return None
    return kebab_case(type_name) or None


def compose_path(prefix: Optional[str], segment: str, append_slash: bool = False) -> str:
    """
    Build a route path.

    Examples::

        compose_path("widget", "thing")        -> "/widget/thing"
        compose_path("widget", "")             -> "/widget/"
        compose_path(None, "thing")            -> "/thing"
        compose_path(None, "")                 -> "/"
        compose_path(None, "thing", True)      -> "/thing/"
    """
    if prefix:
        path = "/" + prefix.strip("/") + "/" + segment
    else:
        path = "/" + segment

    if append_slash and not path.endswith("/"):
        path += "/"

    return path
