"""
URL Utilities for autoroute.
"""


def join_paths(*parts: str) -> str:
    """
    Join URL path segments the way route groups combine paths.

    Handles:
    - Multiple slashes (//) -> /
    - Leading slashes on inner parts
    - Empty segments

    A trailing slash on the last part is kept, so an index route
    registered as "users/" under "/api" stays "/api/users/".

    Example:
        join_paths("/api/", "/v1", "users/") -> "/api/v1/users/"
    """
    clean_parts = []

    for part in parts:
        if not part:
            continue

        clean = part.strip("/")

        if clean:
            clean_parts.append(clean)

    joined = "/" + "/".join(clean_parts)

    if parts and parts[-1].endswith("/") and joined != "/":
        joined += "/"

    return joined


def toggle_trailing_slash(path: str) -> str:
    """Return ``path`` with its trailing slash added or removed."""
    if path == "/":
        return path
    if path.endswith("/"):
        return path.rstrip("/") or "/"
    return path + "/"
