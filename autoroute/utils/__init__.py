"""
autoroute utils package

- casing: identifier to URL segment conversion
- urls: URL path manipulation utilities
"""

from .casing import kebab_case
from .urls import join_paths, toggle_trailing_slash

__all__ = [
    "kebab_case",
    "join_paths",
    "toggle_trailing_slash",
]
