"""
Identifier case conversion.

Turns method and class names into URL path segments:

    OnlyMethod   -> only-method
    only_method  -> only-method
    HTTPServer   -> http-server
    TestBefore   -> test-before
"""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[\s_\-.]+")


def kebab_case(name: str) -> str:
    """Convert a CamelCase or snake_case identifier to lowercase kebab-case."""
    if not name:
        return ""
    s = _ACRONYM_BOUNDARY.sub(r"\1-\2", name)
    s = _WORD_BOUNDARY.sub(r"\1-\2", s)
    s = _SEPARATORS.sub("-", s)
    return s.strip("-").lower()
