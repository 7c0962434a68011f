"""
Generic RFC 3986 URI check used for ``uri`` and every entry of ``resources``.
"""

import re

_ILLEGAL_CHARS = re.compile(r"[^a-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]", re.IGNORECASE)
_BAD_ESCAPE = re.compile(r"%[^0-9a-f]|%[0-9a-f](?:[^0-9a-f]|\Z)", re.IGNORECASE)
# RFC 3986 appendix B
_SPLIT = re.compile(r"(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?")
_SCHEME = re.compile(r"[a-z][a-z0-9+\-.]*", re.IGNORECASE)


def is_uri(value: object) -> bool:
    """True when ``value`` is an absolute URI (a scheme is required)."""
    if not isinstance(value, str) or not value:
        return False
    if _ILLEGAL_CHARS.search(value) or _BAD_ESCAPE.search(value):
        return False

    scheme, authority, path = _SPLIT.fullmatch(value).group(1, 2, 3)
    if not scheme or not _SCHEME.fullmatch(scheme):
        return False
    if authority:
        # path-abempty
        if path and not path.startswith("/"):
            return False
    elif path.startswith("//"):
        return False
    return True
