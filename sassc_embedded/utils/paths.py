"""Conversion between filesystem paths and ``file:`` URLs."""

from __future__ import annotations

import os
import re
from urllib.parse import quote, unquote, urlsplit


# Characters the legacy URI escaper leaves alone besides ASCII alphanumerics
# and "_.-~", which ``quote`` never escapes.
_URL_SAFE = ";/?:@&=+$,[]!*'()"
# "?" would start a query, so paths escape it.
_PATH_SAFE = _URL_SAFE.replace("?", "")

_DRIVE_PATH = re.compile(r"^/[a-zA-Z]:")


def escape_url(text: str) -> str:
    return quote(text, safe=_URL_SAFE)


def file_url_to_path(url: str | None) -> str | None:
    if url is None:
        return None

    path = unquote(urlsplit(url).path)
    if os.name == "nt" and _DRIVE_PATH.match(path):
        path = path[1:]
    return path


def path_to_file_url(path: str | os.PathLike[str] | None) -> str | None:
    if path is None:
        return None

    path = os.path.abspath(path)
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    if not path.startswith("/"):
        path = f"/{path}"
    return f"file://{quote(path, safe=_PATH_SAFE)}"


def relative_path(start: str, to: str | None) -> str | None:
    """Express ``to`` relative to ``start``; ``None`` passes through."""
    if to is None:
        return None
    return os.path.relpath(to, start)
