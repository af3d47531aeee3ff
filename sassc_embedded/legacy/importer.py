"""The legacy importer capability."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Import:
    """One stylesheet produced by a legacy importer.

    ``source`` holds inline contents; without it the compiler reads ``path``
    from disk.
    """

    path: str
    source: str | None = None
    source_map_path: str | None = None


class Importer:
    """Base class for legacy importers.

    Subclasses override :meth:`imports`. Returning an :class:`Import` whose
    ``path`` equals the requested path declines the import.
    """

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.options = options if options is not None else {}

    def imports(self, path: str, parent_path: str | None) -> Import | Sequence[Import]:
        raise NotImplementedError


__all__ = ["Import", "Importer"]
