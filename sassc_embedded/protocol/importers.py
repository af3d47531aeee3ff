"""Importer interfaces of the protocol compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .compiler import Syntax


@dataclass(frozen=True, slots=True)
class ImporterResult:
    contents: str
    syntax: Syntax
    source_map_url: str | None = None


@runtime_checkable
class StylesheetImporter(Protocol):
    """Two-phase importer: resolve a URL, then load what it resolved to."""

    def canonicalize(self, url: str, *, from_import: bool = False) -> str | None: ...

    def load(self, canonical_url: str) -> ImporterResult | None: ...


@runtime_checkable
class FileUrlImporter(Protocol):
    """Importer that redirects a URL to a ``file:`` URL the compiler reads."""

    def find_file_url(self, url: str, *, from_import: bool = False) -> str | None: ...
