"""Bridge a legacy importer into the protocol's canonicalize/load importers."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from sassc_embedded.core.errors import ImportSyntaxError
from sassc_embedded.core.logging import get_logger
from sassc_embedded.legacy.importer import Import, Importer as LegacyImporter
from sassc_embedded.protocol.compiler import Syntax
from sassc_embedded.protocol.importers import ImporterResult
from sassc_embedded.utils.paths import file_url_to_path, path_to_file_url


logger = get_logger(__name__)

SHIM_SCHEME = "sass-importer-shim"

_SYNTAX_BY_EXTENSION: tuple[tuple[re.Pattern[str], Syntax], ...] = (
    (re.compile(r"\.scss$", re.IGNORECASE), "scss"),
    (re.compile(r"\.sass$", re.IGNORECASE), "indented"),
    (re.compile(r"\.css$", re.IGNORECASE), "css"),
)


@dataclass(frozen=True, slots=True)
class RealUrl:
    """A ``file:`` URL naming an actual (or importer-provided) stylesheet."""

    file_url: str

    @property
    def wire(self) -> str:
        return self.file_url


@dataclass(frozen=True, slots=True)
class SyntheticUrl:
    """The shim's own entry holding the ``@import`` list for one request."""

    file_url: str

    @property
    def wire(self) -> str:
        return f"{SHIM_SCHEME}:{self.file_url}"


CanonicalUrl = RealUrl | SyntheticUrl


class _Declined:
    def __repr__(self) -> str:
        return "DECLINED"


DECLINED: Final = _Declined()

ImportRecord = ImporterResult | _Declined


def parse_canonical_url(url: str) -> CanonicalUrl:
    prefix = f"{SHIM_SCHEME}:"
    if url.startswith(prefix):
        return SyntheticUrl(url[len(prefix) :])
    return RealUrl(url)


def syntax_for_path(path: str) -> Syntax:
    for pattern, syntax in _SYNTAX_BY_EXTENSION:
        if pattern.search(path):
            return syntax
    raise ImportSyntaxError(f"Cannot infer stylesheet syntax from {path!r}", data=path)


class FileImporter:
    """Hands ``file:`` URLs straight back so the compiler reads them from disk."""

    def find_file_url(self, url: str, *, from_import: bool = False) -> str | None:
        if url.startswith("file:"):
            return url
        return None


class Importer:
    """Per-render wrapper around a legacy importer.

    Every legacy ``imports`` call is resolved once; the results, including
    declined requests, are cached for the rest of the render.
    """

    def __init__(self, importer: LegacyImporter):
        self._importer = importer
        self._results: dict[CanonicalUrl, ImportRecord] = {}

    def canonicalize(self, url: str, *, from_import: bool = False) -> str | None:
        path = file_url_to_path(url)
        if path is None:
            return None
        candidate = RealUrl(path_to_file_url(os.path.abspath(path)))  # type: ignore[arg-type]

        if candidate in self._results:
            if self._results[candidate] is DECLINED:
                return None
            return candidate.wire

        synthetic = SyntheticUrl(candidate.file_url)
        if synthetic in self._results:
            return synthetic.wire

        parent_path = self._importer.options.get("filename")
        imports = self._importer.imports(path, parent_path)

        if not isinstance(imports, Sequence):
            if imports.path == path:
                logger.debug("legacy_importer_declined", path=path)
                self._results[candidate] = DECLINED
                return None
            imports = [imports]

        statements = [self._register(path, entry) for entry in imports]
        self._results[synthetic] = ImporterResult(
            contents="\n".join(statements),
            syntax="scss",
        )

        logger.debug(
            "legacy_importer_resolved",
            path=path,
            canonical_url=synthetic.wire,
            imports=len(statements),
        )
        return synthetic.wire

    def load(self, canonical_url: str) -> ImporterResult | None:
        record = self._results.get(parse_canonical_url(canonical_url))
        if record is None or record is DECLINED:
            return None
        return record  # type: ignore[return-value]

    def _register(self, requested_path: str, entry: Import) -> str:
        import_url = RealUrl(path_to_file_url(os.path.abspath(entry.path)))  # type: ignore[arg-type]

        if entry.source is not None:
            source_map_url = None
            if entry.source_map_path:
                source_map_url = path_to_file_url(
                    os.path.abspath(os.path.join(requested_path, entry.source_map_path))
                )
            self._results[import_url] = ImporterResult(
                contents=entry.source,
                syntax=syntax_for_path(entry.path),
                source_map_url=source_map_url,
            )
        else:
            self._results[import_url] = DECLINED

        return f"@import {json.dumps(import_url.wire)};"


class ImportHandler:
    def __init__(self, options: Mapping[str, Any]):
        importer = options.get("importer")
        # An importer class is instantiated with the render options
        if isinstance(importer, type):
            importer = importer(options)
        self._importer: LegacyImporter | None = importer

    def setup(self) -> list[FileImporter | Importer]:
        """Importers to register for one render, file passthrough first."""
        if self._importer is not None:
            return [FileImporter(), Importer(self._importer)]
        return [FileImporter()]


__all__ = [
    "DECLINED",
    "FileImporter",
    "ImportHandler",
    "Importer",
    "RealUrl",
    "SyntheticUrl",
    "parse_canonical_url",
    "syntax_for_path",
]
