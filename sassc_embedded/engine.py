"""Legacy ``Engine`` API running on top of a protocol compiler."""

from __future__ import annotations

import base64
import json
import os
from collections.abc import Mapping
from typing import Any

from sassc_embedded.adapters.functions_handler import FunctionsHandler
from sassc_embedded.adapters.import_handler import SHIM_SCHEME, ImportHandler
from sassc_embedded.config.options import EngineOptions
from sassc_embedded.config.settings import load_paths as default_load_paths
from sassc_embedded.core.logging import get_logger
from sassc_embedded.legacy.errors import (
    OUTPUT_STYLES,
    InvalidStyleError,
    NotRenderedError,
    SassSyntaxError,
)
from sassc_embedded.protocol.compiler import (
    CompileError,
    CompileOptions,
    Compiler,
    OutputStyle,
    Syntax,
    get_default_compiler,
)
from sassc_embedded.utils.paths import (
    escape_url,
    file_url_to_path,
    path_to_file_url,
    relative_path,
)


logger = get_logger(__name__)

_STYLE_PREFIX = "sass_style_"
_STYLE_MAP: dict[str, OutputStyle] = {
    "nested": "expanded",
    "expanded": "expanded",
    "compact": "compressed",
    "compressed": "compressed",
}


class Engine:
    """Compile one template with legacy options.

    Args:
        template: Stylesheet source
        options: Legacy option bag; keyword arguments are merged on top
        compiler: Backend to use instead of the process-wide default
    """

    def __init__(
        self,
        template: str,
        options: Mapping[str, Any] | None = None,
        *,
        compiler: Compiler | None = None,
        **kwargs: Any,
    ):
        self._template = template
        self._raw_options: dict[str, Any] = {**(options or {}), **kwargs}
        self._options = EngineOptions.model_validate(self._raw_options)
        self._compiler = compiler

        self._dependencies: list[str] | None = None
        self._source_map: str | None = None
        self._rendered = False
        self._file_url: str | None = None

    def render(self) -> str | None:
        if not self._template:
            return str(self._template)

        compile_options = CompileOptions(
            source=self._template,
            importer=None,
            load_paths=self.load_paths,
            syntax=self.syntax,
            url=self.file_url,
            source_map=self.source_map_file is not None,
            source_map_include_sources=self.source_map_contents,
            style=self.output_style,
            functions=FunctionsHandler(self._raw_options).setup(self._options.functions),
            importers=ImportHandler(self._raw_options).setup(),
            alert_ascii=self._options.alert_ascii,
            alert_color=self._options.alert_color,
            logger=self._options.logger,
            quiet_deps=self._options.quiet_deps,
            verbose=self._options.verbose,
        )
        compiler = self._compiler or get_default_compiler()

        logger.debug(
            "render_started",
            url=compile_options.url,
            syntax=compile_options.syntax,
            style=compile_options.style,
        )
        try:
            result = compiler.compile_string(compile_options)
        except CompileError as e:
            error = self._syntax_error(e)
            logger.debug(
                "render_failed",
                url=compile_options.url,
                filename=error.filename,
                line=error.line,
            )
            raise error from e

        self._dependencies = [
            file_url_to_path(url)  # type: ignore[misc]
            for url in result.loaded_urls
            if url.startswith("file:") and url != self.file_url
        ]
        self._source_map = self.post_process_source_map(result.source_map)
        self._rendered = True

        logger.debug(
            "render_completed",
            url=compile_options.url,
            dependencies=len(self._dependencies),
            source_map=self._source_map is not None,
        )

        if self.quiet:
            return None
        return self.post_process_css(result.css)

    @property
    def dependencies(self) -> list[str]:
        if not self._rendered or self._dependencies is None:
            raise NotRenderedError("dependencies")
        return self._dependencies

    @property
    def source_map(self) -> str | None:
        if not self._rendered:
            raise NotRenderedError("source_map")
        return self._source_map

    @property
    def options(self) -> dict[str, Any]:
        return self._raw_options

    @property
    def filename(self) -> str | None:
        return self._options.filename

    @property
    def quiet(self) -> bool:
        return self._options.quiet

    @property
    def source_map_file(self) -> str | None:
        return self._options.source_map_file

    @property
    def source_map_contents(self) -> bool:
        return self._options.source_map_contents

    @property
    def source_map_embed(self) -> bool:
        return self._options.source_map_embed

    @property
    def omit_source_map_url(self) -> bool:
        return self._options.omit_source_map_url

    @property
    def file_url(self) -> str:
        if self._file_url is None:
            self._file_url = path_to_file_url(self.filename or "stdin")
        return self._file_url  # type: ignore[return-value]

    @property
    def syntax(self) -> Syntax:
        syntax = self._options.syntax
        if syntax == "sass":
            syntax = "indented"
        return syntax  # type: ignore[return-value]

    @property
    def output_style(self) -> OutputStyle:
        style = str(getattr(self._options.style, "value", self._options.style))
        if _STYLE_PREFIX not in style:
            style = f"{_STYLE_PREFIX}{style}"
        if style not in OUTPUT_STYLES:
            raise InvalidStyleError(style)
        return _STYLE_MAP[style.removeprefix(_STYLE_PREFIX)]

    @property
    def load_paths(self) -> list[str]:
        return [*self._options.load_paths, *default_load_paths()]

    def post_process_source_map(self, source_map: str | None) -> str | None:
        if source_map is None:
            return None

        data = json.loads(source_map)
        if "sources" in data:
            cwd = os.getcwd()
            data["sources"] = [
                relative_path(cwd, file_url_to_path(source))
                if source.startswith("file:")
                else source
                for source in data["sources"]
            ]
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def post_process_css(self, css: str) -> str:
        if css.endswith("}"):
            css += "\n"
        if self._source_map is not None and not self.omit_source_map_url:
            if self.source_map_embed:
                encoded = base64.b64encode(self._source_map.encode()).decode("ascii")
                url = f"data:application/json;base64,{encoded}"
            else:
                url = escape_url(self.source_map_file or "")
            css += f"\n/*# sourceMappingURL={url} */"
        return css

    def _syntax_error(self, error: CompileError) -> SassSyntaxError:
        span = error.span
        line = span.start.line + 1 if span is not None else None
        url = span.url if span is not None else None

        filename = url
        if url is not None:
            if url.startswith(f"{SHIM_SCHEME}:"):
                url = url[len(SHIM_SCHEME) + 1 :]
            if url.startswith("file:"):
                filename = relative_path(os.getcwd(), file_url_to_path(url))

        return SassSyntaxError(error.message, filename=filename, line=line, cause=error)


__all__ = ["Engine"]
