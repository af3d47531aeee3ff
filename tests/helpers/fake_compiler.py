"""In-memory stand-in for the protocol compiler."""

from collections.abc import Callable
from typing import Any

from sassc_embedded.protocol.compiler import CompileError, CompileOptions, CompileResult


class FakeCompiler:
    """Records ``compile_string`` calls and returns a canned result.

    ``on_compile`` runs inside the compile call, which is where a real
    compiler would invoke function and importer callbacks.
    """

    def __init__(
        self,
        css: str = "a {\n  b: c;\n}",
        source_map: str | None = None,
        loaded_urls: list[str] | None = None,
        error: CompileError | None = None,
        on_compile: Callable[[CompileOptions], Any] | None = None,
    ) -> None:
        self.css = css
        self.source_map = source_map
        self.loaded_urls = loaded_urls or []
        self.error = error
        self.on_compile = on_compile
        self.calls: list[CompileOptions] = []

    def compile_string(self, options: CompileOptions) -> CompileResult:
        self.calls.append(options)
        if self.on_compile is not None:
            self.on_compile(options)
        if self.error is not None:
            raise self.error
        return CompileResult(
            css=self.css,
            source_map=self.source_map if options.source_map else None,
            loaded_urls=[options.url or "", *self.loaded_urls],
        )

    @property
    def last_options(self) -> CompileOptions:
        return self.calls[-1]
