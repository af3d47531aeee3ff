"""Expose legacy custom functions as protocol host callbacks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sassc_embedded.core.logging import get_logger
from sassc_embedded.legacy.functions import (
    Functions,
    custom_functions,
    formatted_function_name,
)
from sassc_embedded.protocol.compiler import HostFunction, ScriptError
from sassc_embedded.protocol.values import SassValue

from .value_conversion import from_native, to_native


logger = get_logger(__name__)


class CustomFunctionError(ScriptError):
    """A legacy custom function raised while the compiler was calling it.

    The compiler only sees the generic message naming the function; the
    original failure stays reachable through ``__cause__`` and
    ``original_message``, and :meth:`full_message` includes it.
    """

    def __init__(self, function_name: str, cause: BaseException):
        super().__init__(f"Error: error in C function {function_name}")
        self.function_name = function_name
        self.original_message = str(cause)
        self.__cause__ = cause

    def full_message(self) -> str:
        return f"{self.message}\n{type(self.__cause__).__name__}: {self.original_message}"

    def __str__(self) -> str:
        return self.full_message()


class FunctionContext:
    """Invokes functions of a legacy set with the render option bag."""

    def __init__(self, functions: type[Functions], options: Mapping[str, Any]):
        self.functions = functions
        self.options = options
        self._instance = functions(options)

    def invoke(self, name: str, arguments: Sequence[Any]) -> Any:
        return getattr(self._instance, name)(*arguments)


class FunctionsHandler:
    def __init__(self, options: Mapping[str, Any]):
        self._options = options
        self._callbacks: dict[str, HostFunction] = {}

    def setup(self, functions: type[Functions] | None = None) -> dict[str, HostFunction]:
        """Build the ``signature -> callback`` table for one render."""
        functions = functions or Functions
        context = FunctionContext(functions, self._options)

        self._callbacks = {}
        for name in custom_functions(functions):
            signature = formatted_function_name(name, functions)
            self._callbacks[signature] = self._make_callback(context, name)

        logger.debug("custom_functions_registered", signatures=list(self._callbacks))
        return self._callbacks

    @staticmethod
    def _make_callback(context: FunctionContext, name: str) -> HostFunction:
        def callback(native_arguments: Sequence[SassValue]) -> SassValue:
            arguments = [from_native(argument) for argument in native_arguments]
            try:
                result = context.invoke(name, arguments)
            except Exception as e:
                logger.warning(
                    "custom_function_failed",
                    function=name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise CustomFunctionError(name, e) from e
            return to_native(result)

        callback.__name__ = name
        return callback


__all__ = ["CustomFunctionError", "FunctionContext", "FunctionsHandler"]
