"""Registration helpers for legacy custom functions.

A function set is a class deriving from :class:`Functions`. Each public
method becomes a stylesheet function of the same name; ``self.options``
carries the render option bag.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any


class Functions:
    """Base class for legacy custom function sets."""

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.options = options if options is not None else {}


def custom_functions(functions: type[Functions] = Functions) -> list[str]:
    """Names of the public functions a set adds on top of :class:`Functions`."""
    reserved = set(dir(Functions))
    names = []
    for name, member in inspect.getmembers(functions, inspect.isfunction):
        if name.startswith("_") or name in reserved:
            continue
        names.append(name)
    return names


def formatted_function_name(
    function_name: str, functions: type[Functions] = Functions
) -> str:
    """Render the signature the compiler expects, e.g. ``foo($a, $b: null)``."""
    signature = inspect.signature(getattr(functions, function_name))
    params = list(signature.parameters.values())[1:]  # drop ``self``

    rendered = []
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            rendered.append(f"${param.name}...")
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            continue
        elif param.default is not inspect.Parameter.empty:
            rendered.append(f"${param.name}: null")
        else:
            rendered.append(f"${param.name}")
    return f"{function_name}({', '.join(rendered)})"


__all__ = ["Functions", "custom_functions", "formatted_function_name"]
