"""Validated view over the legacy render option bag."""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EngineOptions(BaseModel):
    """Options recognised by :class:`~sassc_embedded.engine.Engine`.

    Unknown keys are preserved so custom functions still see the complete
    option bag they were given.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    filename: str | None = None
    syntax: str = "scss"
    style: Any = "sass_style_nested"
    load_paths: list[str] = Field(default_factory=list)

    source_map_file: str | None = None
    source_map_contents: bool = False
    source_map_embed: bool = False
    omit_source_map_url: bool = False

    functions: Any = None
    importer: Any = None

    alert_ascii: bool = False
    alert_color: bool | None = None
    logger: Any = None
    quiet_deps: bool = False
    verbose: bool = False
    quiet: bool = False

    @field_validator("filename", "source_map_file", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @field_validator("load_paths", mode="before")
    @classmethod
    def _coerce_load_paths(cls, value: Any) -> Any:
        if value is None:
            return []
        return [os.fspath(path) for path in value]

    @field_validator("syntax", mode="before")
    @classmethod
    def _coerce_syntax(cls, value: Any) -> Any:
        if value is None:
            return "scss"
        return str(getattr(value, "value", value))
