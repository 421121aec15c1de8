"""Pydantic models describing resolver options and paths files."""

from __future__ import annotations

import os
from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class ResolverOptions(BaseModel):
    """Policy switches applied while paths are ingested and resolved."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_path: Optional[str] = None
    convert_separators: Union[bool, Literal["auto"]] = True
    trim_trailing_separators: bool = True
    verify_existence: bool = False
    allow_overwrite: bool = False
    separator: str = Field(default=os.sep, min_length=1, max_length=1)

    @field_validator("convert_separators", mode="before")
    @classmethod
    def _strict_convert(cls, value: object) -> object:
        """Only accept real booleans or the literal ``"auto"``."""

        if isinstance(value, bool) or value == "auto":
            return value
        raise ValueError("convert_separators must be True, False or 'auto'.")

    @field_validator("separator")
    @classmethod
    def _known_separator(cls, value: str) -> str:
        if value not in ("/", "\\"):
            raise ValueError("separator must be '/' or '\\'.")
        return value


class PathMap(RootModel[Dict[str, str]]):
    """Flat mapping of logical keys to base-relative paths."""


__all__ = ["PathMap", "ResolverOptions"]
