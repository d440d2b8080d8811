"""Pydantic schemas for runtime validation of pack requests."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from audio_pack.naming import sanitize_namespace
from audio_pack.types import DEFAULT_SOURCE_EXTENSION, DEFAULT_TARGET_EXTENSION


class PackRequestConfig(BaseModel):
    """Validated scalar fields of a pack request."""

    model_config = ConfigDict(extra="forbid")

    output_path: Path
    namespace: str
    description: str = ""
    pack_format: int = Field(gt=0)
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    target_extension: str = DEFAULT_TARGET_EXTENSION

    @field_validator("output_path")
    @classmethod
    def _validate_output_path(cls, value: Path) -> Path:
        if not str(value).strip():
            raise ValueError("output_path must be specified.")
        if value.is_dir():
            raise ValueError(f"output_path is a directory: {value}")
        return value

    @field_validator("namespace", mode="before")
    @classmethod
    def _sanitize_namespace(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Pack name must be specified.")
        return sanitize_namespace(value)

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("source_extension", "target_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        extension = value.strip().lower()
        if not extension.startswith("."):
            extension = f".{extension}"
        if len(extension) < 2 or any(sep in extension for sep in "/\\"):
            raise ValueError(f"Invalid file extension: {value!r}")
        return extension
