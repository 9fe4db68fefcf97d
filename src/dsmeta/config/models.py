"""Pydantic models describing dsmeta configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dsmeta.data.format import Format


class DataSetsConfig(BaseModel):
    """Where data sets live by convention and which format defaults use."""

    model_config = ConfigDict(extra="allow", frozen=True)

    default_location: str = "datasets"
    default_format: Format = Format.XML

    @field_validator("default_location")
    @classmethod
    def _validate_location(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_location must not be blank.")
        return value.strip()

    @field_validator("default_format", mode="before")
    @classmethod
    def _normalize_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("default_format")
    @classmethod
    def _reject_unsupported(cls, value: Format) -> Format:
        if value is Format.UNSUPPORTED:
            raise ValueError("default_format must name a supported format.")
        return value

    @property
    def default_folder(self) -> str:
        """Default location normalized to end with a separator."""

        if self.default_location.endswith("/"):
            return self.default_location
        return self.default_location + "/"


class ResourcesConfig(BaseModel):
    """Search roots used when probing for data set files."""

    model_config = ConfigDict(extra="allow", frozen=True)

    roots: List[Path] = Field(default_factory=lambda: [Path(".")])

    @field_validator("roots")
    @classmethod
    def _require_roots(cls, value: List[Path]) -> List[Path]:
        if not value:
            raise ValueError("At least one resource root is required.")
        return value


class DsMetaConfig(BaseModel):
    """Root configuration object, built once per test run."""

    model_config = ConfigDict(extra="allow", frozen=True)

    datasets: DataSetsConfig = Field(default_factory=DataSetsConfig)
    resources: ResourcesConfig = Field(default_factory=ResourcesConfig)


__all__ = [
    "DataSetsConfig",
    "DsMetaConfig",
    "ResourcesConfig",
]
