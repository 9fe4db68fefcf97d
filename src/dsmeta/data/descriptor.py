"""Immutable data set descriptors and the factory building them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from dsmeta.data.format import Format, require_supported_format
from dsmeta.data.location import DataSetLocationResolver


class DataSetDescriptor(BaseModel):
    """Resolved location and format of one data set file."""

    model_config = ConfigDict(frozen=True)

    location: str
    format: Format

    def __str__(self) -> str:
        return f"{self.location} ({self.format.name})"


class DataSetDescriptorFactory:
    """Turn a candidate file name into a :class:`DataSetDescriptor`."""

    def __init__(self, resolver: DataSetLocationResolver) -> None:
        self.resolver = resolver

    def build(self, file_name: str) -> DataSetDescriptor:
        # format first: it needs no probing
        data_format = require_supported_format(file_name)
        return DataSetDescriptor(location=self.resolver.resolve(file_name), format=data_format)


__all__ = ["DataSetDescriptor", "DataSetDescriptorFactory"]
