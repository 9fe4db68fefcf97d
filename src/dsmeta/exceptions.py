"""Error taxonomy for data set resolution."""

from __future__ import annotations


class DataSetError(RuntimeError):
    """Base class for failures raised while resolving data sets."""


class UnsupportedDataFormatError(DataSetError):
    """Raised when a data set file name does not map to a known format."""


class InvalidDataSetLocationError(DataSetError):
    """Raised when a data set file cannot be located."""


class MetadataProcessingError(DataSetError):
    """Raised when a data set declaration cannot be read."""


__all__ = [
    "DataSetError",
    "InvalidDataSetLocationError",
    "MetadataProcessingError",
    "UnsupportedDataFormatError",
]
