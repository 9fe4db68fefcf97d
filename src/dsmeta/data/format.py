"""Data set formats and file name based inference."""

from __future__ import annotations

from enum import Enum

from dsmeta.exceptions import UnsupportedDataFormatError


class Format(str, Enum):
    """Supported data set formats plus the ``UNSUPPORTED`` sentinel."""

    XML = "xml"
    XLS = "xls"
    YAML = "yaml"
    JSON = "json"
    UNSUPPORTED = "unsupported"

    @property
    def extensions(self) -> tuple[str, ...]:
        return _EXTENSIONS[self]

    @property
    def file_extension(self) -> str:
        """Canonical extension used when synthesizing file names."""

        if self is Format.UNSUPPORTED:
            raise UnsupportedDataFormatError("UNSUPPORTED has no file extension.")
        return self.extensions[0]

    @classmethod
    def infer_from_file(cls, file_name: str) -> "Format":
        """Return the format matching the suffix of `file_name`."""

        lowered = file_name.strip().lower()
        for candidate in cls:
            if any(lowered.endswith(ext) for ext in candidate.extensions):
                return candidate
        return cls.UNSUPPORTED


_EXTENSIONS: dict[Format, tuple[str, ...]] = {
    Format.XML: (".xml",),
    Format.XLS: (".xls",),
    Format.YAML: (".yml", ".yaml"),
    Format.JSON: (".json",),
    Format.UNSUPPORTED: (),
}


def require_supported_format(file_name: str) -> Format:
    """Infer the format of `file_name`, raising if it is not supported."""

    inferred = Format.infer_from_file(file_name)
    if inferred is Format.UNSUPPORTED:
        raise UnsupportedDataFormatError(f"File {file_name} is not supported.")
    return inferred


__all__ = ["Format", "require_supported_format"]
