"""Default data set file naming conventions."""

from __future__ import annotations

from typing import Callable, Optional

from dsmeta.data.format import Format


class DataSetFileNamingStrategy:
    """Build default file names for input data sets.

    A class-scoped name is ``<module>.<qualname><ext>``; a method-scoped name
    appends ``#<method>`` before the extension. Subclasses change the prefix.
    """

    file_name_prefix = ""

    def __init__(self, data_format: Format) -> None:
        self.format = data_format

    def create_file_name(self, test_class: type, test_method: Optional[Callable[..., object]] = None) -> str:
        name = f"{self.file_name_prefix}{test_class.__module__}.{test_class.__qualname__}"
        if test_method is not None:
            name += f"#{test_method.__name__}"
        return name + self.format.file_extension


class ExpectedDataSetFileNamingStrategy(DataSetFileNamingStrategy):
    """Build default file names for expected data sets."""

    file_name_prefix = "expected-"


__all__ = ["DataSetFileNamingStrategy", "ExpectedDataSetFileNamingStrategy"]
