"""Data set location lookup: default folder first, then root-relative."""

from __future__ import annotations

import logging

from dsmeta.config.models import DataSetsConfig
from dsmeta.exceptions import InvalidDataSetLocationError
from dsmeta.io.resources import MalformedResourcePathError, ResourceLocator

LOGGER = logging.getLogger(__name__)


class DataSetLocationResolver:
    """Determine where a data set file lives.

    The file is first looked up inside the configured default folder and then
    as given. Every call probes again; nothing is cached.
    """

    def __init__(self, config: DataSetsConfig, resources: ResourceLocator) -> None:
        self.config = config
        self.resources = resources

    @property
    def default_folder(self) -> str:
        return self.config.default_folder

    def resolve(self, file_name: str) -> str:
        """Return the resolvable location of `file_name`.

        Raises:
            InvalidDataSetLocationError: the file exists in neither location or
                its path is malformed.
        """

        default_path = self.default_folder + file_name
        if self._exists(default_path):
            LOGGER.debug("Resolved %s in default folder as %s", file_name, default_path)
            return default_path
        if self._exists(file_name):
            LOGGER.debug("Resolved %s relative to resource root", file_name)
            return file_name
        raise InvalidDataSetLocationError(
            f"Unable to locate {file_name}. File does not exist in default location "
            f"{default_path} nor as {file_name}."
        )

    def _exists(self, path: str) -> bool:
        try:
            return self.resources.exists(path)
        except MalformedResourcePathError as exc:
            raise InvalidDataSetLocationError(f"Unable to open data set file {path!r}") from exc


__all__ = ["DataSetLocationResolver"]
