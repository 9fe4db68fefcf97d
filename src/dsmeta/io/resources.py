"""Read-only resource existence probes used by the location resolver."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, Protocol, runtime_checkable

from dsmeta.util.paths import resolve_roots

LOGGER = logging.getLogger(__name__)


class MalformedResourcePathError(ValueError):
    """Raised when a resource path cannot be interpreted at all."""


@runtime_checkable
class ResourceLocator(Protocol):
    """Anything able to tell whether a resource path can be located."""

    def exists(self, path: str) -> bool:
        """Return True if `path` can be located, False otherwise."""
        ...


class FileSystemResources:
    """Look resources up as regular files below a list of search roots.

    Paths are ``/`` separated and interpreted relative to each root in turn,
    the first root holding the file wins. A missing file is reported as
    ``False``; only paths that are syntactically unusable raise.
    """

    def __init__(self, roots: Iterable[str | Path] = (".",)) -> None:
        self.roots: tuple[Path, ...] = tuple(resolve_roots(roots))

    def exists(self, path: str) -> bool:
        relative = _parse_resource_path(path)
        for root in self.roots:
            if (root / relative).is_file():
                LOGGER.debug("Resource %s found under %s", path, root)
                return True
        return False


def _parse_resource_path(path: str) -> PurePosixPath:
    if not path or not path.strip():
        raise MalformedResourcePathError("Resource path must not be blank.")
    if "\x00" in path:
        raise MalformedResourcePathError(f"Resource path {path!r} contains a NUL byte.")
    relative = PurePosixPath(path.lstrip("/"))
    if ".." in relative.parts:
        raise MalformedResourcePathError(f"Resource path {path!r} must not step out of its root.")
    return relative


__all__ = ["FileSystemResources", "MalformedResourcePathError", "ResourceLocator"]
