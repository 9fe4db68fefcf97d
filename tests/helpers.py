from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from dsmeta.config import load_config
from dsmeta.io.resources import MalformedResourcePathError
from dsmeta.metadata import DataSetProvider, MetadataExtractor, should_match_data_set, using_data_set


@using_data_set("orders-seed.yml")
@should_match_data_set
class OrdersCase:
    """Sample test class mixing class-level and method-level declarations."""

    @using_data_set
    def should_list(self) -> None: ...

    @using_data_set("customers.xml", "orders.json", "customers.xml")
    def should_cancel(self) -> None: ...

    def should_count(self) -> None: ...

    @should_match_data_set("orders-archived.yml")
    def should_archive(self) -> None: ...


@using_data_set
class InheritingCase:
    """Every method relies on the bare class-level declaration."""

    def first(self) -> None: ...

    def second(self) -> None: ...


class UndeclaredCase:
    def plain(self) -> None: ...


class BlankNamesCase:
    @using_data_set("")
    def empty(self) -> None: ...

    @using_data_set("   ")
    def whitespace(self) -> None: ...

    @using_data_set("customers.xml", "")
    def trailing_blank(self) -> None: ...

    @using_data_set("seed.unknownext")
    def unknown_format(self) -> None: ...

    @using_data_set("missing.xml")
    def missing_file(self) -> None: ...


def qualified(test_class: type) -> str:
    return f"{test_class.__module__}.{test_class.__qualname__}"


def write_data_sets(root: Path, *relative_names: str) -> None:
    """Create empty data set files below `root`."""

    for name in relative_names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


def make_provider(
    test_class: type, root: Path, overrides: Mapping[str, Any] | None = None
) -> DataSetProvider:
    """Provider probing the filesystem below `root`."""

    config = load_config(overrides={"resources.roots": [str(root)], **(overrides or {})})
    return DataSetProvider(MetadataExtractor(test_class), config)


class StubResources:
    """In-memory resource probe recording every lookup."""

    def __init__(self, existing: set[str] | None = None, *, malformed: set[str] | None = None) -> None:
        self.existing = set(existing or ())
        self.malformed = set(malformed or ())
        self.probes: list[str] = []

    def exists(self, path: str) -> bool:
        self.probes.append(path)
        if path in self.malformed:
            raise MalformedResourcePathError(path)
        return path in self.existing
