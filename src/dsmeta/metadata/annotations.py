"""Decorators declaring the data sets a test class or test method uses.

``@using_data_set`` names the files to load before a test runs and
``@should_match_data_set`` the files the database must match afterwards.
Both work on classes and methods, with or without arguments::

    @using_data_set("customers.yml")
    class OrdersTest:
        @using_data_set
        def test_list(self): ...

        @should_match_data_set("orders-after-cancel.yml", "audit.json")
        def test_cancel(self): ...

Each decorator attaches an immutable annotation value to the decorated object.
The values are read back through :meth:`DataSetAnnotation.explicit_values`.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Protocol, Sequence, TypeVar, runtime_checkable

from dsmeta.exceptions import MetadataProcessingError

T = TypeVar("T")


@runtime_checkable
class AnnotationView(Protocol):
    """Read access to the file names a declaration lists."""

    def explicit_values(self) -> Sequence[str]:
        ...


@dataclass(frozen=True)
class DataSetAnnotation:
    """Base for data set declarations."""

    attribute: ClassVar[str]
    decorator_name: ClassVar[str]

    value: tuple[Any, ...] = ()

    def explicit_values(self) -> tuple[str, ...]:
        for item in self.value:
            if not isinstance(item, str):
                raise MetadataProcessingError(
                    f"@{self.decorator_name} expects file names, got {item!r}."
                )
        return tuple(self.value)

    @classmethod
    def read_from(cls, target: object) -> "DataSetAnnotation | None":
        """Return the declaration made directly on `target`, if any."""

        return vars(target).get(cls.attribute) if hasattr(target, "__dict__") else None


@dataclass(frozen=True)
class UsingDataSet(DataSetAnnotation):
    attribute: ClassVar[str] = "__dsmeta_using_data_set__"
    decorator_name: ClassVar[str] = "using_data_set"


@dataclass(frozen=True)
class ShouldMatchDataSet(DataSetAnnotation):
    attribute: ClassVar[str] = "__dsmeta_should_match_data_set__"
    decorator_name: ClassVar[str] = "should_match_data_set"


def _is_declarable(target: object) -> bool:
    return inspect.isclass(target) or inspect.isroutine(target) or isinstance(target, (staticmethod, classmethod))


def _declare(annotation_type: type[DataSetAnnotation], values: tuple[Any, ...]) -> Callable[[T], T]:
    def decorator(target: T) -> T:
        if not _is_declarable(target):
            raise TypeError(f"@{annotation_type.decorator_name} applies to classes and functions only.")
        # static and class methods carry the declaration on the wrapped function
        holder = target.__func__ if isinstance(target, (staticmethod, classmethod)) else target
        if annotation_type.read_from(holder) is not None:
            raise MetadataProcessingError(
                f"@{annotation_type.decorator_name} declared more than once on "
                f"{getattr(holder, '__qualname__', holder)!r}."
            )
        setattr(holder, annotation_type.attribute, annotation_type(values))
        return target

    return decorator


def _decorator_or_factory(annotation_type: type[DataSetAnnotation], values: tuple[Any, ...]) -> Any:
    if len(values) == 1 and _is_declarable(values[0]):
        return _declare(annotation_type, ())(values[0])
    return _declare(annotation_type, values)


def using_data_set(*file_names: Any) -> Any:
    """Declare the data sets loaded before the test runs."""

    return _decorator_or_factory(UsingDataSet, file_names)


def should_match_data_set(*file_names: Any) -> Any:
    """Declare the data sets the test outcome is verified against."""

    return _decorator_or_factory(ShouldMatchDataSet, file_names)


__all__ = [
    "AnnotationView",
    "DataSetAnnotation",
    "ShouldMatchDataSet",
    "UsingDataSet",
    "should_match_data_set",
    "using_data_set",
]
