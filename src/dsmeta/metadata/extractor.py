"""Read data set declarations from a test class and its methods."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from dsmeta.metadata.annotations import DataSetAnnotation, ShouldMatchDataSet, UsingDataSet

A = TypeVar("A", bound=DataSetAnnotation)


class DeclarationScope(Enum):
    """Where the declaration governing a test method was found."""

    METHOD = "method"
    CLASS = "class"
    NONE = "none"


@dataclass(frozen=True)
class Declaration(Generic[A]):
    """Result of the method-then-class precedence lookup."""

    scope: DeclarationScope
    annotation: Optional[A] = None

    @property
    def declared_on_method(self) -> bool:
        return self.scope is DeclarationScope.METHOD


def _unwrap(method: Callable[..., Any]) -> Callable[..., Any]:
    return getattr(method, "__func__", method)


class AnnotationInspector(Generic[A]):
    """Lookups for one annotation type over a single test class."""

    def __init__(self, test_class: type, annotation_type: type[A]) -> None:
        self.test_class = test_class
        self.annotation_type = annotation_type

    def get_annotation_on_class_level(self) -> Optional[A]:
        # class-level declarations are inherited by subclasses
        return getattr(self.test_class, self.annotation_type.attribute, None)

    def is_defined_on_class_level(self) -> bool:
        return self.get_annotation_on_class_level() is not None

    def fetch_from(self, method: Callable[..., Any]) -> Optional[A]:
        return self.annotation_type.read_from(_unwrap(method))  # type: ignore[return-value]

    def is_defined_on(self, method: Callable[..., Any]) -> bool:
        return self.fetch_from(method) is not None

    def lookup(self, method: Callable[..., Any]) -> Declaration[A]:
        on_method = self.fetch_from(method)
        if on_method is not None:
            return Declaration(DeclarationScope.METHOD, on_method)
        on_class = self.get_annotation_on_class_level()
        if on_class is not None:
            return Declaration(DeclarationScope.CLASS, on_class)
        return Declaration(DeclarationScope.NONE)

    def get_using_precedence(self, method: Callable[..., Any]) -> Optional[A]:
        """Return the method declaration, falling back to the class one."""

        return self.lookup(method).annotation

    def methods(self) -> list[Callable[..., Any]]:
        """Methods of the test class declaring the annotation themselves."""

        return [
            _unwrap(member)
            for _, member in inspect.getmembers(self.test_class, inspect.isroutine)
            if self.is_defined_on(member)
        ]


class MetadataExtractor:
    """Entry point to the data set declarations of one test class."""

    def __init__(self, test_class: type) -> None:
        if not inspect.isclass(test_class):
            raise TypeError(f"Expected a test class, got {test_class!r}.")
        self.test_class = test_class
        self._using_data_set = AnnotationInspector(test_class, UsingDataSet)
        self._should_match_data_set = AnnotationInspector(test_class, ShouldMatchDataSet)

    def using_data_set(self) -> AnnotationInspector[UsingDataSet]:
        return self._using_data_set

    def should_match_data_set(self) -> AnnotationInspector[ShouldMatchDataSet]:
        return self._should_match_data_set

    def inspector_for(self, annotation_type: type[A]) -> AnnotationInspector[A]:
        if annotation_type is UsingDataSet:
            return self._using_data_set  # type: ignore[return-value]
        if annotation_type is ShouldMatchDataSet:
            return self._should_match_data_set  # type: ignore[return-value]
        return AnnotationInspector(self.test_class, annotation_type)

    def get_methods(self, annotation_type: type[DataSetAnnotation]) -> list[Callable[..., Any]]:
        return self.inspector_for(annotation_type).methods()


__all__ = [
    "AnnotationInspector",
    "Declaration",
    "DeclarationScope",
    "MetadataExtractor",
]
