"""Data set declarations and their resolution for test classes."""

from .annotations import (
    AnnotationView,
    DataSetAnnotation,
    ShouldMatchDataSet,
    UsingDataSet,
    should_match_data_set,
    using_data_set,
)
from .extractor import AnnotationInspector, Declaration, DeclarationScope, MetadataExtractor
from .provider import DataSetProvider

__all__ = [
    "AnnotationInspector",
    "AnnotationView",
    "DataSetAnnotation",
    "DataSetProvider",
    "Declaration",
    "DeclarationScope",
    "MetadataExtractor",
    "ShouldMatchDataSet",
    "UsingDataSet",
    "should_match_data_set",
    "using_data_set",
]
