"""Resolve the input and expected data sets of a test class or test method."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional, Sequence, overload

from dsmeta.config.models import DsMetaConfig
from dsmeta.data.descriptor import DataSetDescriptor, DataSetDescriptorFactory
from dsmeta.data.format import Format, require_supported_format
from dsmeta.data.location import DataSetLocationResolver
from dsmeta.data.naming import DataSetFileNamingStrategy, ExpectedDataSetFileNamingStrategy
from dsmeta.exceptions import MetadataProcessingError
from dsmeta.io.resources import FileSystemResources, ResourceLocator
from dsmeta.metadata.annotations import AnnotationView
from dsmeta.metadata.extractor import AnnotationInspector, MetadataExtractor

LOGGER = logging.getLogger(__name__)

TestMethod = Callable[..., Any]


class DataSetProvider:
    """Work out which data set files a test needs, where they live and their format.

    Method queries return lists in declaration order with duplicates kept.
    Class queries return sets: the union over every method declaring the
    annotation itself plus the class-level declaration.
    """

    def __init__(
        self,
        metadata_extractor: MetadataExtractor,
        configuration: DsMetaConfig,
        resources: Optional[ResourceLocator] = None,
    ) -> None:
        self.metadata_extractor = metadata_extractor
        self.configuration = configuration
        if resources is None:
            resources = FileSystemResources(configuration.resources.roots)
        self.descriptor_factory = DataSetDescriptorFactory(
            DataSetLocationResolver(configuration.datasets, resources)
        )

    @property
    def test_class(self) -> type:
        return self.metadata_extractor.test_class

    @property
    def default_format(self) -> Format:
        return self.configuration.datasets.default_format

    @overload
    def get_data_set_descriptors(self, target: type) -> set[DataSetDescriptor]: ...

    @overload
    def get_data_set_descriptors(self, target: TestMethod) -> list[DataSetDescriptor]: ...

    def get_data_set_descriptors(self, target: Any) -> Any:
        """Input data sets of a whole test class (set) or one test method (list)."""

        if inspect.isclass(target):
            self._require_test_class(target)
            return self._class_descriptors(self.metadata_extractor.using_data_set(), DataSetFileNamingStrategy)
        return self._build_all(self.get_data_file_names(target))

    @overload
    def get_expected_data_set_descriptors(self, target: type) -> set[DataSetDescriptor]: ...

    @overload
    def get_expected_data_set_descriptors(self, target: TestMethod) -> list[DataSetDescriptor]: ...

    def get_expected_data_set_descriptors(self, target: Any) -> Any:
        """Expected data sets of a whole test class (set) or one test method (list)."""

        if inspect.isclass(target):
            self._require_test_class(target)
            return self._class_descriptors(
                self.metadata_extractor.should_match_data_set(), ExpectedDataSetFileNamingStrategy
            )
        return self._build_all(self.get_expected_data_file_names(target))

    def get_data_file_names(self, test_method: TestMethod) -> list[str]:
        return self._file_names(test_method, self.metadata_extractor.using_data_set(), DataSetFileNamingStrategy)

    def get_expected_data_file_names(self, test_method: TestMethod) -> list[str]:
        return self._file_names(
            test_method, self.metadata_extractor.should_match_data_set(), ExpectedDataSetFileNamingStrategy
        )

    def get_data_formats(self, test_method: TestMethod) -> list[Format]:
        return [require_supported_format(name) for name in self.get_data_file_names(test_method)]

    def get_expected_data_formats(self, test_method: TestMethod) -> list[Format]:
        return [require_supported_format(name) for name in self.get_expected_data_file_names(test_method)]

    def _require_test_class(self, target: type) -> None:
        if target is not self.test_class:
            raise ValueError(
                f"Provider resolves {self.test_class.__qualname__}, not {target.__qualname__}."
            )

    def _file_names(
        self,
        test_method: TestMethod,
        inspector: AnnotationInspector[Any],
        naming: type[DataSetFileNamingStrategy],
    ) -> list[str]:
        declaration = inspector.lookup(test_method)
        if declaration.annotation is None:
            return []

        specified = _read_values(declaration.annotation)
        if _is_unspecified(specified):
            strategy = naming(self.default_format)
            if declaration.declared_on_method:
                default_name = strategy.create_file_name(self.test_class, test_method)
            else:
                default_name = strategy.create_file_name(self.test_class)
            LOGGER.debug("No file named for %s, defaulting to %s", test_method.__name__, default_name)
            return [default_name]
        return specified

    def _class_descriptors(
        self,
        inspector: AnnotationInspector[Any],
        naming: type[DataSetFileNamingStrategy],
    ) -> set[DataSetDescriptor]:
        descriptors: set[DataSetDescriptor] = set()
        for test_method in inspector.methods():
            descriptors.update(self._build_all(self._file_names(test_method, inspector, naming)))

        class_level = inspector.get_annotation_on_class_level()
        if class_level is not None:
            file_names = _read_values(class_level)
            if _is_unspecified(file_names):
                file_names = [naming(self.default_format).create_file_name(self.test_class)]
            descriptors.update(self._build_all(file_names))
        return descriptors

    def _build_all(self, file_names: Sequence[str]) -> list[DataSetDescriptor]:
        descriptors = [self.descriptor_factory.build(name) for name in file_names]
        for descriptor in descriptors:
            LOGGER.debug("Resolved data set %s", descriptor)
        return descriptors


def _read_values(annotation: AnnotationView) -> list[str]:
    try:
        return list(annotation.explicit_values())
    except MetadataProcessingError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise MetadataProcessingError("Unable to evaluate annotation value") from exc


def _is_unspecified(file_names: Sequence[str]) -> bool:
    # only the first entry is checked for blankness
    return not file_names or not file_names[0].strip()


__all__ = ["DataSetProvider"]
