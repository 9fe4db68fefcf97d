from __future__ import annotations

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from dsmeta.config import DataSetsConfig
from dsmeta.data.location import DataSetLocationResolver
from dsmeta.exceptions import InvalidDataSetLocationError
from dsmeta.io.resources import FileSystemResources, MalformedResourcePathError, ResourceLocator
from tests.helpers import StubResources, write_data_sets


class LocationResolverTests(unittest.TestCase):
    def test_default_folder_takes_precedence(self) -> None:
        resources = StubResources({"datasets/orders.xml", "orders.xml"})
        resolver = DataSetLocationResolver(DataSetsConfig(), resources)

        self.assertEqual(resolver.resolve("orders.xml"), "datasets/orders.xml")
        self.assertEqual(resources.probes, ["datasets/orders.xml"])

    def test_falls_back_to_name_as_given(self) -> None:
        resources = StubResources({"shared/orders.xml"})
        resolver = DataSetLocationResolver(DataSetsConfig(), resources)

        self.assertEqual(resolver.resolve("shared/orders.xml"), "shared/orders.xml")
        self.assertEqual(resources.probes, ["datasets/shared/orders.xml", "shared/orders.xml"])

    def test_missing_file_names_both_locations(self) -> None:
        resolver = DataSetLocationResolver(DataSetsConfig(), StubResources())

        with self.assertRaises(InvalidDataSetLocationError) as ctx:
            resolver.resolve("orders.xml")

        message = str(ctx.exception)
        self.assertIn("datasets/orders.xml", message)
        self.assertIn("nor as orders.xml", message)

    def test_malformed_path_is_an_invalid_location(self) -> None:
        resources = StubResources(malformed={"datasets/bad.xml"})
        resolver = DataSetLocationResolver(DataSetsConfig(), resources)

        with self.assertRaises(InvalidDataSetLocationError) as ctx:
            resolver.resolve("bad.xml")

        self.assertIsInstance(ctx.exception.__cause__, MalformedResourcePathError)
        self.assertEqual(resources.probes, ["datasets/bad.xml"])

    def test_parent_escaping_name_is_an_invalid_location(self) -> None:
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / "resources"
            write_data_sets(Path(tmpdir), "outside.xml")
            root.mkdir()
            resolver = DataSetLocationResolver(DataSetsConfig(), FileSystemResources([root]))

            with self.assertRaises(InvalidDataSetLocationError) as ctx:
                resolver.resolve("../../outside.xml")

        self.assertIsInstance(ctx.exception.__cause__, MalformedResourcePathError)

    def test_default_folder_is_normalized(self) -> None:
        for location in ("fixtures", "fixtures/"):
            with self.subTest(location=location):
                resources = StubResources({"fixtures/orders.xml"})
                resolver = DataSetLocationResolver(DataSetsConfig(default_location=location), resources)
                self.assertEqual(resolver.resolve("orders.xml"), "fixtures/orders.xml")

    def test_probes_again_on_every_call(self) -> None:
        resources = StubResources({"datasets/orders.xml"})
        resolver = DataSetLocationResolver(DataSetsConfig(), resources)

        resolver.resolve("orders.xml")
        resolver.resolve("orders.xml")

        self.assertEqual(len(resources.probes), 2)


class FileSystemResourcesTests(unittest.TestCase):
    def test_exists_checks_files_below_roots(self) -> None:
        with TemporaryDirectory() as first, TemporaryDirectory() as second:
            write_data_sets(Path(second), "datasets/orders.xml")
            resources = FileSystemResources([first, second])

            self.assertIsInstance(resources, ResourceLocator)
            self.assertTrue(resources.exists("datasets/orders.xml"))
            self.assertTrue(resources.exists("/datasets/orders.xml"))
            self.assertFalse(resources.exists("datasets/missing.xml"))
            self.assertFalse(resources.exists("datasets"))

    def test_rejects_malformed_paths(self) -> None:
        resources = FileSystemResources(["."])

        for path in ("", "   ", "bad\x00name.xml", "../outside.xml", "datasets/../../outside.xml"):
            with self.subTest(path=path):
                with self.assertRaises(MalformedResourcePathError):
                    resources.exists(path)

    def test_duplicate_roots_collapse(self) -> None:
        with TemporaryDirectory() as tmpdir:
            resources = FileSystemResources([tmpdir, Path(tmpdir)])

            self.assertEqual(resources.roots, (Path(tmpdir).resolve(),))


if __name__ == "__main__":
    unittest.main()
