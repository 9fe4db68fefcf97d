from __future__ import annotations

import unittest

from dsmeta.data.format import Format
from dsmeta.data.naming import DataSetFileNamingStrategy, ExpectedDataSetFileNamingStrategy


class Orders:
    def should_list(self) -> None: ...

    class Nested:
        pass


class NamingStrategyTests(unittest.TestCase):
    def test_class_scoped_name(self) -> None:
        name = DataSetFileNamingStrategy(Format.XML).create_file_name(Orders)

        self.assertEqual(name, f"{__name__}.Orders.xml")

    def test_method_scoped_name_includes_method(self) -> None:
        name = DataSetFileNamingStrategy(Format.XML).create_file_name(Orders, Orders.should_list)

        self.assertEqual(name, f"{__name__}.Orders#should_list.xml")
        self.assertNotEqual(name, DataSetFileNamingStrategy(Format.XML).create_file_name(Orders))

    def test_expected_names_carry_prefix(self) -> None:
        strategy = ExpectedDataSetFileNamingStrategy(Format.YAML)

        self.assertEqual(strategy.create_file_name(Orders), f"expected-{__name__}.Orders.yml")
        self.assertEqual(
            strategy.create_file_name(Orders, Orders.should_list),
            f"expected-{__name__}.Orders#should_list.yml",
        )

    def test_input_and_expected_names_never_collide(self) -> None:
        for data_format in (Format.XML, Format.XLS, Format.YAML, Format.JSON):
            with self.subTest(format=data_format):
                given = DataSetFileNamingStrategy(data_format)
                expected = ExpectedDataSetFileNamingStrategy(data_format)
                self.assertNotEqual(given.create_file_name(Orders), expected.create_file_name(Orders))
                self.assertNotEqual(
                    given.create_file_name(Orders, Orders.should_list),
                    expected.create_file_name(Orders, Orders.should_list),
                )

    def test_nested_class_uses_qualified_name(self) -> None:
        name = DataSetFileNamingStrategy(Format.JSON).create_file_name(Orders.Nested)

        self.assertEqual(name, f"{__name__}.Orders.Nested.json")


if __name__ == "__main__":
    unittest.main()
