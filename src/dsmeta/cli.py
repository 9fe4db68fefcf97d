"""Command-line entry points for inspecting data set declarations."""

from __future__ import annotations

import importlib
import inspect
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

import typer

from dsmeta.config import ConfigError, dump_example_config, load_config
from dsmeta.data.descriptor import DataSetDescriptor
from dsmeta.exceptions import DataSetError
from dsmeta.metadata import DataSetProvider, MetadataExtractor
from dsmeta.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Resolve data sets declared on test classes")


def _load_target(target: str) -> tuple[type, Optional[Callable[..., Any]]]:
    """Import ``module:Class`` or ``module:Class.method``."""

    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise typer.BadParameter("Expected TARGET as 'package.module:Class[.method]'.")

    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module {module_name!r}: {exc}") from exc

    class_name, _, method_name = attr_path.partition(".")
    test_class = getattr(module, class_name, None)
    if not inspect.isclass(test_class):
        raise typer.BadParameter(f"{class_name!r} is not a class in {module_name}.")
    if not method_name:
        return test_class, None

    test_method = getattr(test_class, method_name, None)
    if test_method is None or not callable(test_method):
        raise typer.BadParameter(f"{method_name!r} is not a method of {class_name}.")
    return test_class, test_method


def _emit(descriptors: Iterable[DataSetDescriptor], *, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in descriptors], indent=2))
        return
    for descriptor in descriptors:
        typer.echo(f"{descriptor.location}\t{descriptor.format.name}")


@app.command()
def resolve(
    target: str = typer.Argument(..., help="Test class or method as package.module:Class[.method]"),
    expected: bool = typer.Option(False, "--expected", help="Resolve expected data sets instead of input ones"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file"),
    as_json: bool = typer.Option(False, "--json", help="Print descriptors as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolution steps"),
) -> None:
    """Print the data set descriptors declared for a test class or method."""

    logger = configure_logging(level=logging.DEBUG if verbose else logging.WARNING)
    test_class, test_method = _load_target(target)

    try:
        cfg = load_config(config)
        provider = DataSetProvider(MetadataExtractor(test_class), cfg)
        subject: Any = test_class if test_method is None else test_method
        if expected:
            descriptors = provider.get_expected_data_set_descriptors(subject)
        else:
            descriptors = provider.get_data_set_descriptors(subject)
    except (ConfigError, DataSetError) as exc:
        logger.debug("Resolution failed", exc_info=exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if isinstance(descriptors, set):
        descriptors = sorted(descriptors, key=lambda d: d.location)
    _emit(descriptors, as_json=as_json)


@app.command()
def dump_config(
    dest: Path = typer.Argument(..., help="Destination YAML or JSON file"),
) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
