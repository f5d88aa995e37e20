"""Read text files shipped as package data, for use as test fixtures.

Resources are addressed by their ``/``-separated path relative to the package
directory, e.g. ``extract_resource_as_text("tests.fixtures", "csv/sample.csv")``.
``list_resources`` prints the names that can be used, which helps when a name
does not resolve.

Every function takes an optional ``output`` sink, a callable receiving a
string. When it is omitted the sink is ``print``.
"""

from importlib import resources
from importlib.resources.abc import Traversable
from types import ModuleType
from typing import Callable, Iterator, List, Optional, Union

from privy.core.config import get_config
from privy.core.exceptions import ResourceNotFoundError
from privy.utils.strings import split_lines

Package = Union[str, ModuleType]
OutputSink = Callable[[str], None]

_SKIPPED_DIRECTORIES = {"__pycache__"}
_SKIPPED_SUFFIXES = (".py", ".pyc", ".pyo")


def _sink(output: Optional[OutputSink]) -> OutputSink:
    return print if output is None else output


def _resource(package: Package, resource_name: str) -> Traversable:
    if not resource_name:
        raise ResourceNotFoundError("Cannot find resource named: " + repr(resource_name))
    resource = resources.files(package)
    for part in resource_name.replace("\\", "/").split("/"):
        if part:
            resource = resource.joinpath(part)
    if not resource.is_file():
        raise ResourceNotFoundError(
            "Cannot find resource named: " + resource_name, resource_name=resource_name
        )
    return resource


def extract_resource_as_text(
    package: Package,
    resource_name: str,
    output_text: bool = False,
    output: Optional[OutputSink] = None,
    encoding: Optional[str] = None,
) -> str:
    """Read a packaged text file.

    Args:
        package: Package (module or dotted name) that contains the file.
        resource_name: Path of the file relative to the package directory.
        output_text: Echo the text to ``output`` before returning it.
        output: Sink used when ``output_text`` is set. Defaults to ``print``.
        encoding: Text encoding; defaults to the configured
            ``resources.encoding``.

    Returns:
        The contents of the file.

    Raises:
        ResourceNotFoundError: If the package holds no such file.
    """
    resource = _resource(package, resource_name)
    text = resource.read_text(encoding=encoding or get_config().resources.encoding)
    if output_text:
        _sink(output)(text)
    return text


def extract_resource_as_lines(
    package: Package,
    resource_name: str,
    output_text: bool = False,
    output: Optional[OutputSink] = None,
) -> List[str]:
    """Read a packaged text file and split it into its non-empty lines."""
    return split_lines(
        extract_resource_as_text(package, resource_name, output_text=output_text, output=output)
    )


def _walk(root: Traversable, prefix: str = "") -> Iterator[str]:
    for entry in root.iterdir():
        name = f"{prefix}{entry.name}"
        if entry.is_dir():
            if entry.name not in _SKIPPED_DIRECTORIES:
                yield from _walk(entry, f"{name}/")
        elif not entry.name.endswith(_SKIPPED_SUFFIXES):
            yield name


def list_resources(package: Package, output: Optional[OutputSink] = None) -> List[str]:
    """List the resource names available in a package and echo each one.

    Args:
        package: Package (module or dotted name) to inspect.
        output: Sink receiving one name per call. Defaults to ``print``.

    Returns:
        The resource names, sorted.
    """
    names = sorted(_walk(resources.files(package)))
    sink = _sink(output)
    for name in names:
        sink(name)
    return names
