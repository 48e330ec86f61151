import builtins
import importlib
from typing import Any, Callable, List, Sequence

from inflector.Logging import get_logger

logger = get_logger(__name__)

SymbolResolver = Callable[[Sequence[str]], Any]


class ConstantizeError(Exception):
    """Base error for turning a namespaced name into a live object."""

    def __init__(self, message: str, path: Sequence[str] = ()):
        self.path = list(path)
        super().__init__(message)


class InvalidNamespacePathError(ConstantizeError, ValueError):
    """The name could not be split into usable namespace segments."""


class SymbolNotFoundError(ConstantizeError, LookupError):
    """A segment of an otherwise valid path does not resolve to anything."""


def split_namespace_path(name: str, separator: str) -> List[str]:
    """
    Split a namespaced name into its segments.

    A leading separator (an explicitly top-level name such as "::Foo") is
    ignored. Empty segments and segments that are not identifiers are rejected.
    """
    segments = name.split(separator)
    if segments and segments[0] == "" and len(segments) > 1:
        segments = segments[1:]

    if not segments or segments == [""]:
        raise InvalidNamespacePathError(f"Empty namespace path: {name!r}", segments)

    for segment in segments:
        if not segment.isidentifier():
            raise InvalidNamespacePathError(
                f"Invalid segment {segment!r} in namespace path {name!r}", segments
            )
    return segments


def _import_longest_prefix(segments: Sequence[str]):
    """
    Import the longest dotted module prefix of ``segments``.

    Returns:
        tuple: (module, consumed) or (None, 0) when no prefix is importable
    """
    for end in range(len(segments), 0, -1):
        module_name = ".".join(segments[:end])
        try:
            return importlib.import_module(module_name), end
        except ModuleNotFoundError as e:
            # Missing prefix: try a shorter one. Anything else propagates.
            if e.name is None or not (
                module_name == e.name or module_name.startswith(e.name + ".")
            ):
                raise
    return None, 0


def resolve_namespaced_symbol(segments: Sequence[str]) -> Any:
    """
    Resolve namespace segments to a live Python object.

    The longest importable module prefix is imported, and the remaining
    segments are looked up as attributes. A name with no importable prefix is
    looked up in builtins.

    Args:
        segments: Namespace segments, e.g. ["collections", "OrderedDict"]

    Returns:
        The resolved object

    Raises:
        InvalidNamespacePathError: no segments were given
        SymbolNotFoundError: a segment does not resolve
    """
    if not segments:
        raise InvalidNamespacePathError("Empty namespace path", segments)

    value, consumed = _import_longest_prefix(segments)
    if value is None:
        if not hasattr(builtins, segments[0]):
            raise SymbolNotFoundError(
                f"Uninitialized constant {segments[0]}", segments
            )
        value, consumed = getattr(builtins, segments[0]), 1

    for index in range(consumed, len(segments)):
        segment = segments[index]
        try:
            value = getattr(value, segment)
        except AttributeError:
            raise SymbolNotFoundError(
                f"Uninitialized constant {'.'.join(segments[: index + 1])}", segments
            ) from None

    logger.debug(f"Resolved {'.'.join(segments)}")
    return value
