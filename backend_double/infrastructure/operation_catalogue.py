"""Operation catalogue built from the backend interface.

Reads each abstract method of an interface once and records how the
operation reports results: declared result types (from the return
annotation), error channel and streamed item type (from the markers).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple, get_args, get_origin, get_type_hints

from ..domain.helpers.operation_markers import is_fallible, stream_type
from ..domain.helpers.type_projection import NoneType

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationSpec:
    """How one backend operation reports its results.

    Attributes:
        name: Operation (method) name
        result_types: Declared result types in order
        fallible: Whether the operation has an error channel
        stream_type: Type of values fed to the callback, None if the
            operation returns its results
    """

    name: str
    result_types: Tuple[Any, ...] = ()
    fallible: bool = False
    stream_type: Optional[Any] = None

    @property
    def is_streaming(self) -> bool:
        return self.stream_type is not None

    @property
    def arity(self) -> int:
        """Number of declared results."""
        return len(self.result_types)

    def expected_type(self, position: int) -> Any:
        """Declared type of the registered value at ``position``."""
        if self.is_streaming:
            return self.stream_type
        return self.result_types[position]

    def pack(self, values: Sequence[Any]) -> Any:
        """Shape projected values the way the operation returns them.

        Returns:
            None for no results, the value for one, a tuple for several
        """
        if not values:
            return None
        if len(values) == 1:
            return values[0]
        return tuple(values)


def _result_types(annotation: Any) -> Tuple[Any, ...]:
    if annotation is None or annotation is NoneType:
        return ()
    if get_origin(annotation) is tuple:
        args = get_args(annotation)
        if len(args) == 2 and args[1] is Ellipsis:
            return (annotation,)
        return tuple(args)
    return (annotation,)


@lru_cache(maxsize=None)
def build_catalogue(interface: type) -> Mapping[str, OperationSpec]:
    """Build the catalogue of every abstract operation of ``interface``.

    Args:
        interface: ABC whose abstract methods are the operations

    Returns:
        Read-only mapping of operation name to OperationSpec

    Example:
        >>> catalogue = build_catalogue(IBackend)
        >>> catalogue["stats"].arity
        2
        >>> catalogue["suggest_price"].fallible
        True
    """
    catalogue = {}
    for name in sorted(getattr(interface, "__abstractmethods__", ())):
        member = getattr(interface, name)
        if isinstance(member, property) or not callable(member):
            continue
        hints = get_type_hints(member)
        catalogue[name] = OperationSpec(
            name=name,
            result_types=_result_types(hints.get("return")),
            fallible=is_fallible(member),
            stream_type=stream_type(member),
        )

    _LOGGER.debug(
        "Built catalogue for %s: %d operations", interface.__name__, len(catalogue)
    )
    return MappingProxyType(catalogue)
