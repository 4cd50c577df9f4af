"""Runtime checks and coercion against declared result types.

Checks are shallow for containers: a ``list[Transaction]`` result only has
to be a list. Coercion is deep and is used for values coming from YAML,
where dataclasses arrive as mappings and durations as seconds.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import types
from datetime import timedelta
from functools import lru_cache
from typing import Any, Dict, Union, get_args, get_origin, get_type_hints

NoneType = type(None)


def _supertype(annotation: Any) -> Any:
    """Unwrap NewType chains (Epoch -> int)."""
    while hasattr(annotation, "__supertype__"):
        annotation = annotation.__supertype__
    return annotation


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def conforms(value: Any, annotation: Any) -> bool:
    """Check whether ``value`` can be returned where ``annotation`` is declared.

    Args:
        value: Candidate value
        annotation: Declared result type

    Returns:
        True if the value conforms

    Example:
        >>> conforms(3, Optional[int])
        True
        >>> conforms(True, int)
        False
    """
    annotation = _supertype(annotation)

    if annotation is Any or annotation is object:
        return True
    if annotation is None or annotation is NoneType:
        return value is None

    origin = get_origin(annotation)
    if _is_union(origin):
        return any(conforms(value, arg) for arg in get_args(annotation))
    if origin is collections.abc.Callable or annotation is collections.abc.Callable:
        return callable(value)
    if origin is not None:
        return isinstance(value, origin)

    if annotation is int:
        # bool is an int subclass but never a valid count or amount
        return isinstance(value, int) and not isinstance(value, bool)
    if annotation is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if isinstance(annotation, type):
        return isinstance(value, annotation)
    return True


def describe(annotation: Any) -> str:
    """Human-readable name of a declared type for error messages."""
    if annotation is None or annotation is NoneType:
        return "None"
    if hasattr(annotation, "__supertype__"):
        return annotation.__name__
    if get_origin(annotation) is None and isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


@lru_cache(maxsize=None)
def _field_types(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def coerce(value: Any, annotation: Any) -> Any:
    """Convert plain data (as loaded from YAML) into ``annotation``.

    Values that already conform are returned unchanged.

    Args:
        value: Plain value (mapping, list, number, string)
        annotation: Declared target type

    Returns:
        Converted value

    Raises:
        ValueError: If a mapping does not fit the target dataclass

    Example:
        >>> coerce({"chain_id": 250}, ChainConfig)
        ChainConfig(chain_id=250)
        >>> coerce(1.5, timedelta)
        datetime.timedelta(seconds=1, microseconds=500000)
    """
    annotation = _supertype(annotation)

    if value is None:
        return None

    origin = get_origin(annotation)

    if _is_union(origin):
        arms = [arg for arg in get_args(annotation) if arg is not NoneType]
        for arm in arms:
            if conforms(value, arm):
                return coerce(value, arm)
        if len(arms) == 1:
            return coerce(value, arms[0])
        return value

    if dataclasses.is_dataclass(annotation) and isinstance(annotation, type):
        if isinstance(value, annotation):
            return value
        if not isinstance(value, collections.abc.Mapping):
            return value
        hints = _field_types(annotation)
        known = {f.name for f in dataclasses.fields(annotation)}
        unknown = set(value) - known
        if unknown:
            raise ValueError(
                f"Unknown field(s) for {annotation.__name__}: {', '.join(sorted(unknown))}"
            )
        kwargs = {key: coerce(item, hints[key]) for key, item in value.items()}
        try:
            return annotation(**kwargs)
        except TypeError as err:
            raise ValueError(f"Cannot build {annotation.__name__}: {err}") from err

    if annotation is timedelta and isinstance(value, (int, float)):
        return timedelta(seconds=value)

    if annotation is bytes and isinstance(value, str):
        return bytes.fromhex(value[2:] if value.startswith("0x") else value)

    if origin in (list, collections.abc.Sequence) and isinstance(value, list):
        (item_type,) = get_args(annotation) or (Any,)
        return [coerce(item, item_type) for item in value]

    if origin is tuple and isinstance(value, (list, tuple)):
        args = get_args(annotation)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(coerce(item, args[0]) for item in value)
        if args and len(args) == len(value):
            return tuple(coerce(item, arg) for item, arg in zip(value, args))
        return tuple(value)

    if origin in (dict, collections.abc.Mapping, collections.abc.MutableMapping) and isinstance(
        value, collections.abc.Mapping
    ):
        key_type, value_type = get_args(annotation) or (Any, Any)
        return {coerce(k, key_type): coerce(v, value_type) for k, v in value.items()}

    return value
