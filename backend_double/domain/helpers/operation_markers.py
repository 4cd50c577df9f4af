"""Markers describing how a backend operation reports its results.

The return annotation of an interface method is its declared result list.
These decorators add what an annotation cannot say: whether the operation
has an error channel, and whether it pushes values into a callback instead
of returning them.
"""

from typing import Any, Callable, TypeVar

FuncT = TypeVar("FuncT", bound=Callable[..., Any])

FALLIBLE_ATTR = "__backend_fallible__"
STREAM_ATTR = "__backend_stream_type__"


def fallible(func: FuncT) -> FuncT:
    """Mark an operation as able to fail with a business error.

    Example:
        >>> class IPricing(ABC):
        ...     @abstractmethod
        ...     @fallible
        ...     def suggest_price(self) -> int: ...
    """
    setattr(func, FALLIBLE_ATTR, True)
    return func


def streams(item_type: Any) -> Callable[[FuncT], FuncT]:
    """Mark an operation as feeding ``item_type`` values to a callback.

    Args:
        item_type: Type of each value handed to the callback
    """

    def decorator(func: FuncT) -> FuncT:
        setattr(func, STREAM_ATTR, item_type)
        return func

    return decorator


def is_fallible(func: Callable[..., Any]) -> bool:
    return bool(getattr(func, FALLIBLE_ATTR, False))


def stream_type(func: Callable[..., Any]) -> Any:
    return getattr(func, STREAM_ATTR, None)
