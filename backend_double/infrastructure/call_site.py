"""Call-site resolution.

Lets one generic accessor body serve every backend operation: the operation
asks which function is executing instead of spelling out its own name.
"""

import inspect

from ..const import ANONYMOUS_FUNCTION_PREFIX, OPERATION_FRAME_DEPTH


def operation_name(depth: int = OPERATION_FRAME_DEPTH) -> str:
    """Return the unqualified name of the function ``depth`` frames up.

    With the default depth this is the function that called
    ``operation_name()``. Enclosing class and function qualifiers are
    stripped (``StubBackend.get_td`` -> ``get_td``).

    Args:
        depth: Number of frames above this function to inspect

    Returns:
        Function name, or "" when the frame is unavailable or belongs to
        an anonymous function (lambda, comprehension, module body)

    Raises:
        ValueError: If depth is negative

    Example:
        >>> def get_td():
        ...     return operation_name()
        >>> get_td()
        'get_td'
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return ""
        code = frame.f_code
        qualified = getattr(code, "co_qualname", code.co_name)
    finally:
        del frame

    name = qualified.rsplit(".", 1)[-1]
    if not name or name.startswith(ANONYMOUS_FUNCTION_PREFIX):
        return ""
    return name
