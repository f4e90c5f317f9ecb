"""
Error helpers: assertions and exception serialization.
"""

import traceback
from typing import Any, Dict, Set


class InvariantError(Exception):
    """Raised by invariant() when its condition is falsy."""


def invariant(condition: Any, message: str) -> None:
    """
    Raise InvariantError with message unless condition is truthy.

    Unlike assert, this is never stripped by `python -O`.
    """
    if not condition:
        raise InvariantError(message)


def _format_stack(error: BaseException) -> str:
    lines = traceback.format_exception(type(error), error, error.__traceback__, chain=False)
    return "".join(lines).rstrip("\n")


CIRCULAR = "[Circular]"


def _flatten(value: Any, pretty_stack: bool, parents: Set[int]) -> Any:
    """Flatten nested exceptions and dicts, leave everything else as is."""
    if isinstance(value, (BaseException, dict)) and id(value) in parents:
        return CIRCULAR
    if isinstance(value, BaseException):
        return _exception_to_dict(value, pretty_stack, parents)
    if isinstance(value, dict):
        parents.add(id(value))
        try:
            return {key: _flatten(item, pretty_stack, parents) for key, item in value.items()}
        finally:
            parents.discard(id(value))
    return value


def _exception_to_dict(error: BaseException, pretty_stack: bool, parents: Set[int]) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
        "args": list(error.args),
    }

    stack = _format_stack(error)
    if pretty_stack:
        stack_lines = [line.strip() for line in stack.splitlines() if line.strip()]
        for i, line in enumerate(stack_lines):
            result[f"stack_{i}"] = line
    else:
        result["stack"] = stack

    # Only objects on the current path count as circular; shared references don't
    parents.add(id(error))
    try:
        # Attributes set on the instance (custom error fields, __notes__, ...)
        for key, item in vars(error).items():
            result[key] = _flatten(item, pretty_stack, parents)

        if error.__cause__ is not None:
            result["cause"] = _flatten(error.__cause__, pretty_stack, parents)
    finally:
        parents.discard(id(error))

    return result


def error_to_object(value: Any, pretty_stack: bool = False) -> Dict[str, Any]:
    """
    Convert an exception into a plain, serializable dict.

    Exceptions become dicts with `name`, `message`, `args`, `stack`, any
    instance attributes and, when the exception was raised `from` another,
    a flattened `cause`. Exceptions nested inside dicts are flattened too.

    A dict or exception that contains itself is replaced by "[Circular]"
    where the loop closes.

    Strings become `{"message": value}`. Any other value yields `{}`;
    this function never raises.

    Args:
        value: Exception (or dict containing exceptions) to convert
        pretty_stack: Split the traceback into `stack_0`, `stack_1`, ...
            entries instead of a single `stack` string

    Returns:
        Plain dict representation
    """
    if isinstance(value, BaseException):
        return _exception_to_dict(value, pretty_stack, set())
    if isinstance(value, dict):
        return _flatten(value, pretty_stack, set())
    if isinstance(value, str):
        return {"message": value}
    return {}
