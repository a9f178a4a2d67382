# antdb/params.py
"""
Parameter type hints and positional binding.

Callers may attach a type hint to each bound value, the way PDO's
`PARAM_*` constants work. Hints are applied by coercing the Python value
before it reaches the driver; positions without a hint are bound as strings.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple, Union


class ParamType(Enum):
    STR = "str"
    INT = "int"
    BOOL = "bool"
    NULL = "null"
    LOB = "lob"


TypeHints = Union[Sequence[Optional[ParamType]], Mapping[int, ParamType], None]


_FALSE_STRINGS = {"", "0", "false", "off", "no"}
_TRUE_STRINGS = {"1", "true", "on", "yes"}


def _to_bool(value: Any) -> bool:
    if not isinstance(value, str):
        return bool(value)
    text = value.strip().lower()
    if text in _FALSE_STRINGS:
        return False
    if text in _TRUE_STRINGS:
        return True
    # Numeric strings such as "0.0" or "2" follow their number.
    return bool(float(text))


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return str(value).encode("utf-8")


def coerce(value: Any, hint: Optional[ParamType]) -> Any:
    """
    Converts `value` according to `hint`.

    `None` passes through untouched for every hint, so SQL NULLs survive
    string binding. A missing hint means `ParamType.STR`.

    Raises:
        - ValueError: If a string cannot be read as a number or a boolean.
    """
    hint = hint or ParamType.STR
    if hint is ParamType.NULL or value is None:
        return None
    if hint is ParamType.STR:
        return value if isinstance(value, str) else str(value)
    if hint is ParamType.INT:
        return int(value)
    if hint is ParamType.BOOL:
        return _to_bool(value)
    return _to_bytes(value)


def _hint_at(types: TypeHints, position: int) -> Optional[ParamType]:
    if isinstance(types, Mapping):
        return types.get(position)
    if position < len(types):
        return types[position]
    return None


def bind_params(params: Optional[Sequence[Any]], types: TypeHints = None) -> Tuple[Any, ...]:
    """
    Prepares positional parameters for the driver.

    `params=None` means no parameters. With no hints the values are handed
    over as they are and the driver infers their types. This differs from
    PDO's `execute($params)`, which binds every value as a string. Once any
    hint is given, every position is coerced, falling back to
    `ParamType.STR` where its hint is missing.

    Raises:
        - ValueError / TypeError: If a value cannot be coerced to its hint.
    """
    params = tuple(params or ())
    if not types:
        return params
    return tuple(coerce(value, _hint_at(types, i)) for i, value in enumerate(params))
