"""
Request parameter values and their canonical string form.
"""
from collections.abc import Mapping
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from oauth1_header.errors import UnsupportedParameterType

ParamValue = Union[str, int, bool]
ExtraParams = Union[Mapping, Iterable[Tuple[str, ParamValue]]]


class ParamKind(Enum):
    """Kinds of parameter values accepted for signing."""
    STR = "str"
    INT = "int"
    BOOL = "bool"


def classify(name: str, value) -> ParamKind:
    """
    Determine the kind of a parameter value.

    bool is checked before int because bool is a subclass of int.

    Raises:
        UnsupportedParameterType: If the value is not a str, int or bool
    """
    if isinstance(value, bool):
        return ParamKind.BOOL
    if isinstance(value, int):
        return ParamKind.INT
    if isinstance(value, str):
        return ParamKind.STR
    raise UnsupportedParameterType(name, value)


def stringify(name: str, value: ParamValue) -> str:
    """
    Convert a parameter value to the string that gets signed.

    - str: unchanged
    - int: base-10 digits, leading '-' for negatives
    - bool: "true" or "false"

    Args:
        name: Parameter name (used in the error message)
        value: Parameter value

    Returns:
        Canonical string form of the value

    Raises:
        UnsupportedParameterType: If the value is not a str, int or bool
    """
    kind = classify(name, value)
    if kind is ParamKind.BOOL:
        return 'true' if value else 'false'
    if kind is ParamKind.INT:
        return str(int(value))
    return value


def iter_param_pairs(params: Optional[ExtraParams]) -> List[Tuple[str, str]]:
    """
    Flatten extra parameters into (name, string value) pairs.

    Accepts a mapping or an iterable of (name, value) pairs. Pairs may repeat
    a name; each pair is kept as its own entry.

    Raises:
        UnsupportedParameterType: If a name is not a str or a value is not a
                                  str, int or bool
    """
    if not params:
        return []

    items = params.items() if isinstance(params, Mapping) else params

    pairs = []
    for item in items:
        try:
            name, value = item
        except (TypeError, ValueError):
            raise UnsupportedParameterType(
                '<pair>', item, f"Expected a (name, value) pair, got {item!r}"
            ) from None
        if not isinstance(name, str):
            raise UnsupportedParameterType(
                name, name, f"Parameter name {name!r} must be a string, got {type(name).__name__}"
            )
        pairs.append((name, stringify(name, value)))
    return pairs
