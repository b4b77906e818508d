"""
Polymorphic value types for plotly.js fields that accept more than one JSON kind.

- NumOrString: any scalar (``meta``, ``customdata``, ``uirevision``)
- Dim: one value for every point, or one value per point
- TruthyEnum: enum fields where some variants are the JSON booleans

All of them serialize untagged: the JSON shape alone tells the variants apart.
"""

import json
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Optional, TypeVar, Union

from .serialize import serialize

T = TypeVar('T')
E = TypeVar('E')

_I64_MIN = -2 ** 63
_I64_MAX = 2 ** 63 - 1
_U64_MAX = 2 ** 64 - 1


def unwrap_scalar(value: Any) -> Any:
    """Return the native Python scalar behind a numpy-style scalar."""
    if isinstance(value, (str, bytes)):
        return value
    if hasattr(value, 'item') and callable(getattr(value, 'item')):
        return value.item()
    return value


def check_range(name: str, value: float, low: float, high: float) -> None:
    """
    Reject a setter argument outside its documented bounds.

    Raises:
        ValueError: If value is not within [low, high]
    """
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class NumOrString:
    """A string, float or 64-bit integer, serialized as the bare scalar."""
    value: Union[str, float, int]

    @classmethod
    def of(cls, value: Any) -> 'NumOrString':
        """
        Convert a primitive value into a NumOrString.

        Args:
            value: str, float, int or numpy scalar. Integers must fit in a
                   signed or unsigned 64-bit integer.

        Raises:
            TypeError: For booleans and non-scalar values
            ValueError: For integers outside the 64-bit range
        """
        if isinstance(value, NumOrString):
            return value
        value = unwrap_scalar(value)
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise TypeError(f"Cannot convert {type(value).__name__} to a number or string")
        if isinstance(value, int) and not _I64_MIN <= value <= _U64_MAX:
            raise ValueError(f"Integer {value} does not fit in 64 bits")
        return cls(value)

    @property
    def kind(self) -> str:
        """Populated variant: 'string', 'float', 'int' or 'uint'."""
        if isinstance(self.value, str):
            return 'string'
        if isinstance(self.value, float):
            return 'float'
        if self.value > _I64_MAX:
            return 'uint'
        return 'int'

    def to_json_value(self) -> Union[str, float, int]:
        return self.value


def to_num_or_string_wrapper(values: Iterable[Any]) -> List[NumOrString]:
    """Convert every element of a collection with NumOrString.of."""
    return [NumOrString.of(v) for v in values]


@dataclass(frozen=True)
class Dim(Generic[T]):
    """
    A field that holds either one value for all data points or one value per point.

    Build with ``Dim.scalar(v)`` or ``Dim.vector(values)``. A vector's length
    is not checked here; ``Trace.validate()`` compares it with the trace's
    point count on request.
    """
    value: Any
    is_vector: bool = False

    @classmethod
    def scalar(cls, value: T) -> 'Dim[T]':
        return cls(value, False)

    @classmethod
    def vector(cls, values: Iterable[T]) -> 'Dim[T]':
        """
        Raises:
            TypeError: If values is a single string rather than a collection
        """
        if isinstance(values, (str, bytes)):
            raise TypeError("Dim.vector expects a collection of values, not a single string; use Dim.scalar")
        return cls(copy_iterable_to_vec(values), True)

    def length(self) -> Optional[int]:
        """Number of per-point values, or None for a scalar."""
        return len(self.value) if self.is_vector else None

    def to_json_value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class TruthyEnum(Generic[E]):
    """
    Enum wrapper that emits a JSON boolean for variants spelled "true"/"false".

    Other variants are emitted as their text. Matching is exact and
    case-sensitive, so a variant rendering as "True" stays a string.
    """
    e: E

    def to_json_value(self) -> Union[bool, str]:
        text = json.dumps(serialize(self.e)).replace('"', '')
        if text == 'true':
            return True
        if text == 'false':
            return False
        return text


def owned_string_vector(values: Iterable[Any]) -> List[str]:
    """Copy a collection of string-like values into a list of str."""
    if isinstance(values, (str, bytes)):
        raise TypeError("Expected a collection of values, not a single string")
    return [str(unwrap_scalar(v)) for v in values]


def copy_iterable_to_vec(values: Iterable[T]) -> List[T]:
    """Copy any iterable (list, tuple, generator, numpy array) into a list."""
    if hasattr(values, 'tolist') and callable(getattr(values, 'tolist')):
        return values.tolist()
    return list(values)
