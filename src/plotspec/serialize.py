"""
Serialization - turns builder objects into plain JSON trees for plotly.js
Handles key renaming, omission of unset fields and untagged value types
"""

import dataclasses
import datetime
import math
from enum import Enum
from typing import Any, Dict, Optional


def optional_field(key: Optional[str] = None) -> Any:
    """
    Declare an optional schema field on a builder dataclass.

    The field starts unset, is not a constructor argument, and is left out of
    the output entirely while unset.

    Args:
        key: JSON key when it differs from the attribute name with its
             leading underscore removed (e.g. "showlegend")
    """
    metadata = {'key': key} if key is not None else {}
    return dataclasses.field(default=None, init=False, metadata=metadata)


def field_key(field: dataclasses.Field) -> str:
    """JSON key a dataclass field is written under."""
    return field.metadata.get('key', field.name.lstrip('_'))


def serialize_fields(obj: Any) -> Dict[str, Any]:
    """
    Serialize the set fields of a builder dataclass.

    Constructor fields (required geometry) come first, followed by optional
    fields in declaration order. Unset fields are skipped, never emitted as null.
    """
    result = {}
    ordered = sorted(dataclasses.fields(obj), key=lambda f: not f.init)
    for field in ordered:
        value = getattr(obj, field.name)
        if value is None:
            continue
        result[field_key(field)] = serialize(value)
    return result


def serialize(value: Any) -> Any:
    """
    Convert a value into a tree of JSON-compatible Python objects.

    Values exposing ``to_json_value()`` control their own shape (untagged
    unions such as NumOrString, Dim, TruthyEnum and ColorWrapper). Enums emit
    their value, builder dataclasses emit their set fields, and numpy-style
    scalars and arrays are unwrapped via ``item()`` / ``tolist()``. Non-finite
    floats become None and dates, datetimes and times become ISO 8601 strings.

    Raises:
        TypeError: If the value has no JSON representation
    """
    if value is None or isinstance(value, (bool, str)):
        return value

    to_json_value = getattr(value, 'to_json_value', None)
    if callable(to_json_value):
        return serialize(to_json_value())

    if isinstance(value, Enum):
        return serialize(value.value)
    if isinstance(value, float) and not math.isfinite(value):
        # JSON has no NaN or Infinity; plotly.js reads null as a gap
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return serialize_fields(value)
    if isinstance(value, dict):
        return {str(k): serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]

    # numpy scalars and arrays
    if hasattr(value, 'item') and callable(getattr(value, 'item')) and getattr(value, 'ndim', 0) == 0:
        return serialize(value.item())
    if hasattr(value, 'tolist') and callable(getattr(value, 'tolist')):
        return serialize(value.tolist())

    raise TypeError(f"Object of type {type(value).__name__} has no JSON representation")
