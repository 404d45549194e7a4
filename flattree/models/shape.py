import dataclasses
import logging
import types
import typing
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel

from flattree.utils.enums.shape_kind import ShapeKind

logger = logging.getLogger(__name__)

_OPAQUE_SCALARS = (str, bytes, bytearray, int, float, complex, bool, Decimal, Enum, date, datetime, time)


@dataclass(frozen=True)
class Shape:
    """
    One value as seen by the record walk: its kind, the value itself, and for
    OPTIONAL_REF the shape of whatever it points at (None when unset).
    """
    kind: ShapeKind
    value: Any
    inner: Optional["Shape"] = None
    annotation: Any = None

    @property
    def is_unset(self) -> bool:
        return self.kind is ShapeKind.OPTIONAL_REF and self.inner is None

    def deref(self) -> "Shape":
        """Follow OPTIONAL_REF links down to the referenced shape."""
        shape = self
        while shape.kind is ShapeKind.OPTIONAL_REF and shape.inner is not None:
            shape = shape.inner
        return shape


def is_record(value: Any) -> bool:
    if value is None or isinstance(value, type) or isinstance(value, _OPAQUE_SCALARS):
        return False
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value):
        return True
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return True
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return False
    if callable(value) or isinstance(value, types.ModuleType):
        return False
    return hasattr(value, "__dict__")


def optional_target(annotation: Any) -> Tuple[bool, Any]:
    """
    Split ``Optional[X]`` / ``X | None`` into (True, X).

    Anything else comes back as (False, annotation).
    """
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = typing.get_args(annotation)
        if type(None) in args:
            rest = tuple(a for a in args if a is not type(None))
            if len(rest) == 1:
                return True, rest[0]
            return True, typing.Union[rest]
    return False, annotation


def describe(value: Any, annotation: Any = None) -> Shape:
    """
    Classify a value for the record walk.

    ``annotation`` is the declared type of the slot holding the value, when
    known. Optional slots always produce OPTIONAL_REF so that an unset field
    is told apart from a field that simply holds a zero value.
    """
    optional, target = optional_target(annotation)
    if optional:
        if value is None:
            return Shape(ShapeKind.OPTIONAL_REF, None, None, annotation)
        return Shape(ShapeKind.OPTIONAL_REF, value, describe(value, target), annotation)

    if is_record(value):
        return Shape(ShapeKind.NESTED_RECORD, value, annotation=annotation)
    if isinstance(value, dict):
        return Shape(ShapeKind.MAPPING, value, annotation=annotation)
    if isinstance(value, (list, tuple)):
        return Shape(ShapeKind.SEQUENCE, value, annotation=annotation)
    return Shape(ShapeKind.SCALAR, value, annotation=annotation)


def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as e:
        # Forward references to locally defined classes cannot be resolved
        logger.debug(f"Type hints of {cls.__name__} unavailable: {e}")
        return {}


def _declared_fields(record: Any) -> Iterator[Tuple[str, Any, Any]]:
    cls = type(record)

    if isinstance(record, BaseModel):
        for name, info in cls.model_fields.items():
            yield name, getattr(record, name), info.annotation
        return

    hints = _type_hints(cls)

    if dataclasses.is_dataclass(record):
        for f in dataclasses.fields(record):
            annotation = hints.get(f.name, None if isinstance(f.type, str) else f.type)
            yield f.name, getattr(record, f.name), annotation
        return

    if isinstance(record, tuple) and hasattr(record, "_fields"):
        for name in record._fields:
            yield name, getattr(record, name), hints.get(name)
        return

    for name, value in vars(record).items():
        if name.startswith("_"):
            continue
        yield name, value, hints.get(name)


def iter_fields(record: Any) -> Iterator[Tuple[str, Shape]]:
    """
    Yield ``(field name, shape)`` for every field of a record, in declaration order.
    """
    for name, value, annotation in _declared_fields(record):
        yield name, describe(value, annotation)
