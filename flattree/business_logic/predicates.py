from decimal import Decimal
from typing import Any

from flattree.models.shape import is_record, iter_fields


def is_nil(value: Any) -> bool:
    """
    True for an unset optional. ``None`` is the only unset marker; zero values
    such as ``0``, ``""`` or ``False`` are never nil.
    """
    return value is None


def is_empty(value: Any) -> bool:
    """
    True when ``value`` equals the zero value of its type.

    Booleans are never empty: ``True`` and ``False`` are both meaningful, so
    ``omit_empty`` keeps them. A record is empty when every one of its fields
    is empty by these same rules.
    """
    if isinstance(value, bool):
        return False
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0
    if isinstance(value, (int, float, complex, Decimal)):
        return value == 0
    if is_record(value):
        return all(is_empty(shape.value) for _, shape in iter_fields(value))
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def should_omit(value: Any, config) -> bool:
    """Apply the ``omit_empty`` / ``omit_nil`` switches of ``config`` to one value."""
    if config.omit_nil and is_nil(value):
        return True
    if config.omit_empty and is_empty(value):
        return True
    return False
