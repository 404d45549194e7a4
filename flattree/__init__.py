import logging

from flattree.api import (
    FlatMapping,
    compare_states,
    flatten_data,
    flatten_record,
    flatten_text,
    flatten_text_to_mapping,
    unflatten,
    unflatten_text,
)
from flattree.business_logic.config_merger import resolve_config
from flattree.models.config import FlattenerConfig
from flattree.settings import load_config
from flattree.utils.enums.collision_policy import CollisionPolicy
from flattree.utils.errors import (
    ErrInvalidType,
    FlattenError,
    InvalidTypeError,
    KeyCollisionError,
    ParseError,
    SerializationError,
    UnflattenError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CollisionPolicy",
    "ErrInvalidType",
    "FlatMapping",
    "FlattenError",
    "FlattenerConfig",
    "InvalidTypeError",
    "KeyCollisionError",
    "ParseError",
    "SerializationError",
    "UnflattenError",
    "compare_states",
    "flatten_data",
    "flatten_record",
    "flatten_text",
    "flatten_text_to_mapping",
    "load_config",
    "resolve_config",
    "unflatten",
    "unflatten_text",
]
