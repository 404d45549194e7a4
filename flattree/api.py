"""
Public entry points.

Every function takes an optional ``FlattenerConfig`` plus keyword overrides
for its fields, so ``flatten_text(s, separator="/")`` and
``flatten_text(s, FlattenerConfig(separator="/"))`` are equivalent.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from flattree.business_logic import compare_states as _compare
from flattree.business_logic.config_merger import resolve_config
from flattree.business_logic.json_flattener import flatten_tree
from flattree.business_logic.json_flattener import flatten_data as _flatten_data
from flattree.business_logic.record_flattener import flatten_record as _flatten_record
from flattree.business_logic.unflattener import unflatten as _unflatten
from flattree.models.config import FlattenerConfig
from flattree.models.tree import ArrayNode, ObjectNode, build_tree, kind_name
from flattree.utils.errors import InvalidTypeError
from flattree.utils.handlers.file_formats import FileFormatsHandler

logger = logging.getLogger(__name__)

FlatMapping = Dict[str, Any]


def flatten_text_to_mapping(
        text: str,
        config: Optional[FlattenerConfig] = None,
        **options: Any,
) -> Union[FlatMapping, List[FlatMapping]]:
    """
    Parse ``text`` and flatten it.

    The root must be an object, or an array whose elements are all objects;
    an array gives one flat mapping per element.

    Raises:
        ParseError: ``text`` is not well-formed
        InvalidTypeError: the root (or an array element) is not an object
        ValueError: an unknown option was passed
    """
    cfg = resolve_config(config, options)
    tree = build_tree(FileFormatsHandler.parse(text, cfg.input_format))

    if isinstance(tree, ObjectNode):
        return flatten_tree(tree, cfg)

    if isinstance(tree, ArrayNode):
        # Check every element before producing anything
        for item in tree.items:
            if not isinstance(item, ObjectNode):
                raise InvalidTypeError(kind_name(item), where="array element")
        logger.debug(f"Flattening top-level array of {len(tree)} objects")
        return [flatten_tree(item, cfg) for item in tree.items]

    raise InvalidTypeError(kind_name(tree))


def flatten_text(text: str, config: Optional[FlattenerConfig] = None, **options: Any) -> str:
    """
    Parse, flatten and serialize back to JSON text.

    Raises:
        ParseError: ``text`` is not well-formed
        InvalidTypeError: the root (or an array element) is not an object
        ValueError: an unknown option was passed
        SerializationError: a leaf has no JSON form
    """
    cfg = resolve_config(config, options)
    flat = flatten_text_to_mapping(text, cfg)
    return FileFormatsHandler.dump(flat, indent=cfg.indent)


def flatten_record(record: Any, config: Optional[FlattenerConfig] = None, **options: Any) -> FlatMapping:
    """Flatten a dataclass, pydantic model, NamedTuple or plain object without a text round-trip."""
    return _flatten_record(record, resolve_config(config, options))


def flatten_data(data: Any, config: Optional[FlattenerConfig] = None, **options: Any) -> FlatMapping:
    """Flatten already-parsed data. Any root is accepted; a scalar gives ``{prefix: value}``."""
    return _flatten_data(data, resolve_config(config, options))


def unflatten(mapping: FlatMapping, config: Optional[FlattenerConfig] = None, **options: Any) -> Any:
    return _unflatten(mapping, resolve_config(config, options))


def unflatten_text(text: str, config: Optional[FlattenerConfig] = None, **options: Any) -> str:
    """
    Inverse of ``flatten_text``: accepts a flat object or an array of flat objects.
    """
    cfg = resolve_config(config, options)
    data = FileFormatsHandler.parse(text, cfg.input_format)

    if isinstance(data, dict):
        result = _unflatten(data, cfg)
    elif isinstance(data, list):
        for item in data:
            if not isinstance(item, dict):
                raise InvalidTypeError(kind_name(build_tree(item)), where="array element")
        result = [_unflatten(item, cfg) for item in data]
    else:
        raise InvalidTypeError(kind_name(build_tree(data)))

    return FileFormatsHandler.dump(result, indent=cfg.indent)


def compare_states(
        current: Union[str, FlatMapping, None],
        previous: Union[str, FlatMapping, None],
        config: Optional[FlattenerConfig] = None,
        **options: Any,
) -> _compare.FlatDiff:
    return _compare.compare_states(current, previous, resolve_config(config, options))


__all__ = [
    "FlatMapping",
    "compare_states",
    "flatten_data",
    "flatten_record",
    "flatten_text",
    "flatten_text_to_mapping",
    "unflatten",
    "unflatten_text",
]
