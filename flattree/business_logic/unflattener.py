import logging
from typing import Any, Dict, List, Union

from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.utils.errors import UnflattenError

logger = logging.getLogger(__name__)


class _Branch(dict):
    """Interior node under construction, told apart from dict-valued leaves."""


def _strip_prefix(key: str, config: FlattenerConfig) -> str:
    if config.prefix and key.startswith(config.prefix):
        key = key[len(config.prefix):]
        if key.startswith(config.separator):
            key = key[len(config.separator):]
    return key


def _finalize(node: Any) -> Any:
    if not isinstance(node, _Branch):
        return node
    children = {k: _finalize(v) for k, v in node.items()}
    # A branch whose segments are exactly 0..n-1 was an array
    if children and set(children) == {str(i) for i in range(len(children))}:
        return [children[str(i)] for i in range(len(children))]
    return dict(children)


def unflatten(mapping: Dict[str, Any], config: FlattenerConfig = DEFAULT_CONFIG) -> Union[Dict[str, Any], List[Any], Any]:
    """
    Rebuild a nested structure from a flat mapping.

    Only an inverse for collision-free output: numeric segments always come
    back as list positions, and keys that were folded together by
    ``keys_to_lower`` or the overwrite policy are gone for good.
    """
    if not config.separator:
        raise UnflattenError("Cannot unflatten keys joined with an empty separator")

    if len(mapping) == 1:
        (only_key, only_value), = mapping.items()
        # A scalar root flattens to a single key equal to the prefix
        if only_key == config.prefix:
            return only_value

    root = _Branch()
    for key, value in mapping.items():
        parts = _strip_prefix(key, config).split(config.separator)
        node = root
        for depth, part in enumerate(parts[:-1]):
            child = node.get(part)
            if child is None and part not in node:
                child = node[part] = _Branch()
            elif not isinstance(child, _Branch):
                conflict = config.separator.join(parts[:depth + 1])
                raise UnflattenError(f"Key '{key}' nests below the scalar at '{conflict}'")
            node = child

        last = parts[-1]
        if isinstance(node.get(last), _Branch):
            raise UnflattenError(f"Key '{key}' is a scalar but also has nested keys")
        node[last] = value

    logger.debug(f"Unflattened {len(mapping)} keys")
    return _finalize(root)
