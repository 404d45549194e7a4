from typing import Any, Dict

from flattree.business_logic.flat_mapping import FlatSink
from flattree.utils.enums.collision_policy import CollisionPolicy


def sort_keys(mapping: Dict[str, Any]) -> Dict[str, Any]:
    """Rebuild ``mapping`` in code point order of its keys."""
    return {key: mapping[key] for key in sorted(mapping)}


def keys_to_lower(mapping: Dict[str, Any], policy: CollisionPolicy = CollisionPolicy.OVERWRITE) -> Dict[str, Any]:
    """
    Rebuild ``mapping`` with every key lower-cased.

    Keys that fold together collide; ``policy`` decides what happens. With
    OVERWRITE the key visited last wins.
    """
    sink = FlatSink(policy)
    for key, value in mapping.items():
        if policy is CollisionPolicy.COLLECT and isinstance(value, list):
            # Already collected during the walk; fold its members one by one
            for item in value:
                sink.put(key.lower(), item)
        else:
            sink.put(key.lower(), value)
    return sink.data


def apply_post_processing(mapping: Dict[str, Any], config) -> Dict[str, Any]:
    """
    Sort first, then lower-case. When both run the folded result is sorted
    again so the final key sequence stays ordered.
    """
    if config.sort_keys:
        mapping = sort_keys(mapping)
    if config.keys_to_lower:
        mapping = keys_to_lower(mapping, config.collision_policy)
        if config.sort_keys:
            mapping = sort_keys(mapping)
    return mapping
