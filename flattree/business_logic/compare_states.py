from typing import Any, Dict, Mapping, Union

from flattree.business_logic.json_flattener import flatten_data
from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.utils.handlers.file_formats import FileFormatsHandler

FlatDiff = Dict[str, Dict[str, Any]]


def _as_flat(state: Union[str, Mapping[str, Any], None], config: FlattenerConfig) -> Mapping[str, Any]:
    if state is None:
        return {}
    if isinstance(state, str):
        return flatten_data(FileFormatsHandler.parse(state, config.input_format), config)
    return state


def compare_states(
        current_data: Union[str, Mapping[str, Any], None],
        old_data: Union[str, Mapping[str, Any], None],
        config: FlattenerConfig = DEFAULT_CONFIG,
) -> FlatDiff:
    """
    Compare two flat mappings and return deleted, added, changed, and unchanged items.

    Args:
        current_data: The current flat mapping, or document text to flatten first
        old_data: The previous flat mapping, or document text to flatten first
        config: Options used when either side is text

    Returns:
        Dictionary with 'deleted', 'added', 'changed', and 'unchanged' keys.
        'changed' maps each key to {'old': ..., 'new': ...}.

    Raises:
        ParseError: If either side is text that cannot be parsed
    """
    current = _as_flat(current_data, config)
    old = _as_flat(old_data, config)

    deleted = {}
    added = {}
    changed = {}
    unchanged = {}

    # Find deleted keys (in old but not in current)
    for key in old:
        if key not in current:
            deleted[key] = old[key]

    # Find added, changed, and unchanged keys
    for key in current:
        if key not in old:
            added[key] = current[key]
        # 1 -> True or 1 -> 1.0 counts as a change
        elif current[key] != old[key] or type(current[key]) is not type(old[key]):
            changed[key] = {'old': old[key], 'new': current[key]}
        else:
            unchanged[key] = current[key]

    return {
        'deleted': deleted,
        'added': added,
        'changed': changed,
        'unchanged': unchanged
    }
