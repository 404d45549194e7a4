import logging
from collections import deque
from typing import Any, Dict, List, Optional, Tuple

from flattree.business_logic.flat_mapping import FlatSink
from flattree.business_logic.post_process import apply_post_processing
from flattree.business_logic.predicates import should_omit
from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.models.tree import ArrayNode, ObjectNode, ScalarNode, Tree, build_tree

logger = logging.getLogger(__name__)


def flatten(path: str, node: Tree, sink: FlatSink, config: FlattenerConfig) -> None:
    """
    Flatten ``node`` into ``sink`` with an explicit-stack DFS.

    Object keys and array indexes are both appended with ``config.join``, so
    ``{"a": [{"b": 1}]}`` gives ``a.0.b``. Scalars are emitted at their path
    unless the omit switches drop them.
    """
    # Stack contains: (node, path)
    stack: List[Tuple[Tree, str]] = [(node, path)]

    while stack:
        current, current_path = stack.pop()

        if isinstance(current, ObjectNode):
            # Reverse to maintain order in stack (DFS)
            for key, child in reversed(current.entries):
                stack.append((child, config.join(current_path, key)))
        elif isinstance(current, ArrayNode):
            for i in reversed(range(len(current.items))):
                stack.append((current.items[i], config.join(current_path, str(i))))
        elif isinstance(current, ScalarNode):
            if not should_omit(current.value, config):
                sink.put(current_path, current.value)
        else:
            raise TypeError(f"Not a tree node: {type(current).__name__}")


def flatten_tree(node: Tree, config: FlattenerConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Flatten a whole tree, starting from the configured prefix, and post-process it."""
    sink = FlatSink(config.collision_policy)
    flatten(config.prefix, node, sink, config)
    logger.debug(f"Flattened tree into {len(sink)} keys")
    return apply_post_processing(sink.data, config)


def flatten_data(data: Any, config: FlattenerConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Flatten already-parsed data (dicts, lists, scalars)."""
    return flatten_tree(build_tree(data), config)


def find_key_iterative(obj: Any, target_key: str) -> Optional[Dict[str, Any]]:
    """Non-recursive search for a key in nested data; returns the shallowest match."""
    queue = deque([(obj, "")])

    while queue:
        current_obj, current_path = queue.popleft()

        if isinstance(current_obj, dict):
            for key, value in current_obj.items():
                path = f"{current_path}.{key}" if current_path else str(key)

                if key == target_key:
                    return {"path": path, "value": value}

                if isinstance(value, (dict, list)):
                    queue.append((value, path))

        elif isinstance(current_obj, list):
            for i, item in enumerate(current_obj):
                path = f"{current_path}[{i}]"
                if isinstance(item, (dict, list)):
                    queue.append((item, path))

    return None
