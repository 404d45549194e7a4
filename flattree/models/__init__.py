from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.models.shape import Shape, describe, iter_fields
from flattree.models.tree import ArrayNode, ObjectNode, ScalarNode, Tree, build_tree, to_python

__all__ = [
    "DEFAULT_CONFIG",
    "ArrayNode",
    "FlattenerConfig",
    "ObjectNode",
    "ScalarNode",
    "Shape",
    "Tree",
    "build_tree",
    "describe",
    "iter_fields",
    "to_python",
]
