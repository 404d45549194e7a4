from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class ObjectNode:
    entries: Tuple[Tuple[str, "Tree"], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class ArrayNode:
    items: Tuple["Tree", ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class ScalarNode:
    value: Any = None

    @property
    def is_null(self) -> bool:
        return self.value is None


Tree = Union[ObjectNode, ArrayNode, ScalarNode]


def build_tree(data: Any) -> Tree:
    """
    Convert parsed data (dicts, lists, scalars) into a Tree.

    Dict keys are stringified, tuples are treated as arrays. Anything that is
    neither a dict nor a list/tuple becomes a ScalarNode as-is (YAML can hand
    back dates, for example).
    """
    if isinstance(data, dict):
        return ObjectNode(tuple((str(k), build_tree(v)) for k, v in data.items()))
    if isinstance(data, (list, tuple)):
        return ArrayNode(tuple(build_tree(v) for v in data))
    return ScalarNode(data)


def to_python(node: Tree) -> Any:
    if isinstance(node, ObjectNode):
        return {k: to_python(v) for k, v in node.entries}
    if isinstance(node, ArrayNode):
        return [to_python(v) for v in node.items]
    if isinstance(node, ScalarNode):
        return node.value
    raise TypeError(f"Not a tree node: {type(node).__name__}")


def kind_name(node: Tree) -> str:
    """JSON-like type name of a node, used in error messages."""
    if isinstance(node, ObjectNode):
        return "object"
    if isinstance(node, ArrayNode):
        return "array"
    value = node.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    return type(value).__name__
