import logging
import typing
from typing import Any, Dict

from flattree.business_logic.flat_mapping import FlatSink
from flattree.business_logic.post_process import apply_post_processing
from flattree.business_logic.predicates import should_omit
from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.models.shape import Shape, describe, iter_fields
from flattree.utils.enums.shape_kind import ShapeKind

logger = logging.getLogger(__name__)


def _item_annotation(annotation: Any, position: int) -> Any:
    """Declared type of the items of a typed container, e.g. Foo in List[Foo]."""
    if annotation is None:
        return None
    args = typing.get_args(annotation)
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    if len(args) == 2 and args[1] is Ellipsis:  # Tuple[X, ...]
        return args[0]
    if position < len(args):
        return args[position]
    return None


class RecordFlattener:
    """
    Walks a structured record field by field.

    Keys are built without a separator after the configured prefix
    (``prefix + "Name"``) and with exactly one separator per nesting step
    (``prefix + "Type" + sep + "Name"``). Sequence items are keyed by index:
    ``Tags.0``, ``Items.0.Id``.
    """

    def __init__(self, config: FlattenerConfig = DEFAULT_CONFIG):
        self.config = config
        self.sink = FlatSink(config.collision_policy)

    def run(self, record: Any) -> Dict[str, Any]:
        self.walk("", describe(record))
        logger.debug(f"Flattened {type(record).__name__} into {len(self.sink)} keys")
        return apply_post_processing(self.sink.data, self.config)

    def emit(self, path: str, value: Any) -> None:
        if not should_omit(value, self.config):
            self.sink.put(f"{self.config.prefix}{path}", value)

    def walk_fields(self, record: Any, path: str) -> None:
        for name, shape in iter_fields(record):
            self.walk(self.config.join(path, name), shape)

    def walk(self, path: str, shape: Shape) -> None:
        if shape.kind is ShapeKind.OPTIONAL_REF:
            if shape.is_unset:
                self.emit(path, None)
                return
            shape = shape.deref()

        if shape.kind is ShapeKind.NESTED_RECORD:
            if should_omit(shape.value, self.config):
                return
            self.walk_fields(shape.value, path)

        elif shape.kind is ShapeKind.SEQUENCE:
            for i, item in enumerate(shape.value):
                item_shape = describe(item, _item_annotation(shape.annotation, i))
                self.walk(self.config.join(path, str(i)), item_shape)

        elif shape.kind is ShapeKind.MAPPING:
            value_annotation = _item_annotation(shape.annotation, 1)
            for key, value in shape.value.items():
                self.walk(self.config.join(path, str(key)), describe(value, value_annotation))

        else:
            self.emit(path, shape.value)


def flatten_record(record: Any, config: FlattenerConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Flatten a dataclass, pydantic model, NamedTuple or plain object."""
    return RecordFlattener(config).run(record)
