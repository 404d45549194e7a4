from enum import Enum, auto


class ShapeKind(Enum):
    """
    What a value looks like to the record walk.
    """
    SCALAR = auto()         # str, int, float, bool, None, or anything opaque
    SEQUENCE = auto()       # list / tuple
    MAPPING = auto()        # untyped dict
    NESTED_RECORD = auto()  # dataclass, pydantic model, NamedTuple, plain object
    OPTIONAL_REF = auto()   # Optional[...] field, possibly unset
