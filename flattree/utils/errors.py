class FlattenError(Exception):
    """Base class for every error raised by flattree."""


class ErrInvalidType(FlattenError):
    """
    The input cannot be flattened: either it is not well-formed, or its root
    has the wrong type. Catch this to handle both cases at once.
    """


class ParseError(ErrInvalidType):
    """Input text is not well-formed structured data."""


class InvalidTypeError(ErrInvalidType):
    """
    Input parsed fine, but its root is not an object (or an array of objects).
    """

    def __init__(self, type_name: str, where: str = "top-level"):
        self.type_name = type_name
        super().__init__(f"Invalid {where} type '{type_name}': expected an object or an array of objects")


class SerializationError(ParseError):
    """The flat mapping holds a value that cannot be written as JSON."""


class KeyCollisionError(FlattenError):
    def __init__(self, key: str, existing, incoming):
        self.key = key
        self.existing = existing
        self.incoming = incoming
        super().__init__(f"Key collision on '{key}': {existing!r} vs {incoming!r}")


class UnflattenError(FlattenError):
    """A flat mapping cannot be turned back into a tree."""
