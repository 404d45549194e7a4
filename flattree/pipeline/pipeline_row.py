from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict


class RowKind(Enum):
    """
    What happened to one flat key between two versions of a document.
    """
    INSERT = auto()  # Key added
    UPDATE = auto()  # Key's value changed
    DELETE = auto()  # Key removed
    UNCHANGED = auto()


@dataclass
class PipelineRow:
    """
    A single flat key and what happened to it.
    """
    key: str                    # e.g., "database.port"
    value: Any                  # new value (old value for DELETE)
    kind: RowKind
    previous: Any = None        # old value for UPDATE
    metadata: Dict[str, Any] = field(default_factory=dict)  # caller context (file name, revision...)
