from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from flattree.utils.enums.collision_policy import CollisionPolicy


class FlattenerConfig(BaseModel):
    """
    Options for a single flatten call.

    Defaults: empty prefix, '.' separator, every switch off. Instances are
    frozen, so one config can be shared between calls. Field names also
    accept their camelCase form (``omitEmpty``, ``keysToLower``...) so config
    files written for other tools load unchanged.
    """
    prefix: str = ""
    separator: str = "."
    omit_empty: bool = False
    omit_nil: bool = False
    sort_keys: bool = False
    keys_to_lower: bool = False
    collision_policy: CollisionPolicy = CollisionPolicy.OVERWRITE
    input_format: Literal["json", "yaml", "xml", "auto"] = "json"
    indent: Optional[int] = None

    model_config = ConfigDict(
        extra="ignore",         # ignore unknown fields
        validate_default=True,  # validate defaults
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("input_format", mode="before")
    @classmethod
    def normalize_input_format(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "yml":
                return "yaml"
        return v

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError(f"indent must be >= 0, got {v}")
        return v

    def join(self, path: str, segment: str) -> str:
        """Append one path segment, inserting the separator only between segments."""
        if not path:
            return segment
        return f"{path}{self.separator}{segment}"


DEFAULT_CONFIG = FlattenerConfig()
