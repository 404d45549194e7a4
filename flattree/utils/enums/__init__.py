from flattree.utils.enums.collision_policy import CollisionPolicy
from flattree.utils.enums.shape_kind import ShapeKind

__all__ = ["CollisionPolicy", "ShapeKind"]
