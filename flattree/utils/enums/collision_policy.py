from enum import Enum


class CollisionPolicy(Enum):
    # Later path silently replaces the earlier one
    OVERWRITE = "overwrite"

    # Raise KeyCollisionError on the first duplicate key
    ERROR = "error"

    # Keep every value, in visit order, as a list under the shared key
    COLLECT = "collect"
