import logging
from typing import Any, Dict, Set

from flattree.utils.enums.collision_policy import CollisionPolicy
from flattree.utils.errors import KeyCollisionError

logger = logging.getLogger(__name__)


class FlatSink:
    """
    Output buffer of a flatten walk.

    Every write goes through ``put`` so that two paths landing on the same
    key are resolved by one collision policy, wherever the collision happens.
    """

    def __init__(self, policy: CollisionPolicy = CollisionPolicy.OVERWRITE):
        self.policy = policy
        self.data: Dict[str, Any] = {}
        self._collected: Set[str] = set()

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def put(self, key: str, value: Any) -> None:
        if key not in self.data:
            self.data[key] = value
            return

        if self.policy is CollisionPolicy.ERROR:
            raise KeyCollisionError(key, self.data[key], value)

        if self.policy is CollisionPolicy.COLLECT:
            if key in self._collected:
                self.data[key].append(value)
            else:
                self.data[key] = [self.data[key], value]
                self._collected.add(key)
            return

        logger.debug(f"Key '{key}' overwritten: {self.data[key]!r} -> {value!r}")
        self.data[key] = value

    def extend(self, mapping: Dict[str, Any]) -> None:
        for key, value in mapping.items():
            self.put(key, value)
