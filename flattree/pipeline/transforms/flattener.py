import logging
from typing import Any, Dict, Optional

from flattree.business_logic.json_flattener import find_key_iterative, flatten_data
from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.pipeline.core import Transform

logger = logging.getLogger(__name__)


class Flattenizer(Transform):
    """
    Flattens parsed data. With ``root_key`` set, only the subtree under the
    shallowest occurrence of that key is flattened.
    """

    def __init__(self, root_key: Optional[str] = None, config: FlattenerConfig = DEFAULT_CONFIG):
        self.root_key = root_key
        self.config = config

    def process(self, data: Any) -> Dict[str, Any]:
        if data is None:
            return {}

        if self.root_key is None:
            return flatten_data(data, self.config)

        target_node_wrapper = find_key_iterative(data, self.root_key)
        if target_node_wrapper is None:
            logger.debug(f"Root key '{self.root_key}' not found, nothing to flatten")
            return {}

        return flatten_data(target_node_wrapper['value'], self.config)
