from typing import Any, Optional

from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.pipeline.core import Transform
from flattree.utils.handlers.file_formats import FileFormatsHandler


class ContentParser(Transform):
    """
    Parses raw file content (JSON/YAML/XML) into Python data.
    """

    def __init__(self, config: FlattenerConfig = DEFAULT_CONFIG):
        self.config = config

    def process(self, raw_content: Optional[str]) -> Any:
        # A missing document is an empty state, not an error
        if raw_content is None or not raw_content.strip():
            return {}
        return FileFormatsHandler.parse(raw_content, self.config.input_format)
