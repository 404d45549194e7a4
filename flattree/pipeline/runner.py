import logging
from typing import Any, Dict, List, Optional

from flattree.models.config import DEFAULT_CONFIG, FlattenerConfig
from flattree.pipeline.pipeline_row import PipelineRow
from flattree.pipeline.transforms.differ import DiffExploder
from flattree.pipeline.transforms.flattener import Flattenizer
from flattree.pipeline.transforms.parser import ContentParser

logger = logging.getLogger(__name__)


def diff_documents(
        current: Optional[str],
        previous: Optional[str],
        config: FlattenerConfig = DEFAULT_CONFIG,
        root_key: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        include_unchanged: bool = False,
) -> List[PipelineRow]:
    """
    Parse -> flatten -> diff two versions of a document.

    Either side may be None or blank, which reads as an empty document (every
    key of the other side is then an insert or a delete).
    """
    parser = ContentParser(config)
    flattener = Flattenizer(root_key=root_key, config=config)
    differ = DiffExploder(include_unchanged=include_unchanged)

    # A. Parse & flatten both states
    curr_flat = flattener.process(parser.process(current))
    prev_flat = flattener.process(parser.process(previous))

    # B. Explode the diff into rows
    rows = differ.process(curr_flat, prev_flat, metadata)
    logger.debug(f"Diffed {len(prev_flat)} -> {len(curr_flat)} keys into {len(rows)} rows")
    return rows
