from typing import Any, Dict, List, Optional

from flattree.business_logic.compare_states import compare_states
from flattree.pipeline.core import Transform
from flattree.pipeline.pipeline_row import PipelineRow, RowKind


class DiffExploder(Transform):
    """
    Compares Previous vs Current flat state and emits a stream of PipelineRows.
    """

    def __init__(self, include_unchanged: bool = False):
        self.include_unchanged = include_unchanged

    def process(
            self,
            current: Dict[str, Any],
            previous: Dict[str, Any],
            metadata: Optional[Dict[str, Any]] = None,
    ) -> List[PipelineRow]:
        metadata = metadata or {}
        rows = []

        diff = compare_states(current_data=current, old_data=previous)

        # 1. RowKind.INSERT
        for key, value in diff['added'].items():
            rows.append(PipelineRow(key=key, value=value, kind=RowKind.INSERT, metadata=dict(metadata)))

        # 2. RowKind.UPDATE
        for key, change in diff['changed'].items():
            rows.append(PipelineRow(
                key=key,
                value=change['new'],
                kind=RowKind.UPDATE,
                previous=change['old'],
                metadata=dict(metadata),
            ))

        # 3. RowKind.DELETE
        for key, value in diff['deleted'].items():
            rows.append(PipelineRow(key=key, value=value, kind=RowKind.DELETE, metadata=dict(metadata)))

        # 4. RowKind.UNCHANGED (on request)
        if self.include_unchanged:
            for key, value in diff['unchanged'].items():
                rows.append(PipelineRow(key=key, value=value, kind=RowKind.UNCHANGED, metadata=dict(metadata)))

        return rows
