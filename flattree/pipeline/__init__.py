from flattree.pipeline.pipeline_row import PipelineRow, RowKind
from flattree.pipeline.runner import diff_documents

__all__ = ["PipelineRow", "RowKind", "diff_documents"]
