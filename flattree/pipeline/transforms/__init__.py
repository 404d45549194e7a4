from flattree.pipeline.transforms.differ import DiffExploder
from flattree.pipeline.transforms.flattener import Flattenizer
from flattree.pipeline.transforms.parser import ContentParser

__all__ = ["ContentParser", "DiffExploder", "Flattenizer"]
