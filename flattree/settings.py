import logging
from pathlib import Path
from typing import Union

from flattree.models.config import FlattenerConfig
from flattree.utils.handlers.file_formats import FileFormatsHandler

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("flattree.json")


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> FlattenerConfig:
    """
    Load flattener options from a JSON or YAML file.

    The file holds a single object, e.g. ``{"separator": "/", "omitEmpty": true}``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    cfg = FileFormatsHandler.load_file(path)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must contain an object, got {type(cfg).__name__}")

    logger.debug(f"Loaded flattener config from {path}")
    return FlattenerConfig.model_validate(cfg)
