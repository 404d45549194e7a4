import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from flattree.models.config import FlattenerConfig

logger = logging.getLogger(__name__)


def _canonical_keys(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite camelCase aliases to field names so layers override each other predictably."""
    aliases = {info.alias: name for name, info in FlattenerConfig.model_fields.items() if info.alias}
    return {aliases.get(key, key): value for key, value in options.items()}


def _unknown_keys(options: Mapping[str, Any]) -> list:
    return sorted(key for key in options if key not in FlattenerConfig.model_fields)


def resolve_config(
        base: Optional[FlattenerConfig] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        presets: Iterable[Mapping[str, Any]] = (),
) -> FlattenerConfig:
    """
    Resolution Order: Defaults -> Base -> Presets -> Overrides

    Unknown keys in a preset are ignored with a warning, like unknown keys in
    a config file. Unknown per-call overrides raise ``ValueError``.
    """
    # 1. Start with the base config (or the defaults)
    final_config: Dict[str, Any] = base.model_dump() if base is not None else {}

    # 2. Apply presets sequentially
    presets = list(presets)
    for preset in presets:
        preset = _canonical_keys(preset)
        unknown = _unknown_keys(preset)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys in preset: {', '.join(unknown)}")
        final_config.update(preset)

    # 3. Apply per-call overrides (highest priority)
    if overrides:
        overrides = _canonical_keys(overrides)
        unknown = _unknown_keys(overrides)
        if unknown:
            raise ValueError(f"Unknown flattener option(s): {', '.join(unknown)}")
        final_config.update(overrides)

    if base is not None and not presets and not overrides:
        return base

    return FlattenerConfig.model_validate(final_config)
