"""
Template Defaults and Spacing Preset Resolution

Per-template default configurations and the spacing preset lookup table are
configuration data stored as YAML and loaded with OmegaConf.

Examples:
    >>> config = get_default_config("modern-1")
    >>> compact = apply_spacing_preset(config, "compact")
    >>> compact.spacing_scale, compact.page_margin
    (85, 'narrow')
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumeforge.contexts.customization.config import TemplateConfig, resolve_field_name
from resumeforge.contexts.customization.exceptions import InvalidPresetTableError

load_dotenv()
DATA_PATH = Path(__file__).parent / "data"
TEMPLATE_DEFAULTS_PATH = Path(
    os.getenv("TEMPLATE_DEFAULTS_PATH", str(DATA_PATH / "template_defaults.yaml"))
)
SPACING_PRESETS_PATH = Path(
    os.getenv("SPACING_PRESETS_PATH", str(DATA_PATH / "spacing_presets.yaml"))
)

FALLBACK_TEMPLATE_KEY = "fallback"

# Fields every spacing preset must define (wire keys)
SPACING_PRESET_FIELDS = ("spacingScale", "spacingSections", "spacingElements", "pageMargin")


@lru_cache(maxsize=None)
def _load_yaml(config_path: Path) -> Dict[str, Any]:
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def load_template_defaults(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load template_defaults.yaml as a dict of template id -> wire-keyed config.

    Args:
        config_path: Optional path (defaults to TEMPLATE_DEFAULTS_PATH)

    Raises:
        ValueError: If the file has no fallback entry
    """
    if config_path is None:
        config_path = TEMPLATE_DEFAULTS_PATH

    defaults = _load_yaml(Path(config_path))
    if FALLBACK_TEMPLATE_KEY not in defaults:
        raise ValueError(f"Template defaults at {config_path} must define '{FALLBACK_TEMPLATE_KEY}'")
    return defaults


def load_spacing_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load spacing_presets.yaml and check that the table is total.

    Args:
        config_path: Optional path (defaults to SPACING_PRESETS_PATH)

    Returns:
        Dict mapping preset name to its derived spacing fields (wire keys)
        Example: {"compact": {"spacingScale": 85, ..., "pageMargin": "narrow"}}

    Raises:
        InvalidPresetTableError: If any preset is missing a spacing field or sets another field
    """
    if config_path is None:
        config_path = SPACING_PRESETS_PATH

    presets = _load_yaml(Path(config_path))

    for name, values in presets.items():
        missing = [key for key in SPACING_PRESET_FIELDS if key not in (values or {})]
        if missing:
            raise InvalidPresetTableError(
                f"Spacing preset '{name}' is missing fields: {', '.join(missing)}"
            )
        extra = [key for key in values if key not in SPACING_PRESET_FIELDS]
        if extra:
            raise InvalidPresetTableError(
                f"Spacing preset '{name}' sets non-spacing fields: {', '.join(extra)}"
            )

    return presets


def spacing_preset_names(config_path: Path = None) -> Tuple[str, ...]:
    """Names of all spacing presets with a derived-value entry."""
    return tuple(load_spacing_presets(config_path))


def get_default_config(template_id: str, config_path: Path = None) -> TemplateConfig:
    """
    Get the default configuration for a template.

    Templates without their own entry get the fallback configuration.

    Args:
        template_id: Template identifier (e.g., "modern-1")
        config_path: Optional path to template_defaults.yaml

    Returns:
        TemplateConfig for the template
    """
    defaults = load_template_defaults(config_path)
    values = defaults.get(template_id, defaults[FALLBACK_TEMPLATE_KEY])
    return TemplateConfig.from_dict(values)


def apply_spacing_preset(
    config: TemplateConfig, preset_name: str, config_path: Path = None
) -> TemplateConfig:
    """
    Apply a named spacing preset to a configuration.

    A known preset sets spacing_preset and every derived spacing field.
    An unknown name (e.g., "custom") only sets spacing_preset; every other field
    keeps its current value.

    Args:
        config: Configuration to start from
        preset_name: Preset name (e.g., "compact", "comfortable", "spacious")
        config_path: Optional path to spacing_presets.yaml

    Returns:
        New TemplateConfig

    Raises:
        InvalidConfigValueError: If preset_name is not a string
    """
    updated = config.merge({"spacing_preset": preset_name})
    presets = load_spacing_presets(config_path)

    preset = presets.get(updated.spacing_preset)
    if preset is None:
        return updated
    return updated.merge({resolve_field_name(key): value for key, value in preset.items()})
