"""
Customization Context

Responsibilities:
- Represents a resume's presentation options as an immutable TemplateConfig
- Supplies per-template defaults and the spacing preset lookup table
- Tracks linear undo/redo history over config snapshots
- Loads and saves the config attached to a resume record

Owns: TemplateConfig, config history, config persistence
Never: Edits resume content or renders the resume
"""

from resumeforge.contexts.customization.config import TemplateConfig, resolve_field_name
from resumeforge.contexts.customization.controller import CustomizationController
from resumeforge.contexts.customization.defaults import (
    apply_spacing_preset,
    get_default_config,
    load_spacing_presets,
)
from resumeforge.contexts.customization.exceptions import (
    CustomizationError,
    EmptyHistoryError,
    InvalidConfigValueError,
    InvalidPresetTableError,
    PersistenceFailure,
    ResumeNotFoundError,
    UnknownConfigFieldError,
)
from resumeforge.contexts.customization.history import ConfigHistory
from resumeforge.contexts.customization.persistence import (
    ConfigStore,
    InMemoryConfigStore,
    SQLiteConfigStore,
)

__all__ = [
    # Value type and defaults
    "TemplateConfig",
    "resolve_field_name",
    "get_default_config",
    "apply_spacing_preset",
    "load_spacing_presets",
    # History and controller
    "ConfigHistory",
    "CustomizationController",
    # Persistence
    "ConfigStore",
    "InMemoryConfigStore",
    "SQLiteConfigStore",
    # Errors
    "CustomizationError",
    "EmptyHistoryError",
    "InvalidConfigValueError",
    "InvalidPresetTableError",
    "PersistenceFailure",
    "ResumeNotFoundError",
    "UnknownConfigFieldError",
]
