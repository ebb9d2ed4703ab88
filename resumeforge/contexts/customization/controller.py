"""
Customization Controller

The single entry point for editing a resume's template configuration.
Wraps ConfigHistory with the domain mutations (field update, spacing presets,
bulk update, reset to defaults), undo/redo, and the load/save round trips to
a ConfigStore.

Usage:
    controller = CustomizationController(store, "modern-1", resume_id=42)
    await controller.load()

    controller.update_field("showBorders", False)
    controller.update_field("spacingPreset", "compact")
    controller.undo()

    saved = await controller.save()
"""

from typing import Any, Mapping, Optional

from resumeforge.contexts.customization.config import (
    TemplateConfig,
    resolve_field_name,
    unknown_keys,
)
from resumeforge.contexts.customization.defaults import apply_spacing_preset, get_default_config
from resumeforge.contexts.customization.exceptions import (
    InvalidConfigValueError,
    PersistenceFailure,
)
from resumeforge.contexts.customization.history import ConfigHistory
from resumeforge.contexts.customization.logger import (
    _log_debug,
    _log_warning,
    log_load_result,
    log_save_result,
)
from resumeforge.contexts.customization.persistence import ConfigStore, ResumeId
from resumeforge.contexts.customization.styling import StyleClasses, template_classes
from resumeforge.utils.event_logging import log_customization_event


class CustomizationController:
    """
    Edits the template configuration of one active resume.

    History is rebuilt from the template defaults whenever the active template
    or resume changes. Only the snapshot at the cursor is ever persisted, and
    only on an explicit save().

    Attributes:
        store: Persistence adapter
        template_id: Active template identifier
        resume_id: Active resume (None for an unsaved resume)
        history: Snapshot history
        is_saving: True while at least one save round trip is in flight
    """

    def __init__(
        self,
        store: ConfigStore,
        template_id: str,
        resume_id: Optional[ResumeId] = None,
        source: str = "controller",
    ):
        self.store = store
        self.template_id = template_id
        self.resume_id = resume_id
        self.source = source
        self.history = ConfigHistory(get_default_config(template_id))
        self._saves_in_flight = 0
        # Bumped on every load and identifier change; a load only applies its
        # result if the generation is unchanged when the fetch returns.
        self._load_generation = 0

    @property
    def config(self) -> TemplateConfig:
        return self.history.current()

    @property
    def is_saving(self) -> bool:
        return self._saves_in_flight > 0

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def classes(self) -> StyleClasses:
        return template_classes(self.config)

    # --- Mutations (each records exactly one snapshot) ---

    def update_field(self, key: str, value: Any) -> TemplateConfig:
        """
        Change a single option.

        Setting the spacing preset expands it into all derived spacing fields.

        Args:
            key: Field name, attribute or wire spelling (e.g., "showBorders")
            value: New value

        Returns:
            The new active config

        Raises:
            UnknownConfigFieldError: If key is not a template option
            InvalidConfigValueError: If value does not fit the field
        """
        name = resolve_field_name(key)
        if name == "spacing_preset":
            updated = apply_spacing_preset(self.config, value)
        else:
            updated = self.config.merge({name: value})

        self.history.record(updated)
        return updated

    def bulk_update(self, changes: Mapping[str, Any]) -> TemplateConfig:
        """
        Change several options as a single undo step.

        Values are merged as given; a spacingPreset key is stored without
        expanding the preset. An empty mapping records nothing.
        """
        if not changes:
            return self.config

        updated = self.config.merge(changes)
        self.history.record(updated)
        return updated

    def reset_to_defaults(self) -> TemplateConfig:
        """Record the active template's default config (undoable)."""
        defaults = get_default_config(self.template_id)
        self.history.record(defaults)
        return defaults

    def undo(self) -> TemplateConfig:
        self.history.undo()
        return self.config

    def redo(self) -> TemplateConfig:
        self.history.redo()
        return self.config

    # --- Persistence round trips ---

    async def save(self) -> bool:
        """
        Persist the current snapshot.

        Failures are logged and reported as False; in-memory config and history
        are left exactly as they were. No retry is attempted.

        Returns:
            True if the store accepted the config
        """
        if self.resume_id is None:
            _log_warning("Cannot save configuration: no active resume")
            return False

        resume_id = self.resume_id
        snapshot = self.config

        self._saves_in_flight += 1
        try:
            await self.store.store_config(resume_id, snapshot.to_dict())
        except PersistenceFailure as e:
            log_save_result(resume_id, success=False, error=e)
            log_customization_event(
                "config_save_failed",
                resume_id,
                self.source,
                template_id=self.template_id,
                error=str(e.original_error or e.message),
            )
            return False
        finally:
            self._saves_in_flight -= 1

        log_save_result(resume_id, success=True)
        log_customization_event(
            "config_saved", resume_id, self.source, template_id=self.template_id
        )
        return True

    async def load(self, resume_id: Optional[ResumeId] = None) -> TemplateConfig:
        """
        Restore the saved config for a resume and restart history from it.

        The saved config is merged over the template defaults so fields it lacks
        fall back to defaults. A missing config, a persistence failure or an
        unreadable saved config all resolve to the plain defaults; failures are
        logged, never raised.

        If another load or identifier change happens while the fetch is in
        flight, this load's result is discarded.

        Args:
            resume_id: Resume to load (defaults to the active resume)

        Returns:
            The active config after the load
        """
        if resume_id is not None:
            self.resume_id = resume_id
        resume_id = self.resume_id
        template_id = self.template_id

        self._load_generation += 1
        generation = self._load_generation

        defaults = get_default_config(template_id)
        if resume_id is None:
            self.history.reset(defaults)
            return self.config

        error = None
        try:
            saved = await self.store.fetch_config(resume_id)
        except PersistenceFailure as e:
            saved, error = None, e

        if generation != self._load_generation:
            log_load_result(resume_id, template_id, "superseded")
            return self.config

        restored = defaults
        if saved and not isinstance(saved, Mapping):
            error = InvalidConfigValueError("templateConfig", saved, "mapping of option -> value")
        elif saved:
            dropped = unknown_keys(saved)
            if dropped:
                _log_debug(f"Ignoring unknown saved keys for resume {resume_id}: {dropped}")
            try:
                restored = TemplateConfig.from_dict(saved, base=defaults, strict=False)
            except InvalidConfigValueError as e:
                error = e

        if error is not None:
            outcome = "failed"
            restored = defaults
        elif saved:
            outcome = "restored"
        else:
            outcome = "not_found"

        log_load_result(resume_id, template_id, outcome, error)
        if outcome == "restored":
            log_customization_event(
                "config_loaded", resume_id, self.source, template_id=template_id
            )

        self.history.reset(restored)
        return self.config

    async def on_identifier_changed(
        self, template_id: str, resume_id: Optional[ResumeId] = None
    ) -> TemplateConfig:
        """
        Switch the active template and/or resume.

        History restarts from the new template's defaults immediately, then the
        saved config (if any) is loaded. The latest identifier change always
        wins over loads still in flight for earlier identifiers.
        """
        self.template_id = template_id
        self.resume_id = resume_id
        self._load_generation += 1
        self.history.reset(get_default_config(template_id))

        if resume_id is not None:
            return await self.load(resume_id)
        return self.config
