"""
Template Configuration Value Type

Defines the immutable set of presentation options that control how a resume
is rendered with a given template (font, color scheme, layout, borders,
spacing, section ordering, ...).

Every option has two spellings:
- attribute name (snake_case), used in Python code: ``show_borders``
- wire key (camelCase), used in persisted JSON: ``showBorders``

Either spelling is accepted wherever a field is named by string.

Examples:
    >>> config = TemplateConfig(font="inter", color_scheme="default",
    ...                         layout_style="modern", show_borders=True)
    >>> updated = config.merge({"showBorders": False})
    >>> config.show_borders, updated.show_borders
    (True, False)
"""

from collections import abc
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from resumeforge.contexts.customization.exceptions import (
    InvalidConfigValueError,
    UnknownConfigFieldError,
)

FONT_WEIGHTS = ("light", "normal", "medium", "bold")
PAGE_MARGINS = ("narrow", "normal", "wide")
SIDEBAR_WIDTHS = ("narrow", "medium", "wide")
SIDEBAR_POSITIONS = ("left", "right")
DIVIDER_STYLES = ("solid", "dashed", "dotted")
ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class FieldSpec:
    """
    Describes one template option.

    Attributes:
        name: Python attribute name
        wire_key: Key used in persisted JSON
        kind: Value kind ("str", "bool", "percent", "choice", "str_list", "alignment")
        choices: Accepted values for "choice" fields
        required: Whether None is rejected
    """

    name: str
    wire_key: str
    kind: str
    choices: Tuple[str, ...] = ()
    required: bool = False


FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec("font", "font", "str", required=True),
    FieldSpec("color_scheme", "colorScheme", "str", required=True),
    FieldSpec("layout_style", "layoutStyle", "str", required=True),
    FieldSpec("show_borders", "showBorders", "bool", required=True),
    FieldSpec("spacing_preset", "spacingPreset", "str"),
    FieldSpec("custom_color", "customColor", "str"),
    FieldSpec("font_size_heading", "fontSizeHeading", "percent"),
    FieldSpec("font_size_body", "fontSizeBody", "percent"),
    FieldSpec("font_weight", "fontWeight", "choice", FONT_WEIGHTS),
    FieldSpec("spacing_scale", "spacingScale", "percent"),
    FieldSpec("spacing_sections", "spacingSections", "percent"),
    FieldSpec("spacing_elements", "spacingElements", "percent"),
    FieldSpec("page_margin", "pageMargin", "choice", PAGE_MARGINS),
    FieldSpec("use_columns", "useColumns", "bool"),
    FieldSpec("section_order", "sectionOrder", "str_list"),
    FieldSpec("section_alignment", "sectionAlignment", "alignment"),
    FieldSpec("use_accent_sidebar", "useAccentSidebar", "bool"),
    FieldSpec("sidebar_width", "sidebarWidth", "choice", SIDEBAR_WIDTHS),
    FieldSpec("sidebar_position", "sidebarPosition", "choice", SIDEBAR_POSITIONS),
    FieldSpec("use_icons", "useIcons", "bool"),
    FieldSpec("primary_sections", "primarySections", "str_list"),
    FieldSpec("secondary_sections", "secondarySections", "str_list"),
    FieldSpec("use_dividers", "useDividers", "bool"),
    FieldSpec("divider_style", "dividerStyle", "choice", DIVIDER_STYLES),
)

FIELDS_BY_NAME: Dict[str, FieldSpec] = {spec.name: spec for spec in FIELD_SPECS}
FIELDS_BY_WIRE_KEY: Dict[str, FieldSpec] = {spec.wire_key: spec for spec in FIELD_SPECS}
WIRE_KEYS = tuple(FIELDS_BY_WIRE_KEY)


def resolve_field_name(key: str) -> str:
    """
    Resolve a field name given in either spelling to its attribute name.

    Raises:
        UnknownConfigFieldError: If key is not a template option
    """
    if key in FIELDS_BY_NAME:
        return key
    if key in FIELDS_BY_WIRE_KEY:
        return FIELDS_BY_WIRE_KEY[key].name
    raise UnknownConfigFieldError(key, WIRE_KEYS)


def is_known_field(key: str) -> bool:
    """Check whether key names a template option (either spelling)."""
    return key in FIELDS_BY_NAME or key in FIELDS_BY_WIRE_KEY


class SectionAlignment(abc.Mapping):
    """
    Read-only section -> alignment mapping.

    Stored as a sorted tuple of (section, alignment) pairs, so it hashes,
    compares equal to any mapping with the same items, and copies as itself.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Optional[str]]):
        object.__setattr__(self, "_items", tuple(sorted(items.items())))

    def __getitem__(self, section: str) -> Optional[str]:
        for key, alignment in self._items:
            if key == section:
                return alignment
        raise KeyError(section)

    def __iter__(self):
        return (key for key, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __hash__(self) -> int:
        return hash(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, SectionAlignment):
            return self._items == other._items
        return abc.Mapping.__eq__(self, other)

    def __copy__(self) -> "SectionAlignment":
        return self

    def __deepcopy__(self, memo) -> "SectionAlignment":
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._items)!r})"


def validate_field_value(spec: FieldSpec, value: Any) -> Any:
    """
    Check a value against its field spec and return its frozen form.

    Lists become tuples and mappings become SectionAlignment so that no
    recorded snapshot can change after the fact.

    Raises:
        InvalidConfigValueError: If the value does not fit the field
    """
    if value is None:
        if spec.required:
            raise InvalidConfigValueError(spec.wire_key, value, "a value (field is required)")
        return None

    if spec.kind == "str":
        if not isinstance(value, str):
            raise InvalidConfigValueError(spec.wire_key, value, "string")
        return value

    if spec.kind == "bool":
        if not isinstance(value, bool):
            raise InvalidConfigValueError(spec.wire_key, value, "boolean")
        return value

    if spec.kind == "percent":
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise InvalidConfigValueError(spec.wire_key, value, "positive number (percent)")
        return value

    if spec.kind == "choice":
        if value not in spec.choices:
            raise InvalidConfigValueError(spec.wire_key, value, f"one of {list(spec.choices)}")
        return value

    if spec.kind == "str_list":
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise InvalidConfigValueError(spec.wire_key, value, "list of strings")
        if not all(isinstance(item, str) for item in value):
            raise InvalidConfigValueError(spec.wire_key, value, "list of strings")
        return tuple(value)

    if spec.kind == "alignment":
        if not isinstance(value, Mapping):
            raise InvalidConfigValueError(spec.wire_key, value, "mapping of section -> alignment")
        for section, alignment in value.items():
            if not isinstance(section, str) or (
                alignment is not None and alignment not in ALIGNMENTS
            ):
                raise InvalidConfigValueError(
                    spec.wire_key, value, f"mapping of section -> one of {list(ALIGNMENTS)}"
                )
        return SectionAlignment(value)

    raise ValueError(f"Unknown field kind '{spec.kind}' for {spec.name}")


@dataclass(frozen=True)
class TemplateConfig:
    """
    Immutable presentation configuration for a resume template.

    Every mutation returns a new instance; see merge() and replace().
    Optional fields left as None are "unset" and omitted from to_dict().
    """

    font: str
    color_scheme: str
    layout_style: str
    show_borders: bool
    spacing_preset: Optional[str] = None
    custom_color: Optional[str] = None
    font_size_heading: Optional[float] = None
    font_size_body: Optional[float] = None
    font_weight: Optional[str] = None
    spacing_scale: Optional[float] = None
    spacing_sections: Optional[float] = None
    spacing_elements: Optional[float] = None
    page_margin: Optional[str] = None
    use_columns: Optional[bool] = None
    section_order: Optional[Tuple[str, ...]] = None
    section_alignment: Optional[SectionAlignment] = None
    use_accent_sidebar: Optional[bool] = None
    sidebar_width: Optional[str] = None
    sidebar_position: Optional[str] = None
    use_icons: Optional[bool] = None
    primary_sections: Optional[Tuple[str, ...]] = None
    secondary_sections: Optional[Tuple[str, ...]] = None
    use_dividers: Optional[bool] = None
    divider_style: Optional[str] = None

    def __post_init__(self):
        for spec in FIELD_SPECS:
            frozen = validate_field_value(spec, getattr(self, spec.name))
            object.__setattr__(self, spec.name, frozen)

    def get(self, key: str) -> Any:
        """Get a field value by attribute name or wire key."""
        return getattr(self, resolve_field_name(key))

    def merge(self, changes: Mapping[str, Any]) -> "TemplateConfig":
        """
        Return a new config with the given fields replaced.

        Args:
            changes: Mapping of field name (either spelling) to new value

        Raises:
            UnknownConfigFieldError: If any key is not a template option
            InvalidConfigValueError: If any value does not fit its field
        """
        resolved = {resolve_field_name(key): value for key, value in changes.items()}
        return replace(self, **resolved)

    def replace(self, **changes: Any) -> "TemplateConfig":
        """Keyword form of merge()."""
        return self.merge(changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to plain wire-keyed data (unset fields omitted).

        Returns:
            Dict suitable for JSON encoding
        """
        data = {}
        for spec in FIELD_SPECS:
            value = getattr(self, spec.name)
            if value is None:
                continue
            if spec.kind == "str_list":
                value = list(value)
            elif spec.kind == "alignment":
                value = dict(value)
            data[spec.wire_key] = value
        return data

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        base: Optional["TemplateConfig"] = None,
        strict: bool = True,
    ) -> "TemplateConfig":
        """
        Build a config from (possibly partial) wire- or attribute-keyed data.

        Args:
            data: Field values to apply
            base: Config supplying every field missing from data. Without a base,
                  data must contain all required fields.
            strict: If False, keys that are not template options are dropped
                    instead of raising

        Returns:
            New TemplateConfig

        Raises:
            UnknownConfigFieldError: Unknown key with strict=True
            InvalidConfigValueError: Value does not fit its field
        """
        if not strict:
            data = {key: value for key, value in data.items() if is_known_field(key)}

        if base is not None:
            return base.merge(data)

        resolved = {resolve_field_name(key): value for key, value in data.items()}
        missing = [
            spec.wire_key for spec in FIELD_SPECS if spec.required and spec.name not in resolved
        ]
        if missing:
            raise InvalidConfigValueError(missing[0], None, "a value (field is required)")
        return cls(**resolved)


def unknown_keys(data: Mapping[str, Any]) -> Iterable[str]:
    """Return the keys of data that are not template options."""
    return [key for key in data if not is_known_field(key)]

