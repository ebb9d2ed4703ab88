"""Unit tests for the TemplateConfig value type."""

import dataclasses

import pytest

from resumeforge.contexts.customization.config import TemplateConfig, resolve_field_name
from resumeforge.contexts.customization.exceptions import (
    InvalidConfigValueError,
    UnknownConfigFieldError,
)


def make_config(**overrides):
    """Build a modern config with optional overrides."""
    values = {
        "font": "inter",
        "color_scheme": "default",
        "layout_style": "modern",
        "show_borders": True,
        "spacing_preset": "comfortable",
    }
    values.update(overrides)
    return TemplateConfig(**values)


@pytest.mark.unit
def test_resolve_field_name_accepts_both_spellings():
    """Test both field spellings resolve to the attribute name."""
    assert resolve_field_name("showBorders") == "show_borders"
    assert resolve_field_name("show_borders") == "show_borders"


@pytest.mark.unit
def test_resolve_field_name_unknown():
    """Test an unknown field name raises with the known fields."""
    with pytest.raises(UnknownConfigFieldError) as exc_info:
        resolve_field_name("fontColour")
    assert exc_info.value.key == "fontColour"
    assert "showBorders" in exc_info.value.known_fields


@pytest.mark.unit
def test_merge_returns_new_instance():
    """Test merge returns a new config and leaves the original alone."""
    config = make_config()
    updated = config.merge({"showBorders": False, "font": "roboto"})

    assert updated is not config
    assert updated.show_borders is False
    assert updated.font == "roboto"
    # Original unchanged
    assert config.show_borders is True
    assert config.font == "inter"


@pytest.mark.unit
def test_config_is_frozen():
    """Test config attributes cannot be assigned."""
    config = make_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.font = "roboto"


@pytest.mark.unit
def test_list_and_mapping_fields_are_frozen():
    """Test list and mapping fields are copied and read-only."""
    order = ["summary", "experience"]
    alignment = {"summary": "center"}
    config = make_config(section_order=order, section_alignment=alignment)

    # Mutating the caller's objects does not leak into the snapshot
    order.append("skills")
    alignment["summary"] = "left"

    assert config.section_order == ("summary", "experience")
    assert config.section_alignment["summary"] == "center"
    with pytest.raises(TypeError):
        config.section_alignment["summary"] = "right"


@pytest.mark.unit
def test_equality_by_value():
    """Test configs compare by value."""
    assert make_config(section_alignment={"skills": "left"}) == make_config(
        section_alignment={"skills": "left"}
    )
    assert make_config() != make_config(font="lato")


@pytest.mark.unit
def test_section_alignment_ignores_insertion_order():
    """Test alignment maps with the same items compare and hash alike."""
    first = make_config(section_alignment={"summary": "center", "skills": "left"})
    second = make_config(section_alignment={"skills": "left", "summary": "center"})

    assert first == second
    assert hash(first) == hash(second)
    assert first.section_alignment == {"summary": "center", "skills": "left"}
    assert len({first, second}) == 1
    with pytest.raises(KeyError):
        first.section_alignment["education"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "key,value",
    [
        ("showBorders", "yes"),
        ("font", 12),
        ("fontWeight", "heavy"),
        ("pageMargin", "huge"),
        ("spacingScale", -5),
        ("spacingScale", True),
        ("sectionOrder", "summary"),
        ("sectionAlignment", {"summary": "justify"}),
    ],
)
def test_invalid_values_rejected(key, value):
    """Test values of the wrong type or range are rejected."""
    with pytest.raises(InvalidConfigValueError):
        make_config().merge({key: value})


@pytest.mark.unit
def test_required_field_cannot_be_cleared():
    """Test a required field cannot be set to None."""
    with pytest.raises(InvalidConfigValueError):
        make_config().merge({"font": None})


@pytest.mark.unit
def test_to_dict_uses_wire_keys_and_omits_unset():
    """Test to_dict emits wire keys and skips unset fields."""
    config = make_config(section_order=["summary"], section_alignment={"summary": "left"})
    data = config.to_dict()

    assert data == {
        "font": "inter",
        "colorScheme": "default",
        "layoutStyle": "modern",
        "showBorders": True,
        "spacingPreset": "comfortable",
        "sectionOrder": ["summary"],
        "sectionAlignment": {"summary": "left"},
    }
    assert isinstance(data["sectionOrder"], list)
    assert isinstance(data["sectionAlignment"], dict)


@pytest.mark.unit
def test_from_dict_overlays_base():
    """Test from_dict fills missing fields from the base."""
    base = make_config(font_size_body=100)
    config = TemplateConfig.from_dict({"font": "lato"}, base=base)

    assert config.font == "lato"
    assert config.font_size_body == 100
    assert config.spacing_preset == "comfortable"


@pytest.mark.unit
def test_from_dict_without_base_requires_required_fields():
    """Test from_dict without a base needs every required field."""
    with pytest.raises(InvalidConfigValueError):
        TemplateConfig.from_dict({"font": "inter"})


@pytest.mark.unit
def test_from_dict_strict_and_lenient_unknown_keys():
    """Test strict from_dict rejects unknown keys and lenient drops them."""
    base = make_config()
    data = {"font": "lato", "legacyTheme": "dark"}

    with pytest.raises(UnknownConfigFieldError):
        TemplateConfig.from_dict(data, base=base)

    config = TemplateConfig.from_dict(data, base=base, strict=False)
    assert config.font == "lato"
