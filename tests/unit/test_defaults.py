"""Unit tests for template defaults and spacing presets."""

import copy

import pytest

from resumeforge.contexts.customization.defaults import (
    SPACING_PRESET_FIELDS,
    apply_spacing_preset,
    get_default_config,
    load_spacing_presets,
    spacing_preset_names,
)
from resumeforge.contexts.customization.exceptions import (
    InvalidConfigValueError,
    InvalidPresetTableError,
)


@pytest.mark.unit
def test_modern_1_defaults():
    """Test modern-1 default values."""
    config = get_default_config("modern-1")

    assert config.font == "inter"
    assert config.color_scheme == "default"
    assert config.show_borders is True
    assert config.spacing_preset == "comfortable"


@pytest.mark.unit
def test_templates_have_distinct_defaults():
    """Test each template ships its own defaults."""
    ids = [
        "modern-1",
        "executive-1",
        "creative-1",
        "technical-1",
        "academic-1",
        "minimal-1",
        "elegant-1",
        "professional-1",
    ]
    configs = [get_default_config(template_id) for template_id in ids]

    assert len(set(repr(c.to_dict()) for c in configs)) == len(ids)
    assert get_default_config("executive-1").font == "montserrat"
    assert get_default_config("professional-1").primary_sections == ("summary", "experience")


@pytest.mark.unit
def test_unknown_template_uses_fallback():
    """Test an unknown template id gets the fallback defaults."""
    config = get_default_config("does-not-exist")

    assert config.layout_style == "classic"
    assert config.section_order == ("summary", "experience", "education", "skills")


@pytest.mark.unit
def test_default_config_is_equal_each_call():
    """Test repeated default lookups return equal configs."""
    assert get_default_config("creative-1") == get_default_config("creative-1")


@pytest.mark.unit
@pytest.mark.parametrize("template_id", ["fallback", "elegant-1", "professional-1"])
def test_defaults_with_section_alignment_hash_and_copy(template_id):
    """Test defaults carrying sectionAlignment can be hashed and deep-copied."""
    config = get_default_config(template_id)

    assert config.section_alignment
    assert hash(config) == hash(get_default_config(template_id))
    assert copy.deepcopy(config) == config
    assert {config: template_id}[copy.deepcopy(config)] == template_id


@pytest.mark.unit
def test_preset_table_is_total():
    """Test every preset sets every derived spacing field."""
    presets = load_spacing_presets()

    assert set(spacing_preset_names()) == {
        "compact",
        "comfortable",
        "spacious",
        "conservative",
        "modern",
    }
    for values in presets.values():
        assert set(values) == set(SPACING_PRESET_FIELDS)


@pytest.mark.unit
@pytest.mark.parametrize(
    "preset,scale,sections,elements,margin",
    [
        ("compact", 85, 80, 85, "narrow"),
        ("comfortable", 100, 100, 100, "normal"),
        ("spacious", 115, 120, 110, "normal"),
        ("conservative", 95, 100, 90, "wide"),
        ("modern", 105, 110, 95, "narrow"),
    ],
)
def test_apply_known_preset(preset, scale, sections, elements, margin):
    """Test applying a known preset sets its spacing values."""
    config = apply_spacing_preset(get_default_config("modern-1"), preset)

    assert config.spacing_preset == preset
    assert config.spacing_scale == scale
    assert config.spacing_sections == sections
    assert config.spacing_elements == elements
    assert config.page_margin == margin


@pytest.mark.unit
def test_apply_unknown_preset_leaves_other_fields():
    """Test an unknown preset name only sets spacing_preset."""
    base = apply_spacing_preset(get_default_config("modern-1"), "compact")
    config = apply_spacing_preset(base, "custom")

    assert config.spacing_preset == "custom"
    assert config.merge({"spacingPreset": "compact"}) == base


@pytest.mark.unit
@pytest.mark.parametrize("preset", [["compact"], {"name": "compact"}, 3])
def test_apply_non_string_preset_rejected(preset):
    """Test a non-string preset name fails field validation."""
    with pytest.raises(InvalidConfigValueError) as exc_info:
        apply_spacing_preset(get_default_config("modern-1"), preset)
    assert exc_info.value.key == "spacingPreset"


@pytest.mark.unit
def test_incomplete_preset_table_rejected(tmp_path):
    """Test a preset missing a spacing field is rejected."""
    path = tmp_path / "presets.yaml"
    path.write_text("tight:\n  spacingScale: 80\n  pageMargin: narrow\n")

    with pytest.raises(InvalidPresetTableError, match="spacingSections"):
        load_spacing_presets(path)


@pytest.mark.unit
def test_preset_setting_other_fields_rejected(tmp_path):
    """Test a preset setting a non-spacing field is rejected."""
    path = tmp_path / "presets.yaml"
    path.write_text(
        "loud:\n"
        "  spacingScale: 80\n"
        "  spacingSections: 80\n"
        "  spacingElements: 80\n"
        "  pageMargin: narrow\n"
        "  font: oswald\n"
    )

    with pytest.raises(InvalidPresetTableError, match="font"):
        load_spacing_presets(path)
