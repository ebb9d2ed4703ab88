"""Unit tests for style class derivation and the template catalog."""

import pytest

from resumeforge.contexts.customization.catalog import (
    get_template_meta,
    get_template_price,
    is_template_premium,
    list_templates,
    subscription_price,
    template_categories,
)
from resumeforge.contexts.customization.defaults import get_default_config
from resumeforge.contexts.customization.styling import template_classes


@pytest.mark.unit
def test_classes_for_modern_defaults():
    """Test style classes derived from modern-1 defaults."""
    classes = template_classes(get_default_config("modern-1"))

    assert classes.font == "font-inter"
    assert classes.primary == "bg-blue-600"
    assert classes.font_size_heading == "text-2xl md:text-3xl"
    assert classes.font_size_body == "text-base"
    assert classes.font_weight == "font-normal"
    assert classes.spacing == "space-y-4"
    assert classes.margin == "p-5 md:p-8"


@pytest.mark.unit
def test_classes_size_buckets():
    """Test font size and spacing percentages map to buckets."""
    config = get_default_config("creative-1").merge(
        {"fontSizeHeading": 130, "fontSizeBody": 75, "spacingScale": 85, "fontWeight": "bold"}
    )
    classes = template_classes(config)

    assert classes.font == "font-playfair"
    assert classes.font_size_heading == "text-3xl md:text-5xl"
    assert classes.font_size_body == "text-xs md:text-sm"
    assert classes.spacing == "space-y-2"
    assert classes.font_weight == "font-bold"
    assert classes.margin == "p-3 md:p-5"


@pytest.mark.unit
def test_custom_color_scheme():
    """Test the custom color scheme uses the custom color."""
    config = get_default_config("modern-1").merge(
        {"colorScheme": "custom", "customColor": "#123456"}
    )
    classes = template_classes(config)

    assert classes.primary == "bg-[#123456]"
    assert classes.secondary == "bg-gray-50"


@pytest.mark.unit
def test_unknown_font_and_scheme_fall_back():
    """Test unknown fonts and schemes fall back to defaults."""
    config = get_default_config("modern-1").merge({"font": "comic", "colorScheme": "neon"})
    classes = template_classes(config)

    assert classes.font == "font-inter"
    assert classes.primary == "bg-blue-600"


@pytest.mark.unit
def test_catalog_lookup():
    """Test looking up template metadata by id."""
    meta = get_template_meta("executive-1")

    assert meta.name == "Executive Elite"
    assert meta.premium is True
    assert meta.price == 599
    assert meta.component_key == "executive"
    assert meta.preview == "/images/templates/executive-1.svg"


@pytest.mark.unit
def test_catalog_pricing():
    """Test premium flags and prices from the catalog."""
    assert is_template_premium("elegant-2")
    assert not is_template_premium("modern-1")
    assert not is_template_premium("missing")
    assert get_template_price("creative-premium-3") == 699
    assert get_template_price("missing") == 0
    assert subscription_price() == 999


@pytest.mark.unit
def test_catalog_listing():
    """Test listing templates and categories."""
    modern = list_templates("modern")

    assert [t.id for t in modern] == ["modern-1", "modern-2", "modern-3"]
    assert len(list_templates()) == 29
    assert template_categories()[:3] == ["modern", "professional", "creative"]
