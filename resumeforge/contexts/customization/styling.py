"""
Presentation option catalogs and style class derivation.

Maps a TemplateConfig to the concrete utility classes the resume renderer
applies (font family, color scheme, size and spacing buckets, page margin).
"""

from dataclasses import dataclass
from typing import Dict, List

from resumeforge.contexts.customization.config import TemplateConfig

FONT_OPTIONS: Dict[str, Dict[str, str]] = {
    "inter": {"name": "Inter", "class_name": "font-inter"},
    "poppins": {"name": "Poppins", "class_name": "font-poppins"},
    "roboto": {"name": "Roboto", "class_name": "font-roboto"},
    "opensans": {"name": "Open Sans", "class_name": "font-opensans"},
    "montserrat": {"name": "Montserrat", "class_name": "font-montserrat"},
    "lato": {"name": "Lato", "class_name": "font-lato"},
    "playfair": {"name": "Playfair Display", "class_name": "font-playfair"},
    "merriweather": {"name": "Merriweather", "class_name": "font-merriweather"},
    "oswald": {"name": "Oswald", "class_name": "font-oswald"},
    "raleway": {"name": "Raleway", "class_name": "font-raleway"},
    "quicksand": {"name": "Quicksand", "class_name": "font-quicksand"},
    "sourcesans": {"name": "Source Sans Pro", "class_name": "font-sourcesans"},
}

# First entry is the fallback for unknown scheme ids
COLOR_SCHEMES: Dict[str, Dict[str, str]] = {
    "default": {"name": "Classic Blue", "primary": "bg-blue-600", "secondary": "bg-blue-100", "text": "text-blue-900", "accent": "border-blue-300"},
    "professional": {"name": "Professional Gray", "primary": "bg-gray-700", "secondary": "bg-gray-100", "text": "text-gray-900", "accent": "border-gray-300"},
    "modern": {"name": "Modern Teal", "primary": "bg-teal-600", "secondary": "bg-teal-50", "text": "text-teal-900", "accent": "border-teal-300"},
    "creative": {"name": "Creative Purple", "primary": "bg-purple-600", "secondary": "bg-purple-50", "text": "text-purple-900", "accent": "border-purple-300"},
    "elegant": {"name": "Elegant Emerald", "primary": "bg-emerald-600", "secondary": "bg-emerald-50", "text": "text-emerald-900", "accent": "border-emerald-300"},
    "bold": {"name": "Bold Red", "primary": "bg-red-600", "secondary": "bg-red-50", "text": "text-red-900", "accent": "border-red-300"},
    "minimal": {"name": "Minimal Black", "primary": "bg-black", "secondary": "bg-gray-50", "text": "text-gray-900", "accent": "border-gray-300"},
    "warm": {"name": "Warm Orange", "primary": "bg-orange-500", "secondary": "bg-orange-50", "text": "text-orange-900", "accent": "border-orange-300"},
    "forest": {"name": "Forest Green", "primary": "bg-green-700", "secondary": "bg-green-50", "text": "text-green-900", "accent": "border-green-300"},
    "ocean": {"name": "Ocean Blue", "primary": "bg-blue-400", "secondary": "bg-blue-50", "text": "text-blue-900", "accent": "border-blue-200"},
    "sunset": {"name": "Sunset", "primary": "bg-pink-500", "secondary": "bg-orange-50", "text": "text-pink-900", "accent": "border-pink-300"},
    "monochrome": {"name": "Monochrome", "primary": "bg-gray-800", "secondary": "bg-gray-100", "text": "text-gray-900", "accent": "border-gray-300"},
}

LAYOUT_STYLES: Dict[str, str] = {
    "classic": "Traditional resume layout with section headers",
    "modern": "Clean, minimalist design with ample whitespace",
    "compact": "Maximizes space to fit more content",
    "creative": "Unique design for creative professionals",
    "executive": "Sophisticated design for senior positions",
    "technical": "Optimized for technical roles and skills",
    "chronological": "Emphasizes work history in chronological order",
    "functional": "Focuses on skills and abilities rather than timeline",
    "hybrid": "Combines chronological and functional approaches",
    "academic": "Formatted for academic and research positions",
}

# Spacing options offered in the editor; "custom" has no derived values
SPACING_OPTIONS: List[Dict[str, object]] = [
    {"id": "compact", "name": "Compact", "description": "Minimized spacing to fit more content", "premium": False},
    {"id": "comfortable", "name": "Comfortable", "description": "Balanced spacing for readability", "premium": False},
    {"id": "spacious", "name": "Spacious", "description": "More whitespace for elegant appearance", "premium": True},
    {"id": "conservative", "name": "Conservative", "description": "Traditional spacing for formal contexts", "premium": True},
    {"id": "modern", "name": "Modern", "description": "Contemporary spacing with emphasis on headers", "premium": True},
    {"id": "custom", "name": "Custom", "description": "Your personalized spacing settings", "premium": True},
]

FONT_WEIGHT_CLASSES = {"light": "font-light", "medium": "font-medium", "bold": "font-bold"}
MARGIN_CLASSES = {"narrow": "p-3 md:p-5", "wide": "p-8 md:p-12"}

# (upper bound percent, class) buckets, checked in order
HEADING_SIZE_BUCKETS = [
    (80, "text-lg md:text-xl"),
    (90, "text-xl md:text-2xl"),
    (110, "text-2xl md:text-3xl"),
    (120, "text-3xl md:text-4xl"),
]
BODY_SIZE_BUCKETS = [(80, "text-xs md:text-sm"), (90, "text-sm"), (110, "text-base"), (120, "text-lg")]
SPACING_BUCKETS = [(80, "space-y-1"), (90, "space-y-2"), (110, "space-y-4"), (120, "space-y-6")]


@dataclass(frozen=True)
class StyleClasses:
    """Concrete style classes derived from a TemplateConfig."""

    font: str
    primary: str
    secondary: str
    text: str
    accent: str
    font_size_heading: str
    font_size_body: str
    font_weight: str
    spacing: str
    margin: str


def _bucket(percentage: float, buckets: list, largest: str) -> str:
    for upper, class_name in buckets:
        if percentage <= upper:
            return class_name
    return largest


def template_classes(config: TemplateConfig) -> StyleClasses:
    """
    Derive the style classes for a configuration.

    Unset size/spacing fields count as 100%. A "custom" color scheme with a
    custom_color uses that color as the primary background.
    """
    font = FONT_OPTIONS.get(config.font, FONT_OPTIONS["inter"])["class_name"]
    scheme = COLOR_SCHEMES.get(config.color_scheme, COLOR_SCHEMES["default"])

    primary, secondary, text, accent = (
        scheme["primary"],
        scheme["secondary"],
        scheme["text"],
        scheme["accent"],
    )
    if config.color_scheme == "custom" and config.custom_color:
        primary = f"bg-[{config.custom_color}]"
        secondary, text, accent = "bg-gray-50", "text-gray-900", "border-gray-300"

    return StyleClasses(
        font=font,
        primary=primary,
        secondary=secondary,
        text=text,
        accent=accent,
        font_size_heading=_bucket(
            config.font_size_heading or 100, HEADING_SIZE_BUCKETS, "text-3xl md:text-5xl"
        ),
        font_size_body=_bucket(config.font_size_body or 100, BODY_SIZE_BUCKETS, "text-xl"),
        font_weight=FONT_WEIGHT_CLASSES.get(config.font_weight, "font-normal"),
        spacing=_bucket(config.spacing_scale or 100, SPACING_BUCKETS, "space-y-8"),
        margin=MARGIN_CLASSES.get(config.page_margin, "p-5 md:p-8"),
    )
