"""
Template catalog.

Framework-agnostic metadata for every resume template: category, pricing,
and the renderer component it uses. Loaded from templates.yaml.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
TEMPLATE_CATALOG_PATH = Path(
    os.getenv("TEMPLATE_CATALOG_PATH", str(Path(__file__).parent / "data" / "templates.yaml"))
)


@dataclass(frozen=True)
class TemplateMeta:
    """
    Catalog entry for one template.

    Attributes:
        id: Stable template identifier (e.g., "modern-1")
        name: Display name
        description: One-line description
        category: Category (e.g., "modern", "executive")
        premium: Whether the template must be purchased
        price: Price in INR (rupees); 0 for free templates
        tags: Free-form tags
        component_key: Renderer component family ("base", "modern", "creative", ...)
    """

    id: str
    name: str
    description: str
    category: str
    premium: bool
    price: int
    component_key: str
    tags: tuple = field(default_factory=tuple)

    @property
    def preview(self) -> str:
        return f"/images/templates/{self.id}.svg"


@lru_cache(maxsize=None)
def _load_catalog(config_path: Path) -> Dict[str, object]:
    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    templates = {}
    for entry in raw["templates"]:
        meta = TemplateMeta(
            id=entry["id"],
            name=entry["name"],
            description=entry["description"],
            category=entry["category"],
            premium=entry["premium"],
            price=entry["price"],
            component_key=entry["componentKey"],
            tags=tuple(entry.get("tags", [])),
        )
        templates[meta.id] = meta
    return {"templates": templates, "subscription_price": raw["subscription_price_rupees"]}


def load_catalog(config_path: Path = None) -> Dict[str, TemplateMeta]:
    """Load the template catalog as an ordered dict of id -> TemplateMeta."""
    if config_path is None:
        config_path = TEMPLATE_CATALOG_PATH
    return _load_catalog(Path(config_path))["templates"]


def subscription_price(config_path: Path = None) -> int:
    """Price of the all-templates subscription in INR."""
    if config_path is None:
        config_path = TEMPLATE_CATALOG_PATH
    return _load_catalog(Path(config_path))["subscription_price"]


def get_template_meta(template_id: str) -> Optional[TemplateMeta]:
    return load_catalog().get(template_id)


def is_template_premium(template_id: str) -> bool:
    """Unknown templates are treated as free."""
    meta = get_template_meta(template_id)
    return meta.premium if meta else False


def get_template_price(template_id: str) -> int:
    """Price in INR; 0 for free or unknown templates."""
    meta = get_template_meta(template_id)
    return meta.price if meta else 0


def list_templates(category: Optional[str] = None) -> List[TemplateMeta]:
    """List catalog entries in catalog order, optionally filtered by category."""
    templates = list(load_catalog().values())
    if category:
        templates = [t for t in templates if t.category == category]
    return templates


def template_categories() -> List[str]:
    """Distinct categories in first-seen order."""
    return list(dict.fromkeys(t.category for t in load_catalog().values()))
