"""Catégories de page parts — libellé, description, icône (ordre d'affichage)."""
from types import MappingProxyType
from typing import Mapping

from ..core.schemas import Category

_CATEGORIES = {
    Category.HEROES: {
        "label":       "Hero Sections",
        "description": "Large banner sections typically used at the top of pages",
        "icon":        "hero",
    },
    Category.FEATURES: {
        "label":       "Features",
        "description": "Sections showcasing features, services, or benefits",
        "icon":        "grid",
    },
    Category.TESTIMONIALS: {
        "label":       "Testimonials",
        "description": "Customer reviews and testimonials",
        "icon":        "quote",
    },
    Category.CTA: {
        "label":       "Call to Action",
        "description": "Sections designed to encourage user action",
        "icon":        "megaphone",
    },
    Category.STATS: {
        "label":       "Statistics",
        "description": "Number counters and statistics displays",
        "icon":        "chart",
    },
    Category.TEAMS: {
        "label":       "Team",
        "description": "Team member profiles and listings",
        "icon":        "users",
    },
    Category.GALLERIES: {
        "label":       "Galleries",
        "description": "Image galleries and portfolios",
        "icon":        "image",
    },
    Category.PRICING: {
        "label":       "Pricing",
        "description": "Pricing tables and plan comparisons",
        "icon":        "tag",
    },
    Category.FAQS: {
        "label":       "FAQs",
        "description": "Frequently asked questions sections",
        "icon":        "help",
    },
    Category.CONTENT: {
        "label":       "Content",
        "description": "General content sections",
        "icon":        "text",
    },
    Category.CONTACT: {
        "label":       "Contact",
        "description": "Contact forms and information",
        "icon":        "mail",
    },
    Category.LAYOUT: {
        "label":       "Layout",
        "description": "Containers that place other page parts side by side",
        "icon":        "columns",
    },
}

# lecture seule : partagé par toutes les bibliothèques
CATEGORIES: Mapping[Category, Mapping[str, str]] = MappingProxyType(
    {category: MappingProxyType(info) for category, info in _CATEGORIES.items()}
)


def coerce_category(value) -> Category | None:
    """Category depuis un membre ou sa valeur texte ; None si inconnue."""
    if isinstance(value, Category):
        return value
    try:
        return Category(str(value))
    except ValueError:
        return None
