"""
Table des types de champs — composant d'édition + validation/options par défaut.

Chaque entrée se traduit directement dans le schéma envoyé à l'éditeur :
  component            → composant UI côté client
  default_validation   → règles de base (surchargées par la config explicite)
  default_options      → options de base (idem)
  item_schema          → sous-champs des types tableau (faq_array)
"""
from typing import Mapping

from ..core.schemas import FieldType, freeze

FIELD_TYPES: Mapping[FieldType, Mapping] = freeze({
    # ── Texte ──
    FieldType.TEXT: {
        "component":          "TextInput",
        "description":        "Single-line text input",
        "default_validation": {"max_length": 255},
    },
    FieldType.TEXTAREA: {
        "component":          "TextareaInput",
        "description":        "Multi-line plain text",
        "default_validation": {"max_length": 5000},
        "default_options":    {"rows": 4},
    },
    FieldType.HTML: {
        "component":          "WysiwygEditor",
        "description":        "Rich HTML content with formatting",
        "default_validation": {"max_length": 50_000},
        "default_options":    {"toolbar": ["bold", "italic", "underline", "link", "list", "heading", "image"]},
    },
    FieldType.MARKDOWN: {
        "component":          "MarkdownEditor",
        "description":        "Markdown-formatted text",
        "default_validation": {"max_length": 50_000},
    },

    # ── Numériques ──
    FieldType.NUMBER: {
        "component":          "NumberInput",
        "description":        "Integer or decimal number",
        "default_options":    {"step": 1},
    },
    FieldType.CURRENCY: {
        "component":          "CurrencyInput",
        "description":        "Price with currency formatting",
        "default_validation": {"min": 0},
        "default_options":    {"currency_code": "USD", "locale": "en-US"},
    },
    FieldType.PERCENTAGE: {
        "component":          "PercentageInput",
        "description":        "Percentage value (0-100)",
        "default_validation": {"min": 0, "max": 100},
    },

    # ── Contact ──
    FieldType.EMAIL: {
        "component":          "EmailInput",
        "description":        "Email address",
        "default_validation": {"pattern": r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"},
    },
    FieldType.PHONE: {
        "component":          "PhoneInput",
        "description":        "Phone number",
    },
    FieldType.URL: {
        "component":          "UrlInput",
        "description":        "Web URL",
        "default_validation": {"pattern": "^(https?://|/).+"},
    },

    # ── Médias ──
    FieldType.IMAGE: {
        "component":          "ImageInlinePicker",
        "description":        "Image URL or upload",
        "default_options":    {"accept": ["image/jpeg", "image/png", "image/webp", "image/gif"], "max_size_mb": 5},
    },
    FieldType.VIDEO: {
        "component":          "VideoPicker",
        "description":        "Video URL (YouTube, Vimeo, etc.)",
        "default_options":    {"providers": ["youtube", "vimeo"]},
    },
    FieldType.FILE: {
        "component":          "FilePicker",
        "description":        "File attachment",
        "default_options":    {"max_size_mb": 10},
    },

    # ── Sélection ──
    FieldType.SELECT: {
        "component":          "SelectInput",
        "description":        "Dropdown selection",
        "default_options":    {"allow_empty": True},
    },
    FieldType.RADIO: {
        "component":          "RadioGroup",
        "description":        "Radio button selection",
    },
    FieldType.CHECKBOX: {
        "component":          "CheckboxInput",
        "description":        "Boolean toggle",
    },
    FieldType.BOOLEAN: {
        "component":          "CheckboxInput",
        "description":        "Boolean toggle (alias for checkbox)",
    },
    FieldType.MULTI_SELECT: {
        "component":          "MultiSelectInput",
        "description":        "Multiple selection",
        "default_options":    {"max_selections": None},
    },

    # ── Spéciaux ──
    FieldType.ICON: {
        "component":          "IconPicker",
        "description":        "Icon selector",
        "default_options":    {"icon_set": "lucide"},
    },
    FieldType.COLOR: {
        "component":          "ColorPicker",
        "description":        "Color value",
        "default_options":    {"format": "hex", "presets": []},
    },
    FieldType.DATE: {
        "component":          "DatePicker",
        "description":        "Date selection",
        "default_options":    {"format": "YYYY-MM-DD"},
    },
    FieldType.DATETIME: {
        "component":          "DateTimePicker",
        "description":        "Date and time selection",
        "default_options":    {"format": "YYYY-MM-DDTHH:mm"},
    },
    FieldType.SOCIAL_LINK: {
        "component":          "SocialLinkInput",
        "description":        "Social media profile URL",
        "default_options":    {"platforms": ["facebook", "twitter", "instagram", "linkedin", "youtube", "tiktok"]},
    },
    FieldType.MAP_EMBED: {
        "component":          "MapEmbedEditor",
        "description":        "Embedded map code",
        "default_validation": {"max_length": 5000},
    },

    # ── Tableaux ──
    FieldType.ARRAY: {
        "component":          "ArrayEditor",
        "description":        "Repeatable list of items",
        "default_options":    {"min_items": 0, "max_items": 10},
    },
    FieldType.FAQ_ARRAY: {
        "component":          "FaqEditor",
        "description":        "FAQ items with question/answer pairs",
        "default_options":    {"min_items": 1, "max_items": 20},
        "item_schema": {
            "question": {"type": "text",     "label": "Question", "required": True},
            "answer":   {"type": "textarea", "label": "Answer",   "required": True},
        },
    },
    FieldType.FEATURE_LIST: {
        "component":          "FeatureListEditor",
        "description":        "List of features (pipe-delimited or array)",
        "default_options":    {"delimiter": "|", "max_items": 20},
    },
})

# Presets de guidance éditoriale, détectés depuis le nom du champ
CONTENT_GUIDANCE_PRESETS: Mapping[str, Mapping[str, str]] = freeze({
    "title": {
        "recommended_length": "40-60 characters",
        "seo_tip":            "Include your primary keyword naturally",
        "best_practice":      "Keep it clear and compelling",
    },
    "description": {
        "recommended_length": "120-160 characters",
        "seo_tip":            "This may appear in search results - make it count",
        "best_practice":      "Summarize the key message concisely",
    },
    "cta_button": {
        "recommended_length": "2-5 words",
        "best_practice":      'Use action verbs like "Get", "Start", "Discover"',
    },
    "image": {
        "best_practice":      "Use high-quality images optimized for web",
        "seo_tip":            "Provide descriptive alt text for accessibility",
    },
})

# Conseil par défaut selon le type (appliqué en dernier, sans écraser)
TYPE_GUIDANCE: Mapping[FieldType, Mapping[str, str]] = freeze({
    FieldType.IMAGE: {"best_practice": "Use high-quality images optimized for web"},
    FieldType.HTML:  {"best_practice": "Use headings and lists to structure content"},
    FieldType.URL:   {
        "best_practice": "Use relative URLs for internal links (/page) or full URLs for external (https://...)",
    },
})
