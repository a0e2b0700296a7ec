"""
ThemeSettingsSchema — réglages d'apparence du site (couleurs, polices, espacements…).

Catalogue indépendant des page parts : chaque réglage a un type, un défaut
toujours présent et, selon le type, des contraintes (min/max/step/unit ou
options). validate() ne lève jamais : il renvoie une liste de messages.
"""
import re
from typing import Any, Dict, List, Mapping, Optional

from ..core.schemas import ThemeFieldSpec, ThemeFieldType, ThemeSection

_HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")
_NON_NUMERIC_RE = re.compile(r"[^0-9.]")
_LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")

_FONT_PRIMARY_OPTIONS = [
    ("Inter, system-ui, sans-serif", "Inter"),
    ("Open Sans, sans-serif", "Open Sans"),
    ("Roboto, sans-serif", "Roboto"),
    ("Lato, sans-serif", "Lato"),
    ("Montserrat, sans-serif", "Montserrat"),
    ("Poppins, sans-serif", "Poppins"),
    ("Playfair Display, serif", "Playfair Display"),
    ("Merriweather, serif", "Merriweather"),
]

_FONT_SECONDARY_OPTIONS = [
    ("Georgia, serif", "Georgia"),
    ("Inter, system-ui, sans-serif", "Inter"),
    ("Open Sans, sans-serif", "Open Sans"),
    ("Roboto, sans-serif", "Roboto"),
    ("Lato, sans-serif", "Lato"),
    ("Source Sans Pro, sans-serif", "Source Sans Pro"),
    ("Merriweather, serif", "Merriweather"),
    ("Vollkorn, serif", "Vollkorn"),
]


def _color(label, description, default) -> dict:
    return {"type": "color", "label": label, "description": description, "default": default}


def _select(label, description, default, options, type="select") -> dict:
    return {
        "type": type, "label": label, "description": description, "default": default,
        "options": [{"value": v, "label": l} for v, l in options],
    }


def _range(label, description, default, min, max, step, unit=None) -> dict:
    return {
        "type": "range", "label": label, "description": description, "default": default,
        "min": min, "max": max, "step": step, "unit": unit,
    }


# ── Données brutes (ordre d'affichage) ─────────────────────────────────

SCHEMA: Dict[str, dict] = {
    "colors": {
        "label": "Colors",
        "icon":  "palette",
        "fields": {
            "primary_color":   _color("Primary Color", "Main brand color used for buttons, links, and accents", "#e91b23"),
            "secondary_color": _color("Secondary Color", "Supporting color for secondary elements", "#3498db"),
            "accent_color":    _color("Accent Color", "Highlight color for special elements", "#27ae60"),
            "bg_light":        _color("Light Background", "Background for light sections", "#f8f9fa"),
            "text_primary":    _color("Primary Text", "Main text color", "#212529"),
            "text_secondary":  _color("Secondary Text", "Muted text color", "#6c757d"),
        },
    },
    "footer": {
        "label": "Footer",
        "icon":  "footer",
        "fields": {
            "footer_bg_color":        _color("Footer Background", "Background color for the footer", "#2c3e50"),
            "footer_main_text_color": _color("Footer Text", "Text color in the footer", "#ffffff"),
            "footer_link_color":      _color("Footer Links", "Link color in the footer", "#3498db"),
        },
    },
    "typography": {
        "label": "Typography",
        "icon":  "text",
        "fields": {
            "font_primary": _select(
                "Heading Font", "Font family for headings and titles",
                "Inter, system-ui, sans-serif", _FONT_PRIMARY_OPTIONS, type="font_select",
            ),
            "font_secondary": _select(
                "Body Font", "Font family for body text",
                "Georgia, serif", _FONT_SECONDARY_OPTIONS, type="font_select",
            ),
            "font_size_base":   _range("Base Font Size", "Default font size for body text", "16px", 14, 20, 1, "px"),
            "line_height_base": _range("Line Height", "Spacing between lines of text", "1.6", 1.2, 2.0, 0.1),
        },
    },
    "layout": {
        "label": "Layout",
        "icon":  "layout",
        "fields": {
            "container_max_width": _select(
                "Container Width", "Maximum width of the main content area", "1200px",
                [("960px", "Narrow (960px)"), ("1140px", "Medium (1140px)"),
                 ("1200px", "Standard (1200px)"), ("1400px", "Wide (1400px)"), ("100%", "Full Width")],
            ),
            "container_padding": _range("Container Padding", "Horizontal padding inside containers", "1rem", 0.5, 3, 0.25, "rem"),
            "spacing_unit":      _range("Spacing Unit", "Base unit for spacing calculations", "1rem", 0.5, 1.5, 0.125, "rem"),
        },
    },
    "appearance": {
        "label": "Appearance",
        "icon":  "appearance",
        "fields": {
            "border_radius": _range("Border Radius", "Roundness of corners on cards and buttons", "0.5rem", 0, 2, 0.125, "rem"),
            "shadow_intensity": _select(
                "Shadow Intensity", "How prominent shadows appear", "normal",
                [("none", "None"), ("subtle", "Subtle"), ("normal", "Normal"), ("strong", "Strong")],
            ),
            "color_scheme": _select(
                "Color Scheme", "Light or dark mode preference", "light",
                [("light", "Light"), ("dark", "Dark"), ("auto", "Auto (follows system)")],
            ),
        },
    },
    "buttons": {
        "label": "Buttons",
        "icon":  "button",
        "fields": {
            "button_style": _select(
                "Button Style", "Default appearance of buttons", "solid",
                [("solid", "Solid"), ("outline", "Outline"), ("soft", "Soft")],
            ),
            "button_radius": _select(
                "Button Roundness", "How rounded button corners appear", "default",
                [("none", "Square"), ("sm", "Slightly Rounded"), ("default", "Rounded"),
                 ("lg", "Very Rounded"), ("full", "Pill Shaped")],
            ),
        },
    },
    "header": {
        "label": "Header",
        "icon":  "header",
        "fields": {
            "header_style": _select(
                "Header Style", "How the header appears", "solid",
                [("solid", "Solid Background"), ("transparent", "Transparent"), ("sticky", "Sticky on Scroll")],
            ),
            "header_bg_color":   _color("Header Background", "Background color of the header", "#ffffff"),
            "header_text_color": _color("Header Text", "Text color in the header", "#212529"),
        },
    },
}


def _build_sections(raw: Mapping[str, dict]) -> Dict[str, ThemeSection]:
    sections = {}
    for name, section in raw.items():
        fields = {
            field_name: ThemeFieldSpec(name=field_name, section=name, **cfg)
            for field_name, cfg in section["fields"].items()
        }
        sections[name] = ThemeSection(name=name, label=section["label"], icon=section["icon"], fields=fields)
    return sections


SECTIONS: Dict[str, ThemeSection] = _build_sections(SCHEMA)


def _number(value: float):
    """14.0 → 14, 1.2 → 1.2 (affichage des bornes dans les messages)."""
    return int(value) if float(value).is_integer() else value


def parse_range_value(value: Any) -> float:
    """'16px' → 16.0, '1.6' → 1.6, 'abc' → 0.0 (caractères non numériques ignorés)."""
    cleaned = _NON_NUMERIC_RE.sub("", str(value))
    match = _LEADING_FLOAT_RE.match(cleaned)
    return float(match.group(0)) if match else 0.0


class ThemeSettingsSchema:
    """
    Accès en lecture au schéma + validation des valeurs saisies.

    Usage:
        >>> ThemeSettingsSchema.validate({"primary_color": "#ff0000"})
        []
        >>> ThemeSettingsSchema.validate({"button_style": "nonexistent"})
        ["button_style: Invalid option 'nonexistent'"]
    """

    @classmethod
    def sections(cls) -> List[str]:
        return list(SECTIONS)

    @classmethod
    def section(cls, name) -> Optional[ThemeSection]:
        return SECTIONS.get(str(name))

    @classmethod
    def field(cls, section_name, field_name) -> Optional[ThemeFieldSpec]:
        section = cls.section(section_name)
        if section is None:
            return None
        return section.fields.get(str(field_name))

    @classmethod
    def all_fields(cls) -> List[ThemeFieldSpec]:
        return [spec for section in SECTIONS.values() for spec in section.fields.values()]

    @classmethod
    def find_field(cls, name) -> Optional[ThemeFieldSpec]:
        name = str(name)
        for section in SECTIONS.values():
            if name in section.fields:
                return section.fields[name]
        return None

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return {spec.name: spec.default for spec in cls.all_fields()}

    @classmethod
    def to_json_schema(cls) -> dict:
        return {
            "sections": [
                {
                    "name": section.name,
                    "label": section.label,
                    "icon": section.icon,
                    "fields": [
                        spec.model_dump(mode="json", exclude_none=True, exclude={"section"})
                        for spec in section.fields.values()
                    ],
                }
                for section in SECTIONS.values()
            ]
        }

    # ── Validation ──────────────────────────────────────────────────────

    @classmethod
    def validate(cls, values: Mapping[str, Any]) -> List[str]:
        """Messages d'erreur dans l'ordre des clés fournies ; clés inconnues ignorées."""
        errors: List[str] = []
        for key, value in (values or {}).items():
            spec = cls.find_field(key)
            if spec is not None:
                errors.extend(cls._check(key, value, spec))
        return errors

    @staticmethod
    def _check(key, value: Any, spec: ThemeFieldSpec) -> List[str]:
        if spec.type == ThemeFieldType.COLOR:
            if not (isinstance(value, str) and _HEX_COLOR_RE.fullmatch(value)):
                return [f"{key}: Invalid color format (expected hex like #RRGGBB)"]
            return []

        if spec.type == ThemeFieldType.RANGE:
            number = parse_range_value(value)
            errors = []
            if spec.min is not None and number < spec.min:
                errors.append(f"{key}: Value {number} is below minimum {_number(spec.min)}")
            if spec.max is not None and number > spec.max:
                errors.append(f"{key}: Value {number} is above maximum {_number(spec.max)}")
            return errors

        if spec.type in (ThemeFieldType.SELECT, ThemeFieldType.FONT_SELECT):
            if value not in spec.option_values:
                return [f"{key}: Invalid option '{value}'"]
        return []

    # ── Valeurs effectives ──────────────────────────────────────────────

    @classmethod
    def merged(cls, values: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Défauts surchargés par les valeurs fournies (clés inconnues ignorées)."""
        result = cls.defaults()
        for key, value in (values or {}).items():
            if key in result and value is not None:
                result[key] = value
        return result

    @classmethod
    def css_variables(cls, values: Optional[Mapping[str, Any]] = None) -> str:
        """
        Bloc :root avec une variable par réglage : primary_color → --primary-color.
        Les toggles deviennent 1/0 ; les autres valeurs sont émises telles quelles.
        """
        lines = [":root {"]
        for name, value in cls.merged(values).items():
            if isinstance(value, bool):
                value = 1 if value else 0
            lines.append(f"  --{name.replace('_', '-')}: {value};")
        lines.append("}")
        return "\n".join(lines)
