"""
FieldSchemaBuilder — schéma complet d'un champ pour l'éditeur.

Pipeline par champ :
  1. type = type explicite ou infer_type(nom)
  2. validation/options = défauts du type, surchargés par la config explicite
  3. guidance = explicite > preset détecté depuis le nom > conseil du type
  4. group / paired_with / order recopiés, item_schema construit récursivement
"""
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from ..core.schemas import FieldSpec, FieldType, PagePartDefinition, thaw
from .spec import field_spec_from_config
from .types import CONTENT_GUIDANCE_PRESETS, FIELD_TYPES, TYPE_GUIDANCE

# Groupes sans ordre explicite : triés en dernier
UNORDERED_GROUP = 999

_TITLE_RE       = re.compile(r"(^|_)(title|heading|headline)$")
_DESCRIPTION_RE = re.compile(r"_(description|summary|excerpt)$")
_CTA_BUTTON_RE  = re.compile(r"_(button|cta)_?(text)?$")


class FieldSchema(BaseModel):
    """Entrée de schéma telle que sérialisée pour l'éditeur."""
    name: str
    type: FieldType
    label: str
    component: str
    hint: Optional[str] = None
    placeholder: Optional[str] = None
    required: Optional[bool] = None
    validation: Optional[Dict[str, Any]] = None
    options: Optional[Dict[str, Any]] = None
    content_guidance: Optional[Dict[str, str]] = None
    group: Optional[str] = None
    paired_with: Optional[str] = None
    order: Optional[int] = None
    item_schema: Optional[Dict[str, "FieldSchema"]] = None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


FieldSchema.model_rebuild()


class FieldGroupSchema(BaseModel):
    key: str
    label: str
    order: int


class PartSchema(BaseModel):
    fields: List[FieldSchema]
    groups: List[FieldGroupSchema]

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


def humanize_field_name(field_name) -> str:
    """'feature_1_title' → 'Feature 1 Title'."""
    text = re.sub(r"[_-]", " ", str(field_name))
    text = re.sub(r"(\d+)", r" \1 ", text)
    return " ".join(word.capitalize() for word in text.split())


def detect_guidance_preset(field_name, field_type: FieldType) -> Optional[str]:
    name = str(field_name).lower()
    if _TITLE_RE.search(name):
        return "title"
    if _DESCRIPTION_RE.search(name):
        return "description"
    if _CTA_BUTTON_RE.search(name):
        return "cta_button"
    if field_type == FieldType.IMAGE:
        return "image"
    return None


def _compact(values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    cleaned = {k: v for k, v in values.items() if v is not None}
    return cleaned or None


class FieldSchemaBuilder:
    """
    Construit les schémas de champs.

    Usage:
        >>> builder = FieldSchemaBuilder(library)
        >>> builder.build_field_definition("hero_image").component
        'ImageInlinePicker'
        >>> builder.build_for_page_part("faqs/faq_accordion").groups[0].key
        'header'
    """

    def __init__(self, library=None):
        self._library = library

    @property
    def library(self):
        if self._library is None:
            from ..catalog.library import default_library
            self._library = default_library()
        return self._library

    # ── Champ ───────────────────────────────────────────────────────────

    def build_field_definition(self, field_name, config: Any = None) -> FieldSchema:
        """Schéma complet d'un champ. Lève InvalidFieldConfig si config est mal formée."""
        spec = field_spec_from_config(field_name, config)
        type_config = FIELD_TYPES[spec.type]

        # copies profondes : le schéma rendu est modifiable, les tables restent intactes
        validation = thaw(type_config.get("default_validation", {}))
        validation.update(thaw(spec.validation))
        options = thaw(type_config.get("default_options", {}))
        options.update(thaw(spec.options))

        return FieldSchema(
            name=spec.name,
            type=spec.type,
            label=spec.label or humanize_field_name(spec.name),
            component=spec.component or type_config["component"],
            hint=spec.hint,
            placeholder=spec.placeholder,
            required=spec.required,
            validation=_compact(validation),
            options=_compact(options),
            content_guidance=self._content_guidance(spec),
            group=spec.group,
            paired_with=spec.paired_with,
            order=spec.order,
            item_schema=self._item_schema(spec, type_config),
        )

    def _content_guidance(self, spec: FieldSpec) -> Optional[Dict[str, str]]:
        guidance = thaw(spec.content_guidance)
        preset = detect_guidance_preset(spec.name, spec.type)
        if preset:
            for key, value in CONTENT_GUIDANCE_PRESETS[preset].items():
                guidance.setdefault(key, value)
        for key, value in TYPE_GUIDANCE.get(spec.type, {}).items():
            guidance.setdefault(key, value)
        return guidance or None

    def _item_schema(self, spec: FieldSpec, type_config: dict) -> Optional[Dict[str, FieldSchema]]:
        if spec.item_schema:
            return {
                sub: self.build_field_definition(sub, sub_spec)
                for sub, sub_spec in spec.item_schema.items()
            }
        if "item_schema" in type_config:
            return {
                sub: self.build_field_definition(sub, sub_config)
                for sub, sub_config in type_config["item_schema"].items()
            }
        return None

    # ── Page part ───────────────────────────────────────────────────────

    def build_for_page_part(self, page_part_key) -> Optional[PartSchema]:
        """Schéma {fields, groups} d'une page part, None si la clé est inconnue."""
        definition = self.library.find(page_part_key)
        if definition is None:
            return None
        return self.build_for_definition(definition)

    def build_for_definition(self, definition: PagePartDefinition) -> PartSchema:
        fields = [
            self.build_field_definition(name, spec)
            for name, spec in definition.fields.items()
        ]
        groups = sorted(
            (
                FieldGroupSchema(
                    key=group.key,
                    label=group.label,
                    order=UNORDERED_GROUP if group.order is None else group.order,
                )
                for group in definition.field_groups.values()
            ),
            key=lambda g: g.order,
        )
        return PartSchema(fields=fields, groups=groups)


_DEFAULT_BUILDER = FieldSchemaBuilder()


def build_field_definition(field_name, config: Any = None) -> FieldSchema:
    return _DEFAULT_BUILDER.build_field_definition(field_name, config)


def build_for_page_part(page_part_key) -> Optional[PartSchema]:
    return _DEFAULT_BUILDER.build_for_page_part(page_part_key)
