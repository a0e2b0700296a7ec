"""
Chargement des définitions brutes → PagePartDefinition.

Les deux formes de `fields` (liste de noms / dict de configs) sont
normalisées ici, une seule fois : en aval, chaque champ est un FieldSpec.
"""
from typing import Mapping

from pydantic import ValidationError

from ..core.errors import InvalidDefinition
from ..core.schemas import FieldGroup, PagePartDefinition, SlotSpec
from ..fields.builder import humanize_field_name
from ..fields.spec import field_spec_from_config
from .categories import coerce_category


def load_definition(key: str, raw: Mapping) -> PagePartDefinition:
    """Lève InvalidFieldConfig (champ mal formé) ou InvalidDefinition (structure)."""
    key = str(key)
    category = coerce_category(raw.get("category"))
    if category is None:
        raise InvalidDefinition(f"{key}: unknown category {raw.get('category')!r}")

    fields_raw = raw.get("fields") or {}
    if isinstance(fields_raw, Mapping):
        fields = {str(name): field_spec_from_config(name, cfg) for name, cfg in fields_raw.items()}
    elif isinstance(fields_raw, (list, tuple)):
        fields = {str(name): field_spec_from_config(name, None) for name in fields_raw}
    else:
        raise InvalidDefinition(f"{key}: fields must be a list of names or a mapping")

    groups = {
        str(gkey): FieldGroup(
            key=str(gkey),
            label=(gcfg or {}).get("label") or humanize_field_name(gkey),
            order=(gcfg or {}).get("order"),
        )
        for gkey, gcfg in (raw.get("field_groups") or {}).items()
    }

    try:
        slots = {str(name): SlotSpec(**scfg) for name, scfg in (raw.get("slots") or {}).items()}
        return PagePartDefinition(
            key=key,
            category=category,
            label=raw.get("label") or humanize_field_name(key.rsplit("/", 1)[-1]),
            description=raw.get("description", ""),
            fields=fields,
            field_groups=groups,
            is_container=bool(raw.get("is_container", False)),
            slots=slots,
            legacy=bool(raw.get("legacy", False)),
        )
    except ValidationError as exc:
        raise InvalidDefinition(f"{key}: {exc}") from exc
