"""
Export JSON du catalogue pour l'éditeur (catégories → parts → champs).
"""
from typing import List, Optional

from ..core.schemas import PagePartDefinition
from ..fields.builder import FieldSchemaBuilder


def part_json(definition: PagePartDefinition, builder: FieldSchemaBuilder) -> dict:
    schema = builder.build_for_definition(definition)
    part = {
        "key": definition.key,
        "label": definition.label,
        "description": definition.description,
        "fields": [f.to_dict() for f in schema.fields],
        "legacy": definition.legacy,
    }
    if definition.is_container:
        part["is_container"] = True
        part["slots"] = {name: slot.model_dump() for name, slot in definition.slots.items()}
    return part


def catalog_json_schema(library, builder: Optional[FieldSchemaBuilder] = None) -> dict:
    """
    {"categories": [{key, label, description, icon, parts: [...]}]}

    Toutes les catégories, dans l'ordre de CATEGORIES ; une catégorie vide a parts: [].
    is_container / slots ne figurent que pour les conteneurs.
    """
    builder = builder or FieldSchemaBuilder(library)
    categories: List[dict] = []
    for category, info in library.categories().items():
        parts = library.for_category(category)
        categories.append({
            "key": category.value,
            "label": info.get("label", category.value),
            "description": info.get("description", ""),
            "icon": info.get("icon", ""),
            "parts": [part_json(d, builder) for d in parts.values()],
        })
    return {"categories": categories}
