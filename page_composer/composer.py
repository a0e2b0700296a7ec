"""
Composer — liste de contenu de page → arbre de page parts résolues.

Feuille     : bloc de contenu résolu pour la locale + valeurs aplaties
              (+ schéma de champs si demandé)
Conteneur   : chaque slot déclaré est présent, dans l'ordre de déclaration,
              rempli récursivement avec les items fournis (ordre conservé)

Slot non déclaré (ou slots fournis à une feuille) → UnknownSlot.
Clé inconnue → feuille sans définition + warning, jamais d'exception.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .core.errors import UnknownSlot
from .core.locale import field_values, resolve_block_contents
from .core.schemas import PagePartDefinition
from .fields.builder import FieldSchemaBuilder, PartSchema

log = logging.getLogger(__name__)


class PageContentItem(BaseModel):
    """Un emplacement de la page tel que saisi par l'éditeur."""
    key: str
    id: Optional[str] = None
    label: Optional[str] = None
    visible: bool = True
    block_contents: Optional[Dict[str, Any]] = None
    slots: Dict[str, List["PageContentItem"]] = Field(default_factory=dict)


PageContentItem.model_rebuild()


class ComposedPart(BaseModel):
    key: str
    id: Optional[str] = None
    label: str
    definition: Optional[PagePartDefinition] = None
    is_container: bool = False
    content: Optional[Any] = None
    values: Dict[str, Any] = Field(default_factory=dict)
    field_schema: Optional[PartSchema] = None
    slots: Dict[str, List["ComposedPart"]] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        """Forme JSON : la définition complète est remplacée par sa catégorie."""
        data = {
            "key": self.key,
            "id": self.id,
            "label": self.label,
            "category": self.definition.category.value if self.definition else None,
            "is_container": self.is_container,
        }
        if self.is_container:
            data["slots"] = {
                name: [child.to_dict() for child in children]
                for name, children in self.slots.items()
            }
        else:
            data["content"] = self.content
            data["values"] = self.values
            if self.field_schema is not None:
                data["field_schema"] = self.field_schema.to_dict()
        return data


ComposedPart.model_rebuild()


class PageComposer:
    """
    Usage:
        >>> composer = PageComposer(library)
        >>> parts = composer.compose([
        ...     {"key": "layout/layout_two_column_equal",
        ...      "slots": {"left": [{"key": "heroes/hero_centered"}]}},
        ... ], locale="fr")
        >>> [p.key for p in parts[0].slots["left"]]
        ['heroes/hero_centered']
    """

    def __init__(self, library, builder: Optional[FieldSchemaBuilder] = None):
        self.library = library
        self.builder = builder or FieldSchemaBuilder(library)

    def compose(self, items, locale: Optional[str] = None, include_schema: bool = False) -> List[ComposedPart]:
        """Lève UnknownSlot pour un slot non déclaré, à n'importe quel niveau."""
        return [
            self._compose_item(item, locale, include_schema)
            for item in (self._coerce(i) for i in items)
            if item.visible
        ]

    @staticmethod
    def _coerce(item) -> PageContentItem:
        if isinstance(item, PageContentItem):
            return item
        return PageContentItem.model_validate(item)

    def _compose_item(self, item: PageContentItem, locale, include_schema: bool) -> ComposedPart:
        definition = self.library.find(item.key)
        if definition is None:
            log.warning("Page part inconnue %r, composée sans définition", item.key)
        label = item.label or (definition.label if definition else item.key)

        if definition is not None and definition.is_container:
            return ComposedPart(
                key=item.key,
                id=item.id,
                label=label,
                definition=definition,
                is_container=True,
                slots=self._fill_slots(definition, item, locale, include_schema),
            )

        if item.slots:
            slot_name = next(iter(item.slots))
            raise UnknownSlot(item.key, slot_name, [])

        content = resolve_block_contents(item.block_contents, locale)
        schema = None
        if include_schema and definition is not None:
            schema = self.builder.build_for_definition(definition)
        return ComposedPart(
            key=item.key,
            id=item.id,
            label=label,
            definition=definition,
            content=content,
            values=field_values(content),
            field_schema=schema,
        )

    def _fill_slots(self, definition: PagePartDefinition, item: PageContentItem, locale, include_schema):
        declared = definition.slot_names
        for slot_name in item.slots:
            if slot_name not in definition.slots:
                raise UnknownSlot(definition.key, slot_name, declared)
        return {
            name: self.compose(item.slots.get(name, []), locale, include_schema)
            for name in declared
        }
