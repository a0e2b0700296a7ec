"""
PagePartLibrary — catalogue immuable des page parts + registre dynamique.

Le catalogue intégré est construit une fois (default_library()) puis passé
par référence aux consommateurs. Les lookups ne lèvent jamais : clé inconnue
→ None / dict vide / liste vide.
"""
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .. import config
from ..core.errors import DuplicateDefinition
from ..core.schemas import Category, PagePartDefinition, SlotSpec
from .categories import CATEGORIES, coerce_category
from .definitions import BUILTIN_DEFINITIONS
from .loader import load_definition
from .registry import PagePartRegistry
from .templates import NullTemplateSource, TemplateSource, template_source_from_dir

log = logging.getLogger(__name__)


class PagePartLibrary:
    """
    Catalogue + registre, vus comme une seule source de définitions.

    Usage:
        >>> library = PagePartLibrary.builtin()
        >>> library.slot_names("layout/layout_two_column_equal")
        ['left', 'right']
        >>> library.find("nonexistent") is None
        True
    """

    def __init__(
        self,
        definitions: Iterable[PagePartDefinition] = (),
        registry: Optional[PagePartRegistry] = None,
        templates: Optional[TemplateSource] = None,
    ):
        catalog: Dict[str, PagePartDefinition] = {}
        for definition in definitions:
            if definition.key in catalog:
                raise DuplicateDefinition(f"Page part {definition.key!r} defined twice")
            catalog[definition.key] = definition
        self._catalog: Mapping[str, PagePartDefinition] = MappingProxyType(catalog)
        self.templates = templates or NullTemplateSource()
        self.registry = registry if registry is not None else PagePartRegistry(templates=self.templates)
        self.registry.reserve(self._catalog.keys())

    @classmethod
    def from_raw(cls, raw_definitions: Mapping[str, dict], **kwargs) -> "PagePartLibrary":
        return cls([load_definition(k, v) for k, v in raw_definitions.items()], **kwargs)

    @classmethod
    def builtin(cls, **kwargs) -> "PagePartLibrary":
        return cls.from_raw(BUILTIN_DEFINITIONS, **kwargs)

    # ── Enregistrement dynamique (phase de démarrage) ───────────────────

    def define(self, key, build, **meta) -> PagePartDefinition:
        """Raccourci vers PagePartRegistry.define (voir registry.py)."""
        return self.registry.define(key, build, **meta)

    # ── Lookups ─────────────────────────────────────────────────────────

    def _entries(self) -> Dict[str, PagePartDefinition]:
        return {**self._catalog, **self.registry.entries()}

    def find(self, key) -> Optional[PagePartDefinition]:
        key = str(key)
        definition = self._catalog.get(key)
        if definition is None:
            definition = self.registry.get(key)
        return definition

    definition = find

    def all(self) -> List[PagePartDefinition]:
        return list(self._entries().values())

    def all_keys(self) -> List[str]:
        return list(self._entries())

    def by_category(self) -> Dict[Category, Dict[str, PagePartDefinition]]:
        """Définitions groupées par catégorie (ordre de CATEGORIES, catégories vides omises)."""
        entries = self._entries()
        grouped: Dict[Category, Dict[str, PagePartDefinition]] = {}
        for category in CATEGORIES:
            parts = {k: d for k, d in entries.items() if d.category == category}
            if parts:
                grouped[category] = parts
        return grouped

    def for_category(self, category) -> Dict[str, PagePartDefinition]:
        category = coerce_category(category)
        if category is None:
            return {}
        return {k: d for k, d in self._entries().items() if d.category == category}

    def exists(self, key) -> bool:
        return self.find(key) is not None or self.template_exists(key)

    def template_exists(self, key) -> bool:
        return self.templates.exists(str(key))

    # ── Conteneurs ──────────────────────────────────────────────────────

    def container_parts(self) -> Dict[str, PagePartDefinition]:
        return {k: d for k, d in self._entries().items() if d.is_container}

    def is_container(self, key) -> bool:
        definition = self.find(key)
        return bool(definition and definition.is_container)

    def slots_for(self, key) -> Optional[Dict[str, SlotSpec]]:
        definition = self.find(key)
        if definition is None or not definition.is_container:
            return None
        return dict(definition.slots)

    def slot_names(self, key) -> List[str]:
        slots = self.slots_for(key)
        return list(slots) if slots else []

    # ── Catégories / filtres ────────────────────────────────────────────

    def categories(self) -> Mapping[Category, Mapping[str, str]]:
        return CATEGORIES

    def category_info(self, category) -> Optional[Mapping[str, str]]:
        category = coerce_category(category)
        return CATEGORIES.get(category) if category else None

    def modern_parts(self) -> Dict[str, PagePartDefinition]:
        return {k: d for k, d in self._entries().items() if not d.legacy}

    def legacy_parts(self) -> Dict[str, PagePartDefinition]:
        return {k: d for k, d in self._entries().items() if d.legacy}

    # ── Export / contenu par défaut ─────────────────────────────────────

    def to_json_schema(self, builder=None) -> dict:
        from .export import catalog_json_schema
        return catalog_json_schema(self, builder)

    def default_block_contents(self, key, locale: Optional[str] = None) -> Optional[dict]:
        """
        Contenu initial d'une page part : {locale: {"blocks": {champ: {"content": défaut}}}}.
        None pour une clé inconnue ou un conteneur (pas de contenu propre).
        """
        definition = self.find(key)
        if definition is None or definition.is_container:
            return None
        locale = locale or config.DEFAULT_LOCALE
        blocks = {
            name: {"content": spec.options.get("default", "")}
            for name, spec in definition.fields.items()
        }
        return {locale: {"blocks": blocks}}


@lru_cache(maxsize=1)
def default_library() -> PagePartLibrary:
    """Catalogue intégré, construit une seule fois par process."""
    library = PagePartLibrary.builtin(templates=template_source_from_dir(config.TEMPLATE_DIR))
    log.info("Catalogue page parts chargé (%d définitions)", len(library.all_keys()))
    return library
