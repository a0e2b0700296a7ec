"""
Registre dynamique — définitions ajoutées au démarrage via une petite DSL.

    >>> def promo_fields(part):
    ...     part.field("title", "text", "Title")
    ...     part.field("promo_image")            # type inféré → image
    >>> registry.define("heroes/hero_promo", promo_fields,
    ...                 category="heroes", label="Promo Hero")

Écritures sous verrou, lectures sans verrou : chaque define() remplace la
table par une copie (copy-on-write) exposée en lecture seule.
La vérification des templates n'a lieu qu'ici, jamais par requête.
"""
import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.errors import DuplicateDefinition, InvalidDefinition, InvalidFieldConfig, RegistryClosed
from ..core.schemas import PagePartDefinition
from .loader import load_definition
from .templates import NullTemplateSource, TemplateSource, unreferenced_fields

log = logging.getLogger(__name__)


class DefinitionBuilder:
    """DSL passée au bloc de define() : field(), group(), slot()."""

    def __init__(self, key: str):
        self.key = key
        self._fields: Dict[str, dict] = {}
        self._groups: Dict[str, dict] = {}
        self._slots: Dict[str, dict] = {}

    def field(self, name, type=None, label: Optional[str] = None, **config) -> "DefinitionBuilder":
        name = str(name)
        if name in self._fields:
            raise InvalidFieldConfig(f"{self.key}: field {name!r} declared twice")
        cfg = dict(config)
        if type is not None:
            cfg["type"] = type
        if label is not None:
            cfg["label"] = label
        self._fields[name] = cfg
        return self

    def group(self, key, label: Optional[str] = None, order: Optional[int] = None) -> "DefinitionBuilder":
        self._groups[str(key)] = {"label": label, "order": order}
        return self

    def slot(self, name, label: str, description: str = "", width: str = "") -> "DefinitionBuilder":
        name = str(name)
        if name in self._slots:
            raise InvalidDefinition(f"{self.key}: slot {name!r} declared twice")
        self._slots[name] = {"label": label, "description": description, "width": width}
        return self

    def to_raw(self, **meta) -> dict:
        raw = dict(meta)
        raw["fields"] = self._fields
        raw["field_groups"] = self._groups
        if self._slots:
            raw["is_container"] = True
            raw["slots"] = self._slots
        return raw


class PagePartRegistry:
    """Stockage append-only des définitions dynamiques."""

    def __init__(self, templates: Optional[TemplateSource] = None):
        self.templates = templates or NullTemplateSource()
        self._lock = threading.Lock()
        self._entries: Mapping[str, PagePartDefinition] = MappingProxyType({})
        self._warnings: Mapping[str, Tuple[str, ...]] = MappingProxyType({})
        self._reserved: frozenset = frozenset()
        self._frozen = False

    # ── Lecture (sans verrou) ───────────────────────────────────────────

    def get(self, key) -> Optional[PagePartDefinition]:
        return self._entries.get(str(key))

    def entries(self) -> Mapping[str, PagePartDefinition]:
        return self._entries

    def warnings_for(self, key) -> List[str]:
        """Champs non référencés par le template lors de l'enregistrement."""
        return list(self._warnings.get(str(key), ()))

    def __contains__(self, key) -> bool:
        return str(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ── Écriture (phase de démarrage) ───────────────────────────────────

    def reserve(self, keys: Iterable[str]) -> None:
        """Réserve des clés (celles du catalogue intégré) : define() les refusera."""
        keys = frozenset(str(k) for k in keys)
        with self._lock:
            clash = sorted(keys & set(self._entries))
            if clash:
                raise DuplicateDefinition(f"Page parts already registered: {clash}")
            self._reserved = self._reserved | keys

    def freeze(self) -> None:
        """Fin du démarrage : plus aucun define() accepté."""
        with self._lock:
            self._frozen = True
        log.info("Registre page parts figé (%d définitions dynamiques)", len(self._entries))

    def _check_writable(self, key: str) -> None:
        if self._frozen:
            raise RegistryClosed(f"Cannot define {key!r}: registry is frozen")
        if key in self._reserved or key in self._entries:
            raise DuplicateDefinition(f"Page part {key!r} is already defined")

    def define(
        self,
        key,
        build: Callable[[DefinitionBuilder], None],
        *,
        category,
        label: str,
        description: str = "",
        legacy: bool = False,
    ) -> PagePartDefinition:
        """
        Construit la définition via la DSL, vérifie le template, puis l'ajoute.

        Les champs absents du template produisent un warning (log), jamais
        une erreur. Sans template, la vérification est ignorée.
        """
        key = str(key)
        with self._lock:
            self._check_writable(key)

        builder = DefinitionBuilder(key)
        build(builder)
        definition = load_definition(
            key,
            builder.to_raw(category=category, label=label, description=description, legacy=legacy),
        )
        missing = self._validate_template(definition)

        with self._lock:
            self._check_writable(key)
            entries = dict(self._entries)
            entries[key] = definition
            self._entries = MappingProxyType(entries)
            if missing:
                warnings = dict(self._warnings)
                warnings[key] = tuple(missing)
                self._warnings = MappingProxyType(warnings)

        log.info("Page part %r enregistrée (%d champs)", key, len(definition.fields))
        return definition

    def _validate_template(self, definition: PagePartDefinition) -> List[str]:
        template = self.templates.read(definition.key)
        if template is None:
            log.debug("Pas de template pour %r, vérification ignorée", definition.key)
            return []
        missing = unreferenced_fields(template, definition.fields)
        for name in missing:
            log.warning("Page part %r : champ %r non référencé dans le template", definition.key, name)
        return missing
