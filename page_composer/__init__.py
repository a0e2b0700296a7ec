"""
Page Composer — catalogue de page parts, schémas de champs, réglages de thème.

Usage:
    >>> from page_composer import default_library, FieldSchemaBuilder, PageComposer
    >>> library = default_library()
    >>> FieldSchemaBuilder(library).build_field_definition("hero_image").type
    <FieldType.IMAGE: 'image'>
    >>> PageComposer(library).compose([{"key": "heroes/hero_centered"}], locale="fr")

API HTTP : page_composer.api.create_app()
"""
__version__ = "0.3.0"

# ── Erreurs / schémas ───────────────────────────────────────────────────────
from .core.errors import (
    PageComposerError,
    InvalidFieldConfig,
    InvalidDefinition,
    DuplicateDefinition,
    RegistryClosed,
    UnknownSlot,
)
from .core.schemas import (
    FieldType, Category, ThemeFieldType,
    FieldSpec, FieldGroup, SlotSpec, PagePartDefinition,
    ThemeOption, ThemeFieldSpec, ThemeSection,
)
from .core.locale import resolve_block_contents, locale_to_base

# ── Champs ──────────────────────────────────────────────────────────────────
from .fields import (
    infer_type,
    FieldSchema, PartSchema, FieldSchemaBuilder,
    build_field_definition, build_for_page_part,
)

# ── Catalogue ───────────────────────────────────────────────────────────────
from .catalog import PagePartLibrary, PagePartRegistry, default_library

# ── Thème / composition ─────────────────────────────────────────────────────
from .theme import ThemeSettingsSchema
from .composer import PageContentItem, ComposedPart, PageComposer
