"""Tests PagePartRegistry — DSL define(), templates, gel, doublons."""
import logging

import pytest

from page_composer.catalog.library import PagePartLibrary
from page_composer.catalog.registry import DefinitionBuilder, PagePartRegistry
from page_composer.catalog.templates import DirectoryTemplateSource, is_referenced, unreferenced_fields
from page_composer.core.errors import (
    DuplicateDefinition,
    InvalidDefinition,
    InvalidFieldConfig,
    RegistryClosed,
)
from page_composer.core.schemas import Category, FieldType
from page_composer.fields.builder import FieldSchemaBuilder

PROMO_TEMPLATE = """
<section class="hero-promo">
  {% if page_part.promo_image.content %}
    <img src="{{ page_part.promo_image.content }}">
  {% endif %}
  <h1>{{ page_part.title.content | escape }}</h1>
</section>
"""


def promo_fields(part):
    part.field("title", "text", "Title", max_length=80)
    part.field("promo_image")
    part.field("promo_description")


@pytest.fixture
def templates(tmp_path):
    (tmp_path / "heroes").mkdir()
    (tmp_path / "heroes" / "hero_promo.liquid").write_text(PROMO_TEMPLATE, encoding="utf-8")
    return DirectoryTemplateSource(tmp_path)


# ── DSL ───────────────────────────────────────────────────────────────────

class TestDefinitionBuilder:
    def test_to_raw_leaf(self):
        builder = DefinitionBuilder("heroes/x")
        builder.field("title", "text", "Title").group("main", "Main", order=1)
        raw = builder.to_raw(category="heroes")
        assert raw["fields"] == {"title": {"type": "text", "label": "Title"}}
        assert raw["field_groups"] == {"main": {"label": "Main", "order": 1}}
        assert "slots" not in raw

    def test_slots_make_a_container(self):
        raw = DefinitionBuilder("layout/x").slot("main", "Main", width="100%").to_raw(category="layout")
        assert raw["is_container"] is True
        assert raw["slots"]["main"] == {"label": "Main", "description": "", "width": "100%"}

    def test_duplicate_field(self):
        builder = DefinitionBuilder("heroes/x").field("title")
        with pytest.raises(InvalidFieldConfig):
            builder.field("title")


# ── define() ──────────────────────────────────────────────────────────────

class TestDefine:
    def test_define_and_lookup(self, library):
        definition = library.define(
            "heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero",
        )
        assert library.find("heroes/hero_promo") is definition
        assert definition.category == Category.HEROES
        assert definition.fields["promo_image"].type == FieldType.IMAGE
        assert definition.fields["promo_image"].inferred is True
        assert definition.fields["title"].validation == {"max_length": 80}

    def test_registered_part_appears_everywhere(self, library):
        library.define("heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero")
        assert "heroes/hero_promo" in library.all_keys()
        assert "heroes/hero_promo" in library.for_category("heroes")
        assert "heroes/hero_promo" in library.modern_parts()
        schema = FieldSchemaBuilder(library).build_for_page_part("heroes/hero_promo")
        assert [f.name for f in schema.fields] == ["title", "promo_image", "promo_description"]

    def test_define_container(self, library):
        def columns(part):
            part.slot("first", "First")
            part.slot("second", "Second")

        library.define("layout/two_blocks", columns, category="layout", label="Two Blocks")
        assert library.slot_names("layout/two_blocks") == ["first", "second"]
        assert library.is_container("layout/two_blocks")

    def test_builtin_key_rejected(self, library):
        with pytest.raises(DuplicateDefinition):
            library.define("heroes/hero_centered", promo_fields, category="heroes", label="Again")

    def test_registered_key_rejected(self, library):
        library.define("heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero")
        with pytest.raises(DuplicateDefinition):
            library.define("heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero")

    def test_invalid_definition_not_registered(self, library):
        def bad(part):
            part.field("title", group="missing")

        with pytest.raises(InvalidDefinition):
            library.define("heroes/bad", bad, category="heroes", label="Bad")
        assert library.find("heroes/bad") is None

    def test_unknown_category(self, library):
        with pytest.raises(InvalidDefinition):
            library.define("misc/x", promo_fields, category="misc", label="X")

    def test_frozen_registry_refuses_define(self, library):
        library.registry.freeze()
        assert library.registry.is_frozen
        with pytest.raises(RegistryClosed):
            library.define("heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero")

    def test_reserve_after_define_conflicts(self):
        registry = PagePartRegistry()
        registry.define("content/x", lambda p: p.field("title"), category="content", label="X")
        assert "content/x" in registry
        assert len(registry) == 1
        with pytest.raises(DuplicateDefinition):
            registry.reserve(["content/x"])

    def test_entries_are_read_only(self):
        registry = PagePartRegistry()
        registry.define("content/x", lambda p: p.field("title"), category="content", label="X")
        with pytest.raises(TypeError):
            registry.entries()["content/y"] = None


# ── Vérification des templates ───────────────────────────────────────────

class TestTemplateValidation:
    def test_unreferenced_field_logged(self, templates, page_composer_logs):
        library = PagePartLibrary.builtin(templates=templates)
        library.define("heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero")

        warnings = [r for r in page_composer_logs.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "promo_description" in warnings[0].getMessage()
        assert library.registry.warnings_for("heroes/hero_promo") == ["promo_description"]
        # warning seulement : la définition est enregistrée
        assert library.find("heroes/hero_promo") is not None

    def test_no_template_skips_check(self, templates, page_composer_logs):
        library = PagePartLibrary.builtin(templates=templates)
        library.define("heroes/hero_other", promo_fields, category="heroes", label="Other")

        assert not [r for r in page_composer_logs.records if r.levelno == logging.WARNING]
        assert library.registry.warnings_for("heroes/hero_other") == []

    def test_registration_logged(self, library, page_composer_logs):
        library.define("heroes/hero_promo", promo_fields, category="heroes", label="Promo Hero")
        assert any("heroes/hero_promo" in r.getMessage() for r in page_composer_logs.records
                   if r.levelno == logging.INFO)


@pytest.mark.parametrize("template, referenced", [
    ("{{ page_part.title.content }}", True),
    ("{{title}}", True),
    ("{{- title | upcase -}}", True),
    ("{% if page_part.title %}x{% endif %}", True),
    ("{% unless title == '' %}x{% endunless %}", True),
    ("{% elsif title %}", True),
    ("<h1>title</h1>", False),
    ("{{ page_part.subtitle.content }}", False),
    ("{{ title_a }}", False),
])
def test_is_referenced(template, referenced):
    assert is_referenced(template, "title") is referenced


def test_unreferenced_fields_keep_declaration_order():
    template = "{{ b }}"
    assert unreferenced_fields(template, ["c", "b", "a"]) == ["c", "a"]
