"""Tests PagePartLibrary — lookups, conteneurs, catégories, export JSON."""
import pytest

from page_composer.catalog.definitions import BUILTIN_DEFINITIONS
from page_composer.catalog.library import PagePartLibrary, default_library
from page_composer.catalog.loader import load_definition
from page_composer.catalog.templates import DirectoryTemplateSource
from page_composer.core.errors import DuplicateDefinition, InvalidDefinition
from page_composer.core.schemas import Category, FieldType

LAYOUTS = [
    "layout/layout_two_column_equal",
    "layout/layout_sidebar_left",
    "layout/layout_sidebar_right",
    "layout/layout_three_column_equal",
]


# ── Lookups ───────────────────────────────────────────────────────────────

class TestLookups:
    def test_all_builtins_loaded(self, library):
        assert library.all_keys() == list(BUILTIN_DEFINITIONS)

    def test_find(self, library):
        hero = library.find("heroes/hero_centered")
        assert hero.label == "Centered Hero"
        assert hero.category == Category.HEROES
        assert library.definition("heroes/hero_centered") is hero

    def test_unknown_key_never_raises(self, library):
        assert library.find("nonexistent") is None
        assert library.slots_for("nonexistent") is None
        assert library.slot_names("nonexistent") == []
        assert library.is_container("nonexistent") is False
        assert library.exists("nonexistent") is False
        assert library.default_block_contents("nonexistent") is None

    def test_legacy_fields_normalized(self, library):
        agency = library.find("our_agency")
        assert agency.legacy is True
        assert all(spec.inferred for spec in agency.fields.values())
        assert agency.fields["our_agency_img"].type == FieldType.IMAGE

    def test_modern_and_legacy_split(self, library):
        assert "heroes/hero_centered" in library.modern_parts()
        assert "our_agency" in library.legacy_parts()
        assert not set(library.modern_parts()) & set(library.legacy_parts())

    def test_default_library_is_cached(self):
        assert default_library() is default_library()


# ── Conteneurs ────────────────────────────────────────────────────────────

class TestContainers:
    def test_container_parts(self, library):
        assert list(library.container_parts()) == LAYOUTS

    def test_slot_order_is_declaration_order(self, library):
        assert library.slot_names("layout/layout_two_column_equal") == ["left", "right"]
        assert library.slot_names("layout/layout_sidebar_left") == ["sidebar", "main"]
        assert library.slot_names("layout/layout_sidebar_right") == ["main", "sidebar"]
        assert library.slot_names("layout/layout_three_column_equal") == ["left", "center", "right"]

    def test_slots_for_leaf_is_none(self, library):
        assert library.slots_for("heroes/hero_centered") is None
        assert library.is_container("heroes/hero_centered") is False

    def test_slot_widths(self, library):
        slots = library.slots_for("layout/layout_sidebar_left")
        assert slots["sidebar"].width == "25%"
        assert slots["main"].label == "Main Content"

    def test_container_with_fields_rejected(self):
        with pytest.raises(InvalidDefinition):
            load_definition("layout/bad", {
                "category": "layout",
                "is_container": True,
                "fields": ["title"],
                "slots": {"main": {"label": "Main"}},
            })

    def test_container_without_slots_rejected(self):
        with pytest.raises(InvalidDefinition):
            load_definition("layout/empty", {"category": "layout", "is_container": True})

    def test_leaf_with_slots_rejected(self):
        with pytest.raises(InvalidDefinition):
            load_definition("content/odd", {"category": "content", "slots": {"main": {"label": "Main"}}})


# ── Catégories ────────────────────────────────────────────────────────────

class TestCategories:
    def test_by_category_order_and_membership(self, library):
        grouped = library.by_category()
        assert list(grouped)[0] == Category.HEROES
        assert list(grouped[Category.LAYOUT]) == LAYOUTS
        assert sum(len(parts) for parts in grouped.values()) == len(library.all_keys())

    def test_for_category_accepts_string(self, library):
        assert list(library.for_category("layout")) == LAYOUTS
        assert library.for_category("bogus") == {}

    def test_category_info(self, library):
        assert library.category_info("layout")["icon"] == "columns"
        assert library.category_info(Category.FAQS)["label"] == "FAQs"
        assert library.category_info("bogus") is None
        assert len(library.categories()) == 12

    def test_unknown_category_rejected(self):
        with pytest.raises(InvalidDefinition, match="unknown category"):
            load_definition("misc/thing", {"category": "misc", "fields": []})


# ── Construction ──────────────────────────────────────────────────────────

def test_duplicate_keys_rejected():
    definition = load_definition("content/a", {"category": "content", "fields": ["title"]})
    with pytest.raises(DuplicateDefinition):
        PagePartLibrary([definition, definition])


def test_undeclared_group_rejected():
    with pytest.raises(InvalidDefinition, match="undeclared group"):
        load_definition("content/a", {
            "category": "content",
            "fields": {"title": {"type": "text", "group": "missing"}},
        })


def test_template_exists(tmp_path):
    (tmp_path / "heroes").mkdir()
    (tmp_path / "heroes" / "hero_centered.liquid").write_text("{{ page_part.title.content }}")
    library = PagePartLibrary.builtin(templates=DirectoryTemplateSource(tmp_path))
    assert library.template_exists("heroes/hero_centered")
    assert not library.template_exists("heroes/hero_split")
    assert not library.template_exists("../etc/passwd")


# ── Contenu par défaut ────────────────────────────────────────────────────

class TestDefaultBlockContents:
    def test_leaf_seeded_with_empty_content(self, library):
        contents = library.default_block_contents("heroes/hero_centered", "fr")
        blocks = contents["fr"]["blocks"]
        assert list(blocks) == list(library.find("heroes/hero_centered").fields)
        assert blocks["title"] == {"content": ""}

    def test_field_default_used(self):
        library = PagePartLibrary.from_raw({
            "cta/simple": {
                "category": "cta",
                "fields": {"cta_text": {"type": "text", "default": "Contact us"}},
            },
        })
        contents = library.default_block_contents("cta/simple", "en")
        assert contents == {"en": {"blocks": {"cta_text": {"content": "Contact us"}}}}

    def test_container_has_no_contents(self, library):
        assert library.default_block_contents("layout/layout_two_column_equal") is None


# ── Export JSON ───────────────────────────────────────────────────────────

class TestJsonExport:
    def test_one_entry_per_definition(self, library):
        export = library.to_json_schema()
        parts = [p for c in export["categories"] for p in c["parts"]]
        assert sorted(p["key"] for p in parts) == sorted(library.all_keys())

    def test_fields_match_definition(self, library):
        export = library.to_json_schema()
        for category in export["categories"]:
            for part in category["parts"]:
                definition = library.find(part["key"])
                assert [f["name"] for f in part["fields"]] == list(definition.fields)
                assert part["legacy"] == definition.legacy

    def test_container_keys_only_on_containers(self, library):
        export = library.to_json_schema()
        for category in export["categories"]:
            for part in category["parts"]:
                container = library.is_container(part["key"])
                assert ("is_container" in part) == container
                assert ("slots" in part) == container

    def test_category_metadata(self, library):
        layout = next(c for c in library.to_json_schema()["categories"] if c["key"] == "layout")
        assert layout["icon"] == "columns"
        assert layout["parts"][0]["slots"]["left"]["width"] == "50%"

    def test_empty_categories_listed(self):
        library = PagePartLibrary.from_raw({"faqs/only": {"category": "faqs", "fields": ["title"]}})
        export = library.to_json_schema()
        assert [c["key"] for c in export["categories"]] == [c.value for c in library.categories()]
        by_key = {c["key"]: c for c in export["categories"]}
        assert [p["key"] for p in by_key["faqs"]["parts"]] == ["faqs/only"]
        assert by_key["heroes"]["parts"] == []
        assert by_key["heroes"]["label"] == "Hero Sections"


# ── Lecture seule ─────────────────────────────────────────────────────────

class TestReadOnlyCatalog:
    def test_definition_mappings_reject_writes(self, library):
        hero = library.find("heroes/hero_centered")
        with pytest.raises(TypeError):
            hero.fields.pop("title")
        with pytest.raises(TypeError):
            hero.fields["title"].validation["max_length"] = 1
        with pytest.raises(TypeError):
            hero.field_groups.clear()
        assert "title" in library.find("heroes/hero_centered").fields
        assert library.find("heroes/hero_centered").field_groups

    def test_slots_reject_writes(self, library):
        layout = library.find("layout/layout_two_column_equal")
        with pytest.raises(TypeError):
            layout.slots["middle"] = layout.slots["left"]
        assert library.slot_names("layout/layout_two_column_equal") == ["left", "right"]

    def test_explicit_choices_are_frozen(self):
        library = PagePartLibrary.from_raw({
            "content/menu": {
                "category": "content",
                "fields": {"tabs": {"type": "radio", "choices": [{"value": "a", "label": "A"}]}},
            },
        })
        choices = library.find("content/menu").fields["tabs"].options["choices"]
        with pytest.raises(TypeError):
            choices[0]["label"] = "changed"
        with pytest.raises(AttributeError):
            choices.append({"value": "b", "label": "B"})

    def test_categories_reject_writes(self, library):
        with pytest.raises(TypeError):
            library.categories()[Category.HEROES]["label"] = "x"
        with pytest.raises(TypeError):
            library.categories()[Category.HEROES] = {}
        assert library.category_info("heroes")["label"] == "Hero Sections"
