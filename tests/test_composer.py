"""Tests PageComposer — feuilles, conteneurs, slots, visibilité."""
import logging

import pytest

from page_composer.composer import PageComposer, PageContentItem
from page_composer.core.errors import UnknownSlot

TWO_COLS = "layout/layout_two_column_equal"


def hero(title_en="Hello", title_fr=None, **extra):
    contents = {"en": {"blocks": {"title": {"content": title_en}}}}
    if title_fr:
        contents["fr"] = {"blocks": {"title": {"content": title_fr}}}
    return {"key": "heroes/hero_centered", "block_contents": contents, **extra}


@pytest.fixture
def composer(library):
    return PageComposer(library)


# ── Feuilles ──────────────────────────────────────────────────────────────

class TestLeaves:
    def test_leaf_content_resolved_for_locale(self, composer):
        [part] = composer.compose([hero(title_fr="Bonjour")], locale="fr-CA")
        assert part.is_container is False
        assert part.values == {"title": "Bonjour"}
        assert part.label == "Centered Hero"
        assert part.definition.key == "heroes/hero_centered"

    def test_leaf_falls_back_to_english(self, composer):
        [part] = composer.compose([hero()], locale="de")
        assert part.values == {"title": "Hello"}

    def test_leaf_without_contents(self, composer):
        [part] = composer.compose([{"key": "cta/cta_banner"}], locale="en")
        assert part.content is None
        assert part.values == {}

    def test_item_label_and_id_kept(self, composer):
        [part] = composer.compose([hero(id="pp-1", label="Landing hero")], locale="en")
        assert (part.id, part.label) == ("pp-1", "Landing hero")

    def test_schema_only_on_request(self, composer):
        [plain] = composer.compose([hero()], locale="en")
        [detailed] = composer.compose([hero()], locale="en", include_schema=True)
        assert plain.field_schema is None
        assert [g.key for g in detailed.field_schema.groups] == ["titles", "cta", "media"]

    def test_invisible_items_skipped(self, composer):
        parts = composer.compose([hero(visible=False), {"key": "cta/cta_banner"}], locale="en")
        assert [p.key for p in parts] == ["cta/cta_banner"]

    def test_unknown_key_composes_without_definition(self, composer, page_composer_logs):
        [part] = composer.compose([{"key": "custom/thing"}], locale="en")
        assert part.definition is None
        assert part.label == "custom/thing"
        assert any(r.levelno == logging.WARNING and "custom/thing" in r.getMessage()
                   for r in page_composer_logs.records)

    def test_accepts_models_and_dicts(self, composer):
        items = [PageContentItem(key="cta/cta_banner"), {"key": "faqs/faq_accordion"}]
        assert [p.key for p in composer.compose(items, locale="en")] == [
            "cta/cta_banner", "faqs/faq_accordion",
        ]


# ── Conteneurs ────────────────────────────────────────────────────────────

class TestContainers:
    def test_slots_filled_in_caller_order(self, composer):
        item = {
            "key": TWO_COLS,
            "slots": {
                "right": [{"key": "cta/cta_banner"}],
                "left": [hero(title_en="First"), hero(title_en="Second")],
            },
        }
        [part] = composer.compose([item], locale="en")
        assert part.is_container is True
        # ordre des slots = déclaration, pas ordre du caller
        assert list(part.slots) == ["left", "right"]
        assert [p.values["title"] for p in part.slots["left"]] == ["First", "Second"]
        assert [p.key for p in part.slots["right"]] == ["cta/cta_banner"]

    def test_every_declared_slot_present(self, composer):
        [part] = composer.compose([{"key": "layout/layout_three_column_equal"}], locale="en")
        assert part.slots == {"left": [], "center": [], "right": []}

    def test_nested_containers(self, composer):
        inner = {"key": "layout/layout_sidebar_left", "slots": {"main": [hero(title_en="Deep")]}}
        [outer] = composer.compose([{"key": TWO_COLS, "slots": {"left": [inner]}}], locale="en")
        nested = outer.slots["left"][0]
        assert nested.is_container
        assert nested.slots["main"][0].values == {"title": "Deep"}
        assert nested.slots["sidebar"] == []

    def test_invisible_items_skipped_inside_slots(self, composer):
        item = {"key": TWO_COLS, "slots": {"left": [hero(visible=False), {"key": "cta/cta_banner"}]}}
        [part] = composer.compose([item], locale="en")
        assert [p.key for p in part.slots["left"]] == ["cta/cta_banner"]

    def test_unknown_slot_raises(self, composer):
        item = {"key": TWO_COLS, "slots": {"middle": [hero()]}}
        with pytest.raises(UnknownSlot) as exc:
            composer.compose([item], locale="en")
        assert exc.value.slot_name == "middle"
        assert exc.value.declared == ["left", "right"]
        assert "is not valid for container" in str(exc.value)

    def test_unknown_slot_in_nested_container(self, composer):
        inner = {"key": "layout/layout_sidebar_left", "slots": {"left": []}}
        with pytest.raises(UnknownSlot):
            composer.compose([{"key": TWO_COLS, "slots": {"right": [inner]}}], locale="en")

    def test_slots_on_leaf_raise(self, composer):
        with pytest.raises(UnknownSlot):
            composer.compose([hero(slots={"left": []})], locale="en")

    def test_to_dict(self, composer):
        [part] = composer.compose([{"key": TWO_COLS, "slots": {"left": [hero()]}}], locale="en")
        data = part.to_dict()
        assert data["category"] == "layout"
        assert data["slots"]["left"][0]["values"] == {"title": "Hello"}
        assert "content" not in data
