"""
Inférence du type d'un champ depuis son nom.

Table ordonnée de règles (nom, prédicat, type) : la première qui matche
gagne. L'ordre fait partie du contrat (ex. "cta_text" → textarea,
"plan_1_price" → currency avant "_value"/number), ne pas le réordonner.
"""
from typing import Callable, NamedTuple, Tuple

from ..core.schemas import FieldType

Predicate = Callable[[str], bool]


class InferenceRule(NamedTuple):
    name: str
    matches: Predicate
    field_type: FieldType


def _suffix(*suffixes: str) -> Predicate:
    return lambda name: name.endswith(suffixes)


def _prefix(*prefixes: str) -> Predicate:
    return lambda name: name.startswith(prefixes)


def _exact(*names: str) -> Predicate:
    allowed = frozenset(names)
    return lambda name: name in allowed


def _any(*predicates: Predicate) -> Predicate:
    return lambda name: any(p(name) for p in predicates)


def _without(fragment: str, predicate: Predicate) -> Predicate:
    return lambda name: fragment not in name and predicate(name)


SOCIAL_PLATFORMS = ("facebook", "twitter", "instagram", "linkedin", "youtube", "tiktok", "pinterest")

INFERENCE_RULES: Tuple[InferenceRule, ...] = (
    InferenceRule("faq_items", _exact("faq_items"), FieldType.FAQ_ARRAY),
    InferenceRule(
        "feature_list",
        _without("faq", _suffix("_features", "_amenities")),
        FieldType.FEATURE_LIST,
    ),
    InferenceRule(
        "image",
        _any(
            _suffix("_image", "_photo", "_img", "_avatar", "_logo", "_banner", "_thumbnail", "_src"),
            _prefix("image_", "photo_", "background_", "avatar_", "logo_", "banner_"),
            _exact("image", "photo", "background", "avatar", "logo", "banner"),
        ),
        FieldType.IMAGE,
    ),
    InferenceRule("html", _any(_suffix("_html"), _exact("content_html")), FieldType.HTML),
    InferenceRule("email", _any(_suffix("_email", "_mail"), _exact("email")), FieldType.EMAIL),
    InferenceRule(
        "phone",
        _any(
            _suffix("_phone", "_tel", "_mobile", "_fax", "_telephone"),
            _exact("phone", "tel", "mobile", "fax"),
        ),
        FieldType.PHONE,
    ),
    InferenceRule(
        "currency",
        _suffix("_price", "_cost", "_amount", "_fee", "_rate", "_salary"),
        FieldType.CURRENCY,
    ),
    InferenceRule(
        "number",
        _suffix(
            "_count", "_number", "_value", "_qty", "_quantity", "_total", "_year", "_age",
            "_rating", "_score", "_order", "_index", "_columns", "_rows",
        ),
        FieldType.NUMBER,
    ),
    InferenceRule(
        "url",
        _any(_suffix("_url", "_link", "_href", "_website"), _exact("url", "website", "href")),
        FieldType.URL,
    ),
    InferenceRule("social_link", _exact(*SOCIAL_PLATFORMS), FieldType.SOCIAL_LINK),
    InferenceRule("color", _suffix("_color", "_colour"), FieldType.COLOR),
    InferenceRule("icon", _any(_suffix("_icon"), _exact("icon")), FieldType.ICON),
    InferenceRule(
        "select",
        _any(
            _suffix(
                "_style", "_type", "_layout", "_position", "_alignment", "_size",
                "_theme", "_variant", "_format", "_mode",
            ),
            _exact("style", "layout", "position", "alignment", "size", "theme", "variant"),
        ),
        FieldType.SELECT,
    ),
    InferenceRule(
        "boolean",
        _any(
            _prefix("is_", "has_", "show_", "enable_"),
            _exact("visible", "active", "featured", "published"),
            _suffix("_enabled", "_visible", "_active", "_featured", "_published"),
        ),
        FieldType.BOOLEAN,
    ),
    InferenceRule(
        "date",
        _any(_suffix("_date", "_day"), _exact("date", "start_date", "end_date")),
        FieldType.DATE,
    ),
    InferenceRule(
        "map_embed",
        _any(_suffix("_map", "_embed", "_iframe"), _exact("map_embed")),
        FieldType.MAP_EMBED,
    ),
    InferenceRule(
        "textarea",
        _any(
            _suffix(
                "_content", "_description", "_body", "_bio", "_text", "_summary", "_excerpt",
                "_intro", "_message", "_caption", "_quote", "_answer", "_details",
            ),
            _exact("content", "description", "body", "bio", "summary", "excerpt", "intro", "message"),
        ),
        FieldType.TEXTAREA,
    ),
)


def matching_rule(field_name) -> InferenceRule | None:
    """Première règle qui matche (None → type text par défaut)."""
    name = str(field_name).lower()
    for rule in INFERENCE_RULES:
        if rule.matches(name):
            return rule
    return None


def infer_type(field_name) -> FieldType:
    """Type déduit du nom : fonction totale et déterministe."""
    rule = matching_rule(field_name)
    return rule.field_type if rule else FieldType.TEXT
