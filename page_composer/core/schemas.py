"""
Schémas Pydantic du moteur de composition.
Structure : PagePartDefinition → FieldSpec / FieldGroup / SlotSpec
            ThemeSection → ThemeFieldSpec

Tous les modèles du catalogue sont figés (frozen) : construits une fois au
démarrage, jamais modifiés ensuite.
"""
import copy
from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ── ENUMS ──────────────────────────────────────────────────────────────

class FieldType(str, Enum):
    TEXT         = "text"
    TEXTAREA     = "textarea"
    HTML         = "html"
    MARKDOWN     = "markdown"
    NUMBER       = "number"
    CURRENCY     = "currency"
    PERCENTAGE   = "percentage"
    EMAIL        = "email"
    PHONE        = "phone"
    URL          = "url"
    IMAGE        = "image"
    VIDEO        = "video"
    FILE         = "file"
    SELECT       = "select"
    RADIO        = "radio"
    CHECKBOX     = "checkbox"
    BOOLEAN      = "boolean"
    MULTI_SELECT = "multi_select"
    ICON         = "icon"
    COLOR        = "color"
    DATE         = "date"
    DATETIME     = "datetime"
    SOCIAL_LINK  = "social_link"
    MAP_EMBED    = "map_embed"
    ARRAY        = "array"
    FAQ_ARRAY    = "faq_array"
    FEATURE_LIST = "feature_list"


class Category(str, Enum):
    HEROES       = "heroes"
    FEATURES     = "features"
    TESTIMONIALS = "testimonials"
    CTA          = "cta"
    STATS        = "stats"
    TEAMS        = "teams"
    GALLERIES    = "galleries"
    PRICING      = "pricing"
    FAQS         = "faqs"
    CONTENT      = "content"
    CONTACT      = "contact"
    LAYOUT       = "layout"


class ThemeFieldType(str, Enum):
    COLOR       = "color"
    FONT_SELECT = "font_select"
    SELECT      = "select"
    RANGE       = "range"
    SIZE        = "size"
    TOGGLE      = "toggle"
    TEXT        = "text"
    TEXTAREA    = "textarea"


ThemeSectionName = Literal["colors", "typography", "layout", "appearance", "buttons", "header", "footer"]

CHOICE_TYPES = frozenset({FieldType.SELECT, FieldType.RADIO, FieldType.MULTI_SELECT})
ARRAY_TYPES  = frozenset({FieldType.ARRAY, FieldType.FAQ_ARRAY})

VALIDATION_KEYS = (
    "min_length", "max_length", "min", "max", "step", "pattern", "min_items", "max_items",
)


# ── Valeurs figées ─────────────────────────────────────────────────────

class FrozenDict(dict):
    """dict en lecture seule : reste un dict pour pydantic et json, refuse toute écriture."""

    def _read_only(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __reduce__(self):
        return (FrozenDict, (dict(self),))

    def __deepcopy__(self, memo):
        return FrozenDict({k: copy.deepcopy(v, memo) for k, v in self.items()})


def freeze(value: Any) -> Any:
    """Mappings → FrozenDict, listes → tuples, récursivement (modèles laissés tels quels)."""
    if isinstance(value, BaseModel):
        return value
    if isinstance(value, Mapping):
        return FrozenDict({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Copie profonde modifiable : mappings → dict, tuples / listes → list."""
    if isinstance(value, BaseModel):
        return value
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value


def _freeze_fields(model: BaseModel, *names: str) -> None:
    # frozen=True interdit setattr ; on écrit directement dans __dict__
    for name in names:
        value = getattr(model, name)
        if value is not None:
            object.__setattr__(model, name, freeze(value))


def check_choices(choices: Any, owner: str) -> None:
    """Liste de choix non vide, chaque entrée avec value ET label."""
    if not choices or not isinstance(choices, (list, tuple)):
        raise ValueError(f"{owner}: choices must be a non-empty list")
    for choice in choices:
        if not isinstance(choice, Mapping) or "value" not in choice or "label" not in choice:
            raise ValueError(f"{owner}: every choice needs a value and a label, got {choice!r}")


# ── Page parts ─────────────────────────────────────────────────────────

class FieldSpec(BaseModel):
    """Un champ de template, forme normalisée (explicite ou inférée depuis le nom)."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: FieldType
    label: Optional[str] = None
    hint: Optional[str] = None
    placeholder: Optional[str] = None
    component: Optional[str] = None
    required: Optional[bool] = None
    validation: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)
    content_guidance: Dict[str, str] = Field(default_factory=dict)
    group: Optional[str] = None
    paired_with: Optional[str] = None
    order: Optional[int] = None
    item_schema: Optional[Dict[str, "FieldSpec"]] = None
    # True quand le type vient de infer_type() (champ déclaré par son seul nom)
    inferred: bool = False

    @field_validator("validation")
    @classmethod
    def _known_rules(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        unknown = sorted(set(v) - set(VALIDATION_KEYS))
        if unknown:
            raise ValueError(f"unknown validation rules: {unknown}")
        return v

    @model_validator(mode="after")
    def _choices_for_choice_types(self):
        if self.type in CHOICE_TYPES and not self.inferred:
            check_choices(self.options.get("choices"), self.name)
        return self

    @model_validator(mode="after")
    def _read_only(self):
        _freeze_fields(self, "validation", "options", "content_guidance", "item_schema")
        return self


FieldSpec.model_rebuild()


class FieldGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    order: Optional[int] = None


class SlotSpec(BaseModel):
    """Région nommée d'un conteneur. width est indicatif (pas de somme à 100)."""
    model_config = ConfigDict(frozen=True)

    label: str
    description: str = ""
    width: str = ""


class PagePartDefinition(BaseModel):
    """Entrée du catalogue : feuille (fields) XOR conteneur (slots)."""
    model_config = ConfigDict(frozen=True)

    key: str
    category: Category
    label: str
    description: str = ""
    fields: Dict[str, FieldSpec] = Field(default_factory=dict)
    field_groups: Dict[str, FieldGroup] = Field(default_factory=dict)
    is_container: bool = False
    slots: Dict[str, SlotSpec] = Field(default_factory=dict)
    legacy: bool = False

    @model_validator(mode="after")
    def _leaf_or_container(self):
        if self.is_container:
            if not self.slots:
                raise ValueError(f"{self.key}: a container must declare at least one slot")
            if self.fields:
                raise ValueError(f"{self.key}: a container cannot declare fields")
        elif self.slots:
            raise ValueError(f"{self.key}: slots are only allowed on containers")

        for name, spec in self.fields.items():
            if spec.name != name:
                raise ValueError(f"{self.key}: field {name!r} is named {spec.name!r}")
            if spec.group is not None and spec.group not in self.field_groups:
                raise ValueError(f"{self.key}.{name}: undeclared group {spec.group!r}")
        return self

    @model_validator(mode="after")
    def _read_only(self):
        _freeze_fields(self, "fields", "field_groups", "slots")
        return self

    @property
    def slot_names(self) -> List[str]:
        return list(self.slots)


# ── Thème ──────────────────────────────────────────────────────────────

class ThemeOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class ThemeFieldSpec(BaseModel):
    """Réglage de thème : type + default (toujours présent) + contraintes."""
    model_config = ConfigDict(frozen=True)

    name: str
    section: ThemeSectionName
    type: ThemeFieldType
    label: str
    description: str = ""
    default: Any
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    unit: Optional[str] = None
    options: Tuple[ThemeOption, ...] = ()

    @model_validator(mode="after")
    def _options_for_selects(self):
        if self.type in (ThemeFieldType.SELECT, ThemeFieldType.FONT_SELECT) and not self.options:
            raise ValueError(f"{self.name}: {self.type.value} fields need options")
        return self

    @property
    def option_values(self) -> List[str]:
        return [o.value for o in self.options]


class ThemeSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: ThemeSectionName
    label: str
    icon: str = ""
    fields: Dict[str, ThemeFieldSpec] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _read_only(self):
        _freeze_fields(self, "fields")
        return self
