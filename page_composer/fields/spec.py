"""
Normalisation config brute → FieldSpec.

Deux formes acceptées (mélangeables) :
  plate    : {"type": "text", "max_length": 80, "rows": 2, "choices": [...]}
  imbriquée: {"type": "text", "validation": {...}, "options": {...}}

Toute forme non reconnue lève InvalidFieldConfig plutôt que de retomber
silencieusement sur des valeurs par défaut.
"""
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..core.errors import InvalidFieldConfig
from ..core.schemas import FieldSpec, FieldType, VALIDATION_KEYS
from .inference import infer_type

OPTION_KEYS = (
    "choices", "aspect_ratio", "recommended_size", "accept", "max_size_mb", "rows",
    "toolbar", "icon_set", "format", "presets", "platforms", "providers", "delimiter",
    "allow_empty", "currency_code", "locale", "step", "max_selections", "default",
)

SPEC_KEYS = (
    "name", "type", "label", "hint", "placeholder", "component", "required",
    "content_guidance", "group", "paired_with", "order", "item_schema",
    "validation", "options",
)

_KNOWN_KEYS = frozenset(SPEC_KEYS) | frozenset(VALIDATION_KEYS) | frozenset(OPTION_KEYS)


def coerce_field_type(value: Any, owner: str = "field") -> FieldType:
    if isinstance(value, FieldType):
        return value
    try:
        return FieldType(str(value))
    except ValueError:
        raise InvalidFieldConfig(f"{owner}: unknown field type {value!r}") from None


def _mapping(config: Mapping, key: str, owner: str) -> dict:
    value = config.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidFieldConfig(f"{owner}: {key} must be a mapping, got {type(value).__name__}")
    return dict(value)


def _item_schema(raw: Any, owner: str) -> Optional[dict]:
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        return {str(sub): field_spec_from_config(sub, cfg) for sub, cfg in raw.items()}
    if isinstance(raw, (list, tuple)):
        # liste de noms seuls → types inférés
        return {str(sub): field_spec_from_config(sub, None) for sub in raw}
    raise InvalidFieldConfig(f"{owner}: item_schema must be a mapping or a list of names")


def field_spec_from_config(name, config: Any = None) -> FieldSpec:
    """Construit le FieldSpec d'un champ. config : None, FieldSpec ou mapping."""
    name = str(name)
    if isinstance(config, FieldSpec):
        return config if config.name == name else config.model_copy(update={"name": name})
    if config is None:
        config = {}
    if not isinstance(config, Mapping):
        raise InvalidFieldConfig(
            f"{name}: field config must be a mapping, got {type(config).__name__}"
        )

    unknown = sorted(str(k) for k in config if k not in _KNOWN_KEYS)
    if unknown:
        raise InvalidFieldConfig(f"{name}: unknown config keys {unknown}")

    raw_type = config.get("type")
    inferred = raw_type is None
    field_type = infer_type(name) if inferred else coerce_field_type(raw_type, name)

    validation = _mapping(config, "validation", name)
    validation.update({k: config[k] for k in VALIDATION_KEYS if k in config})
    options = _mapping(config, "options", name)
    options.update({k: config[k] for k in OPTION_KEYS if k in config})

    try:
        return FieldSpec(
            name=name,
            type=field_type,
            label=config.get("label"),
            hint=config.get("hint"),
            placeholder=config.get("placeholder"),
            component=config.get("component"),
            required=config.get("required"),
            validation=validation,
            options=options,
            content_guidance=_mapping(config, "content_guidance", name),
            group=None if config.get("group") is None else str(config["group"]),
            paired_with=None if config.get("paired_with") is None else str(config["paired_with"]),
            order=config.get("order"),
            item_schema=_item_schema(config.get("item_schema"), name),
            inferred=inferred,
        )
    except ValidationError as exc:
        raise InvalidFieldConfig(f"{name}: {exc}") from exc
