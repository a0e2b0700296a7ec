"""
Locales — résolution du contenu par locale + utilitaires de codes.

Deux formats coexistent :
  code complet  "en-UK", "pt-BR"   (URLs, réglages du site)
  code de base  "en", "pt"         (stockage des block_contents)

Résolution d'un contenu {locale: bloc} pour une locale demandée :
  1. locale exacte        "es-MX"
  2. langue de base       "es"     (seulement si différente de 1.)
  3. repli fixe           "en"
  4. première entrée du dict (ordre d'insertion)
Une entrée vide (None, False, {}, [], texte blanc) ne compte pas pour 1 à 3.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .. import config

LOCALE_LABELS = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "pl": "Polish",
    "ru": "Russian",
    "tr": "Turkish",
    "ar": "Arabic",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "el": "Greek",
    "ca": "Catalan",
    "ro": "Romanian",
    "bg": "Bulgarian",
    "vi": "Vietnamese",
}

VARIANT_LABELS = {
    "UK": "UK",
    "US": "US",
    "BR": "Brazil",
    "PT": "Portugal",
    "MX": "Mexico",
    "AR": "Argentina",
    "CA": "Canada",
    "AU": "Australia",
}


def _present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return value != {} and value != []


def resolve_block_contents(
    contents: Optional[Mapping[str, Any]],
    locale: Optional[str] = None,
    default_locale: Optional[str] = None,
) -> Optional[Any]:
    """
    Bloc de contenu pour `locale` (voir l'ordre en tête de module).
    None si contents est absent ou vide. Sans locale : locale par défaut.
    """
    if not contents:
        return None
    locale = str(locale or default_locale or config.DEFAULT_LOCALE)

    if _present(contents.get(locale)):
        return contents[locale]

    base = locale.split("-")[0]
    if base != locale and _present(contents.get(base)):
        return contents[base]

    if _present(contents.get(config.FALLBACK_LOCALE)):
        return contents[config.FALLBACK_LOCALE]

    return next(iter(contents.values()))


def field_values(block: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """{"blocks": {"title": {"content": "Hi"}}} → {"title": "Hi"}."""
    if not isinstance(block, Mapping):
        return {}
    blocks = block.get("blocks") or {}
    values = {}
    for name, entry in blocks.items():
        values[name] = entry.get("content") if isinstance(entry, Mapping) else entry
    return values


# ── Codes de locale ────────────────────────────────────────────────────

def locale_to_base(locale: Optional[str]) -> str:
    """'en-UK' → 'en', 'PT-br' → 'pt', None / '' → 'en'."""
    if not locale or not str(locale).strip():
        return config.FALLBACK_LOCALE
    return str(locale).split("-")[0].lower()


def locale_variant(locale: Optional[str]) -> Optional[str]:
    """'en-UK' → 'UK', 'es' → None."""
    if not locale:
        return None
    parts = str(locale).split("-")
    return parts[1] if len(parts) > 1 else None


def supported_locales_for_content(locales: Optional[Iterable[str]]) -> List[str]:
    """["en-UK", "en-US", "es", "pt-BR"] → ["en", "es", "pt"] (ordre conservé, sans doublons)."""
    if not locales:
        return [config.FALLBACK_LOCALE]
    bases: List[str] = []
    for locale in locales:
        if not locale:
            continue
        base = locale_to_base(locale)
        if base not in bases:
            bases.append(base)
    return bases


def build_locale_label(base: str, variant: Optional[str] = None) -> str:
    """('en', 'UK') → 'English (UK)', ('xx', None) → 'XX'."""
    label = LOCALE_LABELS.get(base, base.upper())
    if variant:
        return f"{label} ({VARIANT_LABELS.get(variant, variant)})"
    return label


def build_locale_details(locales: Optional[Iterable[str]]) -> List[Dict[str, str]]:
    if not locales:
        return [{"full": "en", "base": "en", "label": "English"}]
    return [
        {
            "full": locale,
            "base": locale_to_base(locale),
            "label": build_locale_label(locale_to_base(locale), locale_variant(locale)),
        }
        for locale in locales
        if locale
    ]
