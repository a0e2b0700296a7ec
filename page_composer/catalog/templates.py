"""
Sources de templates Liquid — utilisées uniquement à l'enregistrement.

Une clé "heroes/hero_promo" correspond au fichier <root>/heroes/hero_promo.liquid.
Le rendu des templates est hors périmètre : on ne fait que lire le texte
pour vérifier que chaque champ déclaré y est référencé.
"""
import re
from pathlib import Path
from typing import Iterable, List, Optional, Protocol


class TemplateSource(Protocol):
    def read(self, key: str) -> Optional[str]:
        """Texte du template de la clé, None s'il n'existe pas."""
        ...

    def exists(self, key: str) -> bool:
        ...


class NullTemplateSource:
    """Aucun template : la validation est toujours ignorée."""

    def read(self, key: str) -> Optional[str]:
        return None

    def exists(self, key: str) -> bool:
        return False


class DirectoryTemplateSource:
    """Templates <root>/<key>.liquid sur disque."""

    SUFFIX = ".liquid"

    def __init__(self, root):
        self.root = Path(root)

    def path_for(self, key: str) -> Optional[Path]:
        key = str(key).strip("/")
        if not key or ".." in Path(key).parts:
            return None
        path = self.root / f"{key}{self.SUFFIX}"
        return path if path.is_file() else None

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if path is None:
            return None
        return path.read_text(encoding="utf-8")

    def exists(self, key: str) -> bool:
        return self.path_for(key) is not None


def template_source_from_dir(directory: str) -> TemplateSource:
    """DirectoryTemplateSource si un dossier est configuré, sinon NullTemplateSource."""
    if directory:
        return DirectoryTemplateSource(directory)
    return NullTemplateSource()


def _tag_patterns(field_name: str) -> List[re.Pattern]:
    name = re.escape(field_name)
    return [
        # {{ page_part.title.content }} / {{ title | upcase }}
        re.compile(r"\{\{-?[^}]*\b" + name + r"\b[^}]*-?\}\}"),
        # {% if page_part.title %} / {% unless title == "" %}
        re.compile(r"\{%-?\s*(?:if|elsif|unless)\b[^%]*\b" + name + r"\b[^%]*-?%\}"),
    ]


def is_referenced(template: str, field_name: str) -> bool:
    return any(p.search(template) for p in _tag_patterns(field_name))


def unreferenced_fields(template: str, field_names: Iterable[str]) -> List[str]:
    """Champs déclarés mais jamais utilisés par le template (ordre de déclaration)."""
    return [name for name in field_names if not is_referenced(template, name)]
