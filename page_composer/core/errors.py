"""Exceptions du moteur de composition."""


class PageComposerError(Exception):
    """Erreur de base de page_composer."""


class InvalidFieldConfig(PageComposerError, ValueError):
    """Configuration de champ mal formée (forme, clé ou type inconnus)."""


class InvalidDefinition(PageComposerError, ValueError):
    """Définition de page part incohérente (conteneur ET feuille, groupe inconnu…)."""


class DuplicateDefinition(PageComposerError, KeyError):
    """Clé déjà présente dans le catalogue ou le registre."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RegistryClosed(PageComposerError, RuntimeError):
    """define() appelé après la fin de la phase de démarrage."""


class UnknownSlot(PageComposerError, KeyError):
    """Slot absent de la déclaration du conteneur."""

    def __init__(self, container_key: str, slot_name: str, declared: list):
        self.container_key = container_key
        self.slot_name = slot_name
        self.declared = list(declared)
        super().__init__(container_key, slot_name)

    def __str__(self) -> str:
        return (
            f"Slot {self.slot_name!r} is not valid for container {self.container_key!r}"
            f" (declared: {self.declared})"
        )
