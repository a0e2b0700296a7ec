"""
Configuration — lue une seule fois depuis l'environnement.

PAGE_COMPOSER_DEFAULT_LOCALE  locale par défaut de l'application (défaut "en")
PAGE_COMPOSER_TEMPLATE_DIR    dossier des templates <key>.liquid (vide = pas de lookup)
PAGE_COMPOSER_LOG_LEVEL       niveau de log de create_app() (défaut "INFO")
"""
import os

DEFAULT_LOCALE = os.getenv("PAGE_COMPOSER_DEFAULT_LOCALE", "en")
TEMPLATE_DIR   = os.getenv("PAGE_COMPOSER_TEMPLATE_DIR", "")
LOG_LEVEL      = os.getenv("PAGE_COMPOSER_LOG_LEVEL", "INFO")

# Étape 3 de la résolution de locale : fixe, non configurable
FALLBACK_LOCALE = "en"
