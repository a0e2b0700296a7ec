"""Catalogue intégré + registre dynamique des page parts."""
from .categories import CATEGORIES
from .library import PagePartLibrary, default_library
from .registry import DefinitionBuilder, PagePartRegistry
from .templates import DirectoryTemplateSource, NullTemplateSource
