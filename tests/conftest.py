import logging

import pytest

from page_composer.catalog.library import PagePartLibrary
from page_composer.fields.builder import FieldSchemaBuilder


@pytest.fixture
def library():
    """Catalogue intégré neuf par test (le registre dynamique démarre vide)."""
    return PagePartLibrary.builtin()


@pytest.fixture
def builder(library):
    return FieldSchemaBuilder(library)


@pytest.fixture
def page_composer_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="page_composer")
    return caplog
