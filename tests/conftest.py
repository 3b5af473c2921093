import os

# Deterministic tokens for the API tests: no dictionary corrections
os.environ.setdefault('SPELLCHECK_ENABLED', 'false')

import pytest
from src.app.core.catalog import Catalog, CatalogEntry
from src.app.core.tables import ResponseTable


class DictCorrector:
    """Fake spell corrector backed by a typo -> candidates mapping."""

    def __init__(self, fixes=None):
        self.fixes = fixes or {}
        self.calls = []

    def correct(self, word):
        self.calls.append(word)
        return list(self.fixes.get(word, []))


def make_entry(id, name, price, **overrides):
    fields = dict(
        load_capacity='1 kg', flight_time=f'{10 + id} minutes', camera_resolution=10 * id,
        max_speed=f'{30 + id} km/h', weight=f'{id} kg', range=f'{id} km', best_for=f'{name} things',
    )
    fields.update(overrides)
    return CatalogEntry(id=id, name=name, price=price, **fields)


@pytest.fixture
def catalog():
    return Catalog([
        make_entry(1, 'HAWK 2.O', 14999),
        make_entry(2, 'VIRAJ 2.O', 500000),
        make_entry(3, 'GARUDA X', 85000),
    ])


@pytest.fixture
def keywords():
    return ResponseTable([
        ('drone types', 'TYPES'),
        ('price list', 'PRICES'),
        ('warranty', 'WARRANTY'),
    ])


@pytest.fixture
def generic():
    return ResponseTable([
        ('hello', 'GREETING'),
        ('hi', 'HI'),
        ('help', 'HELP'),
    ])


@pytest.fixture
def corrector():
    return DictCorrector()
