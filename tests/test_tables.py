import json
import pytest
from src.app.core.catalog import Catalog, CatalogError, load_catalog
from src.app.core.config import settings
from src.app.core.tables import ResponseTable, load_response_tables
from conftest import make_entry


def test_catalog_rejects_duplicate_names_ignoring_case():
    with pytest.raises(CatalogError):
        Catalog([make_entry(1, 'Hawk', 1), make_entry(2, 'HAWK', 2)])


def test_catalog_rejects_duplicate_ids_and_empty_names():
    with pytest.raises(CatalogError):
        Catalog([make_entry(1, 'Hawk', 1), make_entry(1, 'Viraj', 2)])
    with pytest.raises(CatalogError):
        Catalog([make_entry(1, '  ', 1)])


def test_find_in_text_and_mentions(catalog):
    assert catalog.find_in_text('is GARUDA X any good').id == 3
    assert catalog.find_in_text('garuda') is None
    assert catalog.mentions('garuda')
    assert catalog.mentions('2.o')
    assert not catalog.mentions('dragonfly')
    assert not catalog.mentions('')


def test_entries_are_immutable(catalog):
    entry = next(iter(catalog))
    with pytest.raises(Exception):
        entry.price = 1


def test_bundled_catalog_loads():
    catalog = load_catalog(settings.CATALOG_PATH)
    hawk = catalog.find_in_text('hawk 2.o')
    assert hawk.price == 14999
    assert catalog.find_in_text('viraj 2.o').price == 500000
    assert hawk.to_dict()['camera_resolution'] == 12


def test_catalog_missing_field(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps([{'id': 1, 'name': 'HAWK'}]), encoding='utf-8')
    with pytest.raises(CatalogError, match='missing fields'):
        load_catalog(str(path))


def test_catalog_unreadable(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text('{not json', encoding='utf-8')
    with pytest.raises(CatalogError):
        load_catalog(str(path))
    with pytest.raises(CatalogError):
        load_catalog(str(tmp_path / 'missing.json'))


def test_response_table_keeps_authored_order():
    table = ResponseTable([('Zeta', 'z'), ('alpha', 'a'), ('mid', 'm')])
    assert table.phrases == ('zeta', 'alpha', 'mid')
    assert table.get('alpha') == 'a'
    assert 'zeta' in table
    assert table.get('nope') is None


def test_response_table_rejects_bad_phrases():
    with pytest.raises(CatalogError):
        ResponseTable([('warranty', 'a'), ('Warranty', 'b')])
    with pytest.raises(CatalogError):
        ResponseTable([('', 'a')])


def test_bundled_response_tables_load():
    keywords, generic = load_response_tables(settings.RESPONSES_PATH)
    assert keywords.phrases[0] == 'drone types'
    assert 'hello' in generic


def test_response_file_must_be_object(tmp_path):
    path = tmp_path / 'responses.json'
    path.write_text('[]', encoding='utf-8')
    with pytest.raises(CatalogError):
        load_response_tables(str(path))
    path.write_text(json.dumps({'keywords': [{'phrase': 'x'}]}), encoding='utf-8')
    with pytest.raises(CatalogError, match='malformed'):
        load_response_tables(str(path))
