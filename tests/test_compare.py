from src.app.core.compare import ComparisonRenderer, APOLOGY_TEXT, render_comparison
from src.app.core.catalog import Catalog
from conftest import make_entry


def test_renders_both_entries(catalog):
    text = ComparisonRenderer(catalog).compare('hawk 2.o', 'viraj 2.o')
    lines = text.split('\n')
    assert lines[0] == 'Comparison: HAWK 2.O vs VIRAJ 2.O'
    assert lines[1] == 'Price: HAWK 2.O ₹14999 | VIRAJ 2.O ₹500000'
    assert [line.split(':')[0] for line in lines[1:]] == [
        'Price', 'Flight Time', 'Camera', 'Max Speed', 'Weight', 'Range', 'Best For',
    ]


def test_hint_must_contain_the_name(catalog):
    renderer = ComparisonRenderer(catalog)
    assert renderer.compare('the HAWK 2.O please', 'Viraj 2.o drone').startswith('Comparison: HAWK 2.O vs VIRAJ 2.O')
    # a fragment of a name is not enough
    assert renderer.compare('hawk', 'viraj 2.o') == APOLOGY_TEXT


def test_unknown_drone_gets_apology(catalog):
    renderer = ComparisonRenderer(catalog)
    assert renderer.compare('hawk 2.o', 'dragonfly') == APOLOGY_TEXT
    assert renderer.compare(None, 'hawk 2.o') == APOLOGY_TEXT
    assert renderer.compare('', '') == APOLOGY_TEXT


def test_first_catalog_entry_wins_on_ambiguous_hint():
    catalog = Catalog([make_entry(1, 'HAWK', 100), make_entry(2, 'HAWK PRO', 200)])
    text = ComparisonRenderer(catalog).compare('hawk pro', 'hawk')
    assert text.startswith('Comparison: HAWK vs HAWK')


def test_swapping_arguments_keeps_values_with_their_drone(catalog):
    renderer = ComparisonRenderer(catalog)
    forward = renderer.compare('hawk 2.o', 'garuda x').split('\n')
    backward = renderer.compare('garuda x', 'hawk 2.o').split('\n')
    assert forward != backward
    for f, b in zip(forward[1:], backward[1:]):
        label, values = f.split(': ', 1)
        left, right = values.split(' | ')
        assert b == f'{label}: {right} | {left}'


def test_rendering_is_deterministic(catalog):
    hawk, viraj, _ = list(catalog)
    assert render_comparison(hawk, viraj) == render_comparison(hawk, viraj)
    assert 'Flight Time: HAWK 2.O 11 minutes | VIRAJ 2.O 12 minutes' in render_comparison(hawk, viraj)
