from typing import Optional
import logging
from .catalog import Catalog, CatalogEntry


logger = logging.getLogger(__name__)


APOLOGY_TEXT = ("Sorry, I couldn't find one or both of those drones in our catalog. "
                "Please check the names and try again.")


# (label, formatter) in display order
FIELDS = (
    ('Price', lambda e: f'₹{e.price}'),
    ('Flight Time', lambda e: e.flight_time),
    ('Camera', lambda e: f'{e.camera_resolution} MP'),
    ('Max Speed', lambda e: e.max_speed),
    ('Weight', lambda e: e.weight),
    ('Range', lambda e: e.range),
    ('Best For', lambda e: e.best_for),
)


def render_comparison(first: CatalogEntry, second: CatalogEntry) -> str:
    lines = [f'Comparison: {first.name} vs {second.name}']
    for label, fmt in FIELDS:
        lines.append(f'{label}: {first.name} {fmt(first)} | {second.name} {fmt(second)}')
    return '\n'.join(lines)


class ComparisonRenderer:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def compare(self, hint1: Optional[str], hint2: Optional[str]) -> str:
        first = self.catalog.find_in_text(hint1)
        second = self.catalog.find_in_text(hint2)
        if first is None or second is None:
            logger.info('comparison unresolved: %r -> %s, %r -> %s', hint1,
                        first.name if first else None, hint2, second.name if second else None)
            return APOLOGY_TEXT
        logger.debug('comparing %s with %s', first.name, second.name)
        return render_comparison(first, second)
