from dataclasses import dataclass, asdict
from typing import Iterator, Optional
import json
import logging


logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Static data failed to load or violates its invariants."""


@dataclass(frozen=True)
class CatalogEntry:
    id: int
    name: str
    price: int
    load_capacity: str
    flight_time: str
    camera_resolution: int
    max_speed: str
    weight: str
    range: str
    best_for: str

    def to_dict(self) -> dict:
        return asdict(self)


# JSON field name -> dataclass field name
_FIELD_MAP = {
    'id': 'id',
    'name': 'name',
    'price': 'price',
    'loadCapacity': 'load_capacity',
    'flightTime': 'flight_time',
    'cameraResolution': 'camera_resolution',
    'maxSpeed': 'max_speed',
    'weight': 'weight',
    'range': 'range',
    'bestFor': 'best_for',
}


class Catalog:
    """Read-only, ordered collection of drones.

    Order is the authored file order and decides which entry wins when one
    name is a substring of another.
    """

    def __init__(self, entries):
        self._entries = tuple(entries)
        seen_ids = set()
        seen_names = set()
        for e in self._entries:
            key = e.name.strip().lower()
            if not key:
                raise CatalogError(f'catalog entry {e.id} has an empty name')
            if e.id in seen_ids:
                raise CatalogError(f'duplicate catalog id {e.id}')
            if key in seen_names:
                raise CatalogError(f'duplicate catalog name {e.name!r}')
            seen_ids.add(e.id)
            seen_names.add(key)
        self._lowered = tuple((e.name.lower(), e) for e in self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def find_in_text(self, text: Optional[str]) -> Optional[CatalogEntry]:
        """First entry (catalog order) whose name occurs inside `text`."""
        if not text:
            return None
        haystack = text.lower()
        for name, entry in self._lowered:
            if name in haystack:
                return entry
        return None

    def mentions(self, token: str) -> bool:
        """True if `token` is part of some entry's name."""
        if not token:
            return False
        return any(token in name for name, _ in self._lowered)


def _entry_from_json(item: dict) -> CatalogEntry:
    missing = [k for k in _FIELD_MAP if k not in item]
    if missing:
        raise CatalogError(f'catalog entry {item.get("name", "?")!r} missing fields: {", ".join(missing)}')
    kwargs = {attr: item[key] for key, attr in _FIELD_MAP.items()}
    try:
        kwargs['id'] = int(kwargs['id'])
        kwargs['price'] = int(kwargs['price'])
        kwargs['camera_resolution'] = int(kwargs['camera_resolution'])
    except (TypeError, ValueError) as e:
        raise CatalogError(f'catalog entry {item.get("name", "?")!r} has a non-integer field: {e}') from e
    kwargs['name'] = str(kwargs['name'])
    return CatalogEntry(**kwargs)


def load_catalog(path: str) -> Catalog:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f'failed to read catalog {path}: {e}') from e
    if not isinstance(raw, list):
        raise CatalogError(f'catalog {path} must be a JSON list')
    catalog = Catalog(_entry_from_json(item) for item in raw)
    logger.info('Loaded %d catalog entries from %s', len(catalog), path)
    return catalog
