from typing import Iterator, Optional
import json
import logging
from .catalog import CatalogError


logger = logging.getLogger(__name__)


class ResponseTable:
    """Ordered phrase -> response pairs; iteration keeps authored order."""

    def __init__(self, pairs):
        index: dict[str, str] = {}
        ordered = []
        for phrase, response in pairs:
            key = (phrase or '').strip().lower()
            if not key:
                raise CatalogError('response table phrases must be non-empty')
            if key in index:
                raise CatalogError(f'duplicate response phrase {key!r}')
            index[key] = response
            ordered.append((key, response))
        self._pairs: tuple[tuple[str, str], ...] = tuple(ordered)
        self._index = index

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, phrase: str) -> bool:
        return phrase in self._index

    @property
    def phrases(self) -> tuple[str, ...]:
        return tuple(p for p, _ in self._pairs)

    def get(self, phrase: str) -> Optional[str]:
        return self._index.get(phrase)


def _pairs_from_json(items, section: str):
    if not isinstance(items, list):
        raise CatalogError(f'"{section}" must be a list of {{phrase, response}} objects')
    for item in items:
        if not isinstance(item, dict) or 'phrase' not in item or 'response' not in item:
            raise CatalogError(f'malformed entry in "{section}": {item!r}')
        yield item['phrase'], str(item['response'])


def load_response_tables(path: str) -> tuple[ResponseTable, ResponseTable]:
    """Returns (keyword_table, generic_table)."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f'failed to read responses {path}: {e}') from e
    if not isinstance(raw, dict):
        raise CatalogError(f'responses {path} must be a JSON object')
    keywords = ResponseTable(_pairs_from_json(raw.get('keywords', []), 'keywords'))
    generic = ResponseTable(_pairs_from_json(raw.get('generic', []), 'generic'))
    logger.info('Loaded %d keyword and %d generic responses from %s', len(keywords), len(generic), path)
    return keywords, generic
