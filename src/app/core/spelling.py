from typing import Iterable, Protocol
from importlib import resources
import logging
import re
from symspellpy import SymSpell, Verbosity
from .config import settings


logger = logging.getLogger(__name__)


# English unigram dictionary shipped inside the symspellpy wheel
DICTIONARY_NAME = 'frequency_dictionary_en_82_765.txt'
# Domain words get a count above any English word so they win ties
DOMAIN_WORD_COUNT = 10 ** 12

WORD_PATTERN = re.compile(r'^[a-z]+$')


class SpellCorrector(Protocol):
    def correct(self, word: str) -> list[str]:
        ...


class NullCorrector:
    """Never suggests anything; every token is kept as typed."""

    def correct(self, word: str) -> list[str]:
        return []


class SymSpellCorrector:
    def __init__(self, vocabulary: Iterable[str] = (),
                 max_edit_distance: int | None = None,
                 prefix_length: int | None = None):
        self.max_edit_distance = settings.SPELL_MAX_EDIT_DISTANCE if max_edit_distance is None else max_edit_distance
        prefix = settings.SPELL_PREFIX_LENGTH if prefix_length is None else prefix_length
        self._sym = SymSpell(max_dictionary_edit_distance=self.max_edit_distance, prefix_length=prefix)
        dictionary = resources.files('symspellpy') / DICTIONARY_NAME
        with resources.as_file(dictionary) as path:
            if not self._sym.load_dictionary(str(path), term_index=0, count_index=1, encoding='utf-8'):
                raise RuntimeError(f'symspellpy dictionary not found: {path}')
        added = 0
        for word in vocabulary:
            word = word.lower()
            if WORD_PATTERN.match(word):
                self._sym.create_dictionary_entry(word, DOMAIN_WORD_COUNT)
                added += 1
        logger.info('SymSpell ready (%d words, %d domain terms)', len(self._sym.words), added)

    def correct(self, word: str) -> list[str]:
        # Model numbers ("2.o"), prices and punctuation are left alone
        if not WORD_PATTERN.match(word):
            return []
        suggestions = self._sym.lookup(word, Verbosity.CLOSEST,
                                       max_edit_distance=self.max_edit_distance,
                                       include_unknown=False)
        return [s.term for s in suggestions]


def domain_vocabulary(*sources: Iterable[str]) -> set[str]:
    """Split phrases and names into the individual words SymSpell should know."""
    words = set()
    for source in sources:
        for phrase in source:
            words.update(phrase.lower().split())
    return words


def build_corrector(vocabulary: Iterable[str] = ()) -> SpellCorrector:
    if not settings.SPELLCHECK_ENABLED:
        logger.info('Spell correction disabled')
        return NullCorrector()
    return SymSpellCorrector(vocabulary)
