"""Keyword lookup: exact, then fuzzy (rapidfuzz ratio), then partial token hits."""
from dataclasses import dataclass
from typing import Callable, Sequence
import logging
from rapidfuzz import fuzz
from .config import settings


logger = logging.getLogger(__name__)


Similarity = Callable[[str, str], float]


def ratio_similarity(a: str, b: str) -> float:
    """Normalized Indel similarity in [0, 1]."""
    return fuzz.ratio(a, b) / 100.0


@dataclass(frozen=True)
class Exact:
    phrase: str
    kind = 'exact'


@dataclass(frozen=True)
class Fuzzy:
    phrase: str
    score: float
    kind = 'fuzzy'


@dataclass(frozen=True)
class Partial:
    phrase: str
    kind = 'partial'


@dataclass(frozen=True)
class NoMatch:
    kind = 'none'

    def __bool__(self) -> bool:
        return False


NO_MATCH = NoMatch()

MatchResult = Exact | Fuzzy | Partial | NoMatch


class KeywordMatcher:
    def __init__(self, threshold: float | None = None, similarity: Similarity = ratio_similarity):
        self.threshold = settings.FUZZY_THRESHOLD if threshold is None else threshold
        self.similarity = similarity

    def match(self, text: str, phrases: Sequence[str]) -> MatchResult:
        if not text or not phrases:
            return NO_MATCH
        for phrase in phrases:
            if text == phrase:
                logger.debug('exact keyword match %r', phrase)
                return Exact(phrase)
        fuzzy = self._best_fuzzy(text, phrases)
        if fuzzy is not None:
            return fuzzy
        return self._first_partial(text, phrases)

    def _best_fuzzy(self, text: str, phrases: Sequence[str]) -> Fuzzy | None:
        best_phrase = None
        best_score = -1.0
        for phrase in phrases:
            score = min(1.0, max(0.0, float(self.similarity(text, phrase))))
            # strict > keeps the earliest phrase on ties
            if score > best_score:
                best_phrase, best_score = phrase, score
        if best_phrase is not None and best_score > self.threshold:
            logger.debug('fuzzy keyword match %r score=%.3f', best_phrase, best_score)
            return Fuzzy(best_phrase, best_score)
        logger.debug('no fuzzy match above %.2f (best %r %.3f)', self.threshold, best_phrase, best_score)
        return None

    def _first_partial(self, text: str, phrases: Sequence[str]) -> MatchResult:
        # a token inside any word of a phrase is also inside the phrase itself
        for token in text.split():
            for phrase in phrases:
                if token in phrase:
                    logger.debug('partial keyword match %r via token %r', phrase, token)
                    return Partial(phrase)
        return NO_MATCH
