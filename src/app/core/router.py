from dataclasses import dataclass
from typing import Optional
import logging
from prometheus_client import Counter
from .catalog import Catalog
from .config import settings
from .compare import ComparisonRenderer
from .matcher import KeywordMatcher, NO_MATCH
from .preprocess import normalize
from .spelling import SpellCorrector
from .tables import ResponseTable


logger = logging.getLogger(__name__)


RESOLUTIONS = Counter('chat_resolutions_total', 'Chat messages answered, by router tier', ['tier'])


COMPARISON_TRIGGERS = ('compare', 'comparison', 'vs', 'versus')
# Words that separate the two drones in "compare X and Y" / "X vs Y"
CONNECTORS = frozenset({'and', 'vs', 'versus', 'with', '&', ','})
# Trigger words that are dropped rather than used as separators
LEAD_TRIGGERS = frozenset({'compare', 'comparison'})

FALLBACK_TEXT = ("Sorry, I didn't understand that. You can ask about drone types, prices, "
                 "flight time or warranty, or type 'compare hawk 2.o and viraj 2.o'.")


@dataclass(frozen=True)
class Resolution:
    tier: str
    text: str


def has_comparison_intent(text: str) -> bool:
    return any(trigger in text for trigger in COMPARISON_TRIGGERS)


def segment_hints(tokens) -> list[str]:
    segments: list[list[str]] = [[]]
    for token in tokens:
        if token in LEAD_TRIGGERS:
            continue
        if token in CONNECTORS:
            segments.append([])
        else:
            segments[-1].append(token)
    return [' '.join(s) for s in segments if s]


class ResponseRouter:
    def __init__(self, catalog: Catalog, keywords: ResponseTable, generic: ResponseTable,
                 corrector: SpellCorrector, matcher: Optional[KeywordMatcher] = None,
                 renderer: Optional[ComparisonRenderer] = None):
        self.catalog = catalog
        self.keywords = keywords
        self.generic = generic
        self.corrector = corrector
        self.matcher = matcher or KeywordMatcher()
        self.renderer = renderer or ComparisonRenderer(catalog)
        self._phrases = keywords.phrases

    def comparison_hints(self, text: str) -> Optional[tuple[str, str]]:
        if not has_comparison_intent(text):
            return None
        tokens = text.split()
        named = [t for t in tokens if self.catalog.mentions(t)]
        # no drone named at all: leave it to the keyword tiers
        if not named:
            return None
        segments = segment_hints(tokens)
        if len(segments) >= 2:
            return segments[0], segments[1]
        if len(named) >= 2:
            return named[0], named[1]
        return None

    def _generic(self, text: str) -> Optional[str]:
        for phrase, response in self.generic:
            if phrase in text:
                return response
        return None

    def resolve(self, raw: Optional[str]) -> Resolution:
        text = normalize(raw, self.corrector)

        hints = self.comparison_hints(text)
        if hints is not None:
            return self._done('comparison', self.renderer.compare(*hints), text)

        result = self.matcher.match(text, self._phrases)
        if result is not NO_MATCH:
            return self._done(result.kind, self.keywords.get(result.phrase), text)

        generic = self._generic(text)
        if generic is not None:
            return self._done('generic', generic, text)

        return self._done('fallback', FALLBACK_TEXT, text)

    def respond(self, raw: Optional[str]) -> str:
        return self.resolve(raw).text

    def _done(self, tier: str, text: str, normalized: str) -> Resolution:
        RESOLUTIONS.labels(tier=tier).inc()
        if settings.LOG_USER_MESSAGES:
            logger.info('tier=%s normalized=%r', tier, normalized)
        else:
            logger.info('tier=%s', tier)
        return Resolution(tier, text)
