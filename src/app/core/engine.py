import logging
import threading
from .catalog import Catalog, load_catalog
from .config import settings
from .compare import ComparisonRenderer
from .matcher import KeywordMatcher
from .router import COMPARISON_TRIGGERS, ResponseRouter
from .spelling import build_corrector, domain_vocabulary
from .tables import ResponseTable, load_response_tables


logger = logging.getLogger(__name__)


class Engine:
    """Everything a request needs; built once, read-only afterwards."""

    def __init__(self, catalog: Catalog, keywords: ResponseTable, generic: ResponseTable, router: ResponseRouter):
        self.catalog = catalog
        self.keywords = keywords
        self.generic = generic
        self.router = router
        self.renderer = router.renderer

    def respond(self, message: str) -> str:
        return self.router.respond(message)

    def compare(self, name1: str, name2: str) -> str:
        return self.renderer.compare(name1, name2)


_engine: Engine | None = None
_lock = threading.Lock()


def build_engine(catalog_path: str | None = None, responses_path: str | None = None) -> Engine:
    catalog = load_catalog(catalog_path or settings.CATALOG_PATH)
    keywords, generic = load_response_tables(responses_path or settings.RESPONSES_PATH)
    corrector = build_corrector(domain_vocabulary(
        catalog.names, keywords.phrases, generic.phrases, COMPARISON_TRIGGERS,
    ))
    router = ResponseRouter(
        catalog, keywords, generic, corrector,
        matcher=KeywordMatcher(settings.FUZZY_THRESHOLD),
        renderer=ComparisonRenderer(catalog),
    )
    logger.info('Engine built: %d drones, %d keywords, fuzzy threshold %.2f',
                len(catalog), len(keywords), router.matcher.threshold)
    return Engine(catalog, keywords, generic, router)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        with _lock:
            if _engine is None:
                _engine = build_engine()
    return _engine


def reset_engine():
    global _engine
    with _lock:
        _engine = None
