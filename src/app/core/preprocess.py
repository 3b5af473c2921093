import logging
from typing import Optional
from .spelling import SpellCorrector


logger = logging.getLogger(__name__)


class NormalizedMessage(str):
    """Lowercased, spell-corrected text."""

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self.split())


def _correct_token(token: str, corrector: SpellCorrector) -> str:
    try:
        candidates = corrector.correct(token)
    except Exception:
        logger.exception('Spell correction failed for %r; keeping token', token)
        return token
    if candidates:
        return candidates[0]
    return token


def normalize(raw: Optional[str], corrector: SpellCorrector) -> NormalizedMessage:
    if not raw:
        return NormalizedMessage('')
    corrected = []
    for token in raw.lower().split():
        fixed = _correct_token(token, corrector)
        if fixed != token:
            logger.debug('spell: %r -> %r', token, fixed)
        corrected.append(fixed)
    return NormalizedMessage(' '.join(corrected))
