import logging, re
from .config import settings
from prometheus_client import Counter


PII_REDACTIONS = Counter('pii_redactions_total', 'Number of PII redactions applied to log lines')


EMAIL_PATTERN = re.compile(r'[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}')
PHONE_PATTERN = re.compile(r'(?<!\d)(?:\+?91[\s-]?)?[6-9]\d{4}[\s-]?\d{5}(?!\d)|\b(?:\+?\d{1,2}[\s-]?)?(?:\(\d{3}\)|\d{3})[\s-]?\d{3}[\s-]?\d{4}\b')
CARD_PATTERN = re.compile(r'\b(?:\d[ -]?){13,16}\b')


def redact(text: str) -> str:
    """Mask emails, phone numbers and card-like digit runs in free text."""
    redacted = EMAIL_PATTERN.sub('[REDACTED_EMAIL]', text)
    redacted = CARD_PATTERN.sub('[REDACTED_CARD]', redacted)
    redacted = PHONE_PATTERN.sub('[REDACTED_PHONE]', redacted)
    return redacted


class PiiRedactionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        original = record.getMessage()
        redacted = redact(original)
        if redacted != original:
            record.msg = redacted
            record.args = None
            PII_REDACTIONS.inc()
        return True


def configure_logging():
    root = logging.getLogger()
    # uvicorn --reload and repeated test imports call this more than once
    if any(isinstance(f, PiiRedactionFilter) for h in root.handlers for f in h.filters):
        return root
    handler = logging.StreamHandler()
    handler.addFilter(PiiRedactionFilter())
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    handler.setFormatter(fmt)
    root.setLevel(settings.LOG_LEVEL)
    root.addHandler(handler)
    return root
