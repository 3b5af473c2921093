import os
from dotenv import load_dotenv


load_dotenv()


DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), 'data')


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    # Fuzzy matches must score strictly above this (0..1)
    FUZZY_THRESHOLD: float = float(os.getenv('FUZZY_THRESHOLD', '0.6'))
    # Spell correction (symspellpy)
    SPELLCHECK_ENABLED: bool = _env_bool('SPELLCHECK_ENABLED', 'true')
    SPELL_MAX_EDIT_DISTANCE: int = int(os.getenv('SPELL_MAX_EDIT_DISTANCE', '2'))
    SPELL_PREFIX_LENGTH: int = int(os.getenv('SPELL_PREFIX_LENGTH', '7'))
    # Static tables
    CATALOG_PATH: str = os.getenv('CATALOG_PATH', os.path.join(DATA_DIR, 'catalog.json'))
    RESPONSES_PATH: str = os.getenv('RESPONSES_PATH', os.path.join(DATA_DIR, 'responses.json'))
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_USER_MESSAGES: bool = _env_bool('LOG_USER_MESSAGES', 'true')


settings = Settings()
