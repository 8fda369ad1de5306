import os
from pydantic_settings import BaseSettings
from pydantic import field_validator

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

FALLBACK_PAGE_SIZE = 10
FALLBACK_PAGINATION_WINDOW = 5


def _strip_inline_comment(v):
    """Allow .env values like '25  # rows per page'."""
    if isinstance(v, str):
        return v.split('#', 1)[0].strip()
    return v


class Config(BaseSettings):
    # Security configuration
    SECRET_KEY: str

    # Application environment: development | staging | production
    APP_ENV: str = os.getenv('FLASK_ENV', 'development')

    # Logging level for the app logger (DEBUG, INFO, WARNING, ...)
    LOG_LEVEL: str = 'INFO'

    # Tables
    DEFAULT_PAGE_SIZE: int = FALLBACK_PAGE_SIZE
    PAGE_SIZE_CHOICES: list = [10, 25, 50, 100]
    # Number of page buttons shown under a table
    PAGINATION_WINDOW: int = FALLBACK_PAGINATION_WINDOW

    @field_validator('DEFAULT_PAGE_SIZE', mode='before')
    def _parse_default_page_size(cls, v):
        """Fall back to the default page size if the value cannot be parsed."""
        v = _strip_inline_comment(v)
        try:
            v = int(v)
        except (TypeError, ValueError):
            return FALLBACK_PAGE_SIZE
        return v if v >= 1 else FALLBACK_PAGE_SIZE

    @field_validator('PAGINATION_WINDOW', mode='before')
    def _parse_pagination_window(cls, v):
        v = _strip_inline_comment(v)
        try:
            v = int(v)
        except (TypeError, ValueError):
            return FALLBACK_PAGINATION_WINDOW
        return v if v >= 1 else FALLBACK_PAGINATION_WINDOW

    @field_validator('LOG_LEVEL', mode='before')
    def _parse_log_level(cls, v):
        v = _strip_inline_comment(v)
        return str(v or 'INFO').upper()

    # Internationalization
    LANGUAGES: list = ['en']
    BABEL_DEFAULT_LOCALE: str = 'en'
    BABEL_DEFAULT_TIMEZONE: str = 'UTC'
    BABEL_TRANSLATION_DIRECTORIES: str = os.path.join(BASE_DIR, 'translations')

    # Forms
    WTF_CSRF_ENABLED: bool = True

    # Session and cookie security
    SESSION_COOKIE_HTTPONLY: bool = True
    SESSION_COOKIE_SECURE: bool = False
    SESSION_COOKIE_SAMESITE: str = 'Lax'

    class Config:
        env_file = '.env'
        env_file_encoding = 'utf-8'
        case_sensitive = False
        extra = 'ignore'  # Ignore extra fields from .env
