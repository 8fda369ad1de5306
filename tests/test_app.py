import logging

from config import Config
from panel import create_app


def test_create_app_loads_settings(app):
    assert app.config['SECRET_KEY']
    assert app.config['DEFAULT_PAGE_SIZE'] == 10
    assert 'humanize_duration' in app.jinja_env.filters


def test_log_level_from_config(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    app = create_app(Config)
    assert app.logger.level == logging.DEBUG
    assert logging.getLogger('panel').level == logging.DEBUG


def test_locale_from_cookie(app):
    from flask_babel import get_locale
    with app.test_request_context(headers={'Cookie': 'language=en'}):
        assert str(get_locale()) == 'en'
