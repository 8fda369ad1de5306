import logging

from flask import Flask
from config import Config
from flask_babel import Babel
from flask import current_app, session, request

babel = Babel()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class())

    app.logger.setLevel(getattr(logging, app.config['LOG_LEVEL'], logging.INFO))
    logging.getLogger('panel').setLevel(app.logger.level)

    def get_locale():
        # 1. Check for language in cookie first
        lang = request.cookies.get("language")
        if lang and lang in app.config["LANGUAGES"]:
            current_app.logger.debug(
                f"Locale selector: found language in cookie: {lang}")
            return lang

        # 2. Check session
        lang = session.get("language")
        if lang and lang in app.config["LANGUAGES"]:
            current_app.logger.debug(
                f"Locale selector: found language in session: {lang}")
            return lang

        # 3. Fallback to browser's preferred language
        browser_lang = request.accept_languages.best_match(
            app.config["LANGUAGES"])
        current_app.logger.debug(
            f"Locale selector: falling back to browser language: {browser_lang}"
        )
        return browser_lang

    babel.init_app(app, locale_selector=get_locale)

    from panel.utils.filters import register_filters
    register_filters(app)

    from panel.routes import register_blueprints
    register_blueprints(app)

    @app.context_processor
    def inject_table_defaults():
        return dict(
            pagination_window=app.config['PAGINATION_WINDOW'],
            page_size_choices=app.config['PAGE_SIZE_CHOICES'],
        )

    app.logger.debug(f"Console app created (env={app.config['APP_ENV']})")
    return app
