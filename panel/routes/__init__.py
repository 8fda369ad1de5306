from panel.routes.tables import bp as tables_bp
from panel.routes.settings import bp as settings_bp
from panel.routes.licenses import bp as licenses_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(tables_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(licenses_bp)
