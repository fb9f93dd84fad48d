"""Flask app factory for the template server."""

from typing import Optional

from flask import Flask

from ..utils.config import AppConfig, get_config


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Application configuration (loaded from the environment when None)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)

    if config is None:
        config = get_config()

    app.config['TEMPLATE_PATH'] = config.template_path
    app.config['HIDDEN_VALUE'] = config.hidden_value

    register_blueprints(app)

    return app


def register_blueprints(app):
    """Register application blueprints."""
    from .routes.main import main_bp
    app.register_blueprint(main_bp)
