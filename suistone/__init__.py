"""
suistone/__init__.py
--------------------
Application factory for the SuiStone games backend.
"""

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError

from suistone.config import Config


def create_app(config_class: type = Config) -> Flask:
    """Create and configure a Flask application instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize database (daily content and player scores)
    from suistone.game.models import db
    db.init_app(app)

    # All game endpoints live under one namespace
    from suistone.game.routes import bp as game_bp
    app.register_blueprint(game_bp, url_prefix='/api/game')

    from suistone.scores.routes import bp as scores_bp
    app.register_blueprint(scores_bp, url_prefix='/api/game')

    # Create database tables if they don't exist; without a store the app runs degraded
    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError as e:
            app.logger.warning(f"Could not create tables, running without store: {e}")

    @app.route("/healthz")
    def healthz():
        from suistone.utils.store import get_store
        return jsonify({"status": "ok", "store": get_store().status.value})

    # Register CLI commands
    from suistone.tasks import register_cli_commands
    register_cli_commands(app)

    app.logger.info("SuiStone app created successfully")
    return app
