# This file defines the main entry point and structure for the Flask web application.
# It utilizes the Application Factory pattern (`create_app`) to initialize and configure the app.
# Key responsibilities include:
# - Creating the Flask application instance.
# - Loading configuration from core/config.py and the app_config section of settings.yaml.
# - Centralizing logging configuration (File and Console handlers).
# - Registering Blueprints (`main_bp`, `navigation_bp`) from the `views` directory.
# - Sharing the per-request navigation with templates through a context processor.
# - Providing a conditional block (`if __name__ == '__main__':`) to run the development server.

from flask import Flask
import os
import logging
from logging.handlers import RotatingFileHandler

from core.settings_loader import get_app_config


def configure_logging(app: Flask) -> None:
    """Attach rotating file and console handlers to the app and root loggers."""
    # Remove Flask's default handlers
    app.logger.handlers.clear()
    # The root logger gets the same handlers; avoid writing app records twice
    app.logger.propagate = False
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "DEBUG")).upper(), logging.DEBUG)
    app.logger.setLevel(level)

    log_formatter = logging.Formatter(
        "%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"
    )

    # Drop handlers a previous create_app() attached to the root logger
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if getattr(h, "_app_handler", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    # File Handler (Rotating)
    log_file_path = os.path.join(app.instance_path, app.config.get("LOG_FILE", "app.log"))
    try:
        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=app.config.get("LOG_MAX_BYTES", 1024 * 1024 * 10),
            backupCount=app.config.get("LOG_BACKUP_COUNT", 5),
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        file_handler._app_handler = True
        app.logger.addHandler(file_handler)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(level)
        app.logger.info(f"File logging configured to: {log_file_path} (Level: {logging.getLevelName(level)})")
    except OSError as e:
        app.logger.error(f"Failed to configure file logging to {log_file_path}: {e}", exc_info=True)

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    console_handler._app_handler = True
    app.logger.addHandler(console_handler)
    root_logger.addHandler(console_handler)

    app.logger.info("Centralized logging configured (File & Console).")


def create_app(test_config=None) -> Flask:
    """Factory function to create and configure the Flask app."""
    app = Flask(__name__, instance_relative_config=True)

    # Defaults from core/config.py, then settings.yaml app_config (keys upper-cased)
    app.config.from_object("core.config")
    app.config.update({key.upper(): value for key, value in get_app_config().items()})
    if test_config:
        app.config.update(test_config)

    # Ensure the instance folder exists (needed for logging)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError as e:
        app.logger.error(f"Could not create instance folder at {app.instance_path}: {e}", exc_info=True)

    configure_logging(app)
    app.logger.info(f"Application root path: {app.root_path}")

    # --- Register Blueprints ---
    try:
        from views.main_views import main_bp
        from views.navigation_views import navigation_bp
    except ImportError as imp_err:
        app.logger.error(f"Blueprint import failed: {imp_err}", exc_info=True)
        raise

    app.register_blueprint(main_bp)
    app.register_blueprint(navigation_bp)

    app.logger.info("Registered Blueprints:")
    app.logger.info(f"- {main_bp.name} (prefix: {main_bp.url_prefix})")
    app.logger.info(f"- {navigation_bp.name} (prefix: {navigation_bp.url_prefix})")

    # Navigation is resolved lazily, after every registration source has run
    @app.context_processor
    def inject_navigation():
        from core.navigation_service import get_navigation

        return {"navigation": get_navigation().tree_grouped()}

    return app


# --- Application Execution ---
if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, host="0.0.0.0")
