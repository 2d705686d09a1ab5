"""
Word Guessing Game Server Application Package

A single-session word guessing game: a pure scoring and session core
behind an HTTP and WebSocket adapter.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Prebuilt GameService; built from config_class when omitted

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    from .services.game_service import GameService
    if game_service is None:
        game_service = GameService.from_config(config_class)
    app.extensions['wordgame'] = game_service

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, game_service)

    return app, socketio
