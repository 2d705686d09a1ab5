"""
Word Guessing Game Server - Main Entry Point

This is the main entry point for the game server.
It validates the bundled word list and starts the Flask-SocketIO application.
"""

import os

from wordgame import create_app
from wordgame.config import config, validate_word_list_integrity
from wordgame.utils.game_logger import game_logger


def main():
    """Main function to create the app and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Validating word list...")
        validate_word_list_integrity()
        print("✓ Word list validation passed")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Game Server Starting")

        print(f"\nStarting Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Word source: {config_class.WORD_SOURCE}")
        print(f"Validation fail-open: {config_class.VALIDATION_FAIL_OPEN}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
