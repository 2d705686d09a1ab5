"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _no_game(action):
    error_response = {
        'success': False,
        'error': 'No game in progress'
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 404


def _run_operation(action, operation, **log_details):
    """Shared flow for the input endpoints: run, then answer with events and state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, action, **log_details)

        if game_service.session is None:
            return _no_game(action)

        events = operation(game_service)
        state = game_service.get_game_state()

        response_data = {
            'success': True,
            'events': [event.as_message() for event in events],
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, action, True, response_data,
            round=state.current_round, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, action)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, action, False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Start a new game, replacing the current one."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        state = game_service.new_game()

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data,
            answer_length=state.answer_length, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/state', methods=['GET'])
def get_state():
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state')

        state = game_service.get_game_state()
        if state is None:
            return _no_game('get_state')

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data,
            current_round=state.current_round, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/key', methods=['POST'])
def press_key():
    """Feed a raw key name ("Enter", "Backspace" or a letter)."""
    data = request.get_json(silent=True) or {}
    key = data.get('key')
    if not isinstance(key, str):
        error_response = {
            'success': False,
            'error': 'Key is required'
        }
        game_logger.log_server_response(request, 'key', False, error_response)
        return jsonify(error_response), 400

    return _run_operation('key', lambda service: service.handle_key(key), key=key)


@game_bp.route('/game/letter', methods=['POST'])
def add_letter():
    """Type one letter into the current row."""
    data = request.get_json(silent=True) or {}
    letter = data.get('letter')
    if not isinstance(letter, str):
        error_response = {
            'success': False,
            'error': 'Letter is required'
        }
        game_logger.log_server_response(request, 'add_letter', False, error_response)
        return jsonify(error_response), 400

    return _run_operation('add_letter', lambda service: service.add_letter(letter), letter=letter)


@game_bp.route('/game/backspace', methods=['POST'])
def backspace():
    """Remove the last letter of the current row."""
    return _run_operation('backspace', lambda service: service.backspace())


@game_bp.route('/game/commit', methods=['POST'])
def commit():
    """Submit the current row for validation and scoring."""
    return _run_operation('commit', lambda service: service.commit())


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'game_in_progress': bool(
                game_service and game_service.session and not game_service.session.game_over
            ),
            'word_source': type(game_service.word_source).__name__ if game_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
