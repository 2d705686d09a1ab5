"""
WebSocket Event Handlers

Relays raw key input from the browser to the game service and pushes
every session event back to connected clients.
"""

from dataclasses import asdict
from flask_socketio import emit
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio, game_service):
    """Register all WebSocket event handlers."""

    def relay_event(event):
        socketio.emit(event.kind, event.to_dict())

    game_service.subscribe(relay_event)

    def broadcast_state():
        state = game_service.get_game_state()
        socketio.emit('game_state_update', {
            'success': True,
            'state': asdict(state) if state else None
        })

    @socketio.on('connect')
    def handle_connect():
        """Send the current board to a newly connected client."""
        state = game_service.get_game_state()
        emit('game_state_update', {
            'success': True,
            'state': asdict(state) if state else None
        })

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Start a new game for everyone watching."""
        try:
            game_service.new_game()
            game_logger.logger.info("WebSocket: new game started")
            broadcast_state()
        except Exception as e:
            game_logger.logger.error(f"WebSocket new_game failed: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('key')
    def handle_key(data):
        """Handle one key press: {"key": "A" | "Enter" | "Backspace"}."""
        try:
            key = data.get('key') if isinstance(data, dict) else None
            if not isinstance(key, str):
                emit('error', {'error': 'Key is required'})
                return

            if game_service.session is None:
                emit('error', {'error': 'No game in progress'})
                return

            events = game_service.handle_key(key)
            if events:
                broadcast_state()
        except Exception as e:
            game_logger.logger.error(f"WebSocket key handling failed: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('get_state')
    def handle_get_state(data=None):
        """Send the current state to the requesting client only."""
        state = game_service.get_game_state()
        emit('game_state_update', {
            'success': True,
            'state': asdict(state) if state else None
        })
