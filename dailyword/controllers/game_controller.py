"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..exceptions import InvalidInput
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _invalid_input(action, error, day):
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(
        request, action, False, error_response, day, validation_error=str(error)
    )
    return jsonify(error_response), 400


def _server_error(action, error, day=None):
    game_logger.log_error(request, error, action, day)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, day)
    return jsonify(error_response), 500


@game_bp.route('/game/state', methods=['GET'])
def get_state():
    """Get today's game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        state = game_service.get_game_state()
        game_logger.log_user_action(request, 'get_state', state.day)
        
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        
        game_logger.log_server_response(
            request, 'get_state', True, response_data, state.day,
            cursor_row=state.cursor_row, status=state.status
        )
        
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('get_state', e)


@game_bp.route('/game/letter', methods=['POST'])
def append_letter():
    """Type one letter into the current row."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        letter = data.get('letter')
        day = game_service.current_session().day
        game_logger.log_user_action(request, 'append_letter', day, letter=letter)
        
        if letter is None:
            return _invalid_input('append_letter', 'Letter is required', day)
        
        try:
            state = game_service.append_letter(letter)
        except InvalidInput as e:
            return _invalid_input('append_letter', e, day)
        
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'append_letter', True, response_data, day)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('append_letter', e)


@game_bp.route('/game/backspace', methods=['POST'])
def remove_last_letter():
    """Erase the last letter of the current row."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        state = game_service.remove_last_letter()
        game_logger.log_user_action(request, 'remove_last_letter', state.day)
        
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'remove_last_letter', True, response_data, state.day)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('remove_last_letter', e)


@game_bp.route('/game/guess', methods=['POST'])
def make_guess():
    """Submit a guess, or the typed row when no guess is sent."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        guess = data.get('guess')
        day = game_service.current_session().day
        
        game_logger.log_user_action(request, 'submit_guess', day, guess=guess)
        
        try:
            result = game_service.submit_guess(guess)
        except InvalidInput as e:
            return _invalid_input('submit_guess', e, day)
        
        state = game_service.get_game_state()
        response_data = {
            'success': True,
            'accepted': result is not None,
            'result': None if result is None else {
                'guess': result.guess,
                'statuses': [s.value for s in result.statuses],
                'status': result.status.value,
                'solution': result.solution
            },
            'state': asdict(state)
        }
        
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, day,
            accepted=result is not None, status=state.status
        )
        
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('submit_guess', e)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'health_check')
        
        session = game_service.session if game_service else None
        response_data = {
            'status': 'healthy',
            'service_available': game_service is not None,
            'session_day': session.day if session else None,
            'provenance': session.provenance.value if session else None,
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
