import math
from functools import wraps

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from suistone.utils import daily_limits
from suistone.utils.store import require_fields, store_fallback
from .content import (
    MinehunterContent,
    TriviaContent,
    WordContent,
    get_daily_content,
    load_trivia_sets,
    regenerate_daily_content,
)
from .models import db
from .rules import MINEHUNTER_DIFFICULTIES, next_round

bp = Blueprint('game', __name__)

GAME_LABELS = {
    'hangman': 'Hangman',
    'wordle': 'Wordle',
    'trivia': 'Trivia',
    'minehunter': 'Minehunter',
    'higherlower': 'Higher/Lower',
}


def daily_payload(game, payload):
    """Response body for a day's content"""
    if isinstance(payload, WordContent):
        return {'word': payload.word}
    if isinstance(payload, TriviaContent):
        return payload.to_dict()
    if isinstance(payload, MinehunterContent):
        return {
            'message': 'Minehunter initialized',
            'seed': payload.seed,
            'difficulties': MINEHUNTER_DIFFICULTIES,
        }
    # Higher/Lower state lives on the client, the record only marks the day as started
    return {'message': f'{GAME_LABELS[game]} initialized'}


def offline_payload(game):
    """Fixed content served to everyone while the store is down"""
    if game == 'hangman':
        return {'word': 'GROK'}, 200
    if game == 'wordle':
        return {'word': 'STONE'}, 200
    if game == 'trivia':
        return {'questions': load_trivia_sets()[0]}, 200
    if game == 'minehunter':
        return {
            'message': 'Minehunter initialized (DB offline)',
            'seed': 0,
            'difficulties': MINEHUNTER_DIFFICULTIES,
        }, 200
    return {'message': 'Higher/Lower initialized (DB offline)'}, 200


def higherlower_schedule(view):
    """Higher/Lower is closed outside its weekdays, whoever is asking"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if kwargs.get('game') == 'higherlower' and not daily_limits.is_higherlower_day():
            return jsonify({'error': 'Higher/Lower only runs on Tuesdays and Saturdays!'}), 403
        return view(*args, **kwargs)
    return wrapper


@bp.route('/daily-word/<any(hangman, wordle, trivia, minehunter, higherlower):game>')
@higherlower_schedule
@require_fields('username', message='Username required')
@store_fallback(offline_payload)
def daily_content(game, store):
    """Today's content for a game, once per player per day"""
    username = request.args['username']
    label = GAME_LABELS[game]

    try:
        if daily_limits.has_played_today(username, game, store=store):
            return jsonify({'error': f'You have already played {label} today'}), 403

        today = daily_limits.today_key()
        regenerate_daily_content(today=today)

        record = get_daily_content(game, today)
        if record is None:
            return jsonify({'error': f'No {label} content found for today'}), 404

        return jsonify(daily_payload(game, record.payload)), 200

    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error fetching {game} content: {e}")
        return jsonify({
            'error': f'Failed to fetch {label} content, check backend!',
            'details': str(e),
        }), 500


@bp.route('/higherlower/next', methods=['POST'])
@require_fields('username', 'currentNumber', 'guess', source='json',
                message='Username, currentNumber, and guess required')
def higherlower_next():
    """Draw the next Higher/Lower number and judge the guess"""
    data = request.get_json()
    current_number = data['currentNumber']
    if (isinstance(current_number, bool) or not isinstance(current_number, (int, float))
            or not math.isfinite(current_number)):
        return jsonify({'error': 'currentNumber must be a number'}), 400

    result = next_round(current_number, data['guess'])
    current_app.logger.info(
        f"Higher/Lower round for {data['username']}: {current_number} -> "
        f"{result.next_number} ({data['guess']}, correct={result.correct})"
    )
    return jsonify(result.to_dict()), 200
