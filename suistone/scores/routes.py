"""
Score submission and per-game leaderboards
"""
from flask import Blueprint, current_app, jsonify, request
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from suistone.game.models import db, GAMES, Player, ScoreRecord
from suistone.utils.store import require_fields, store_fallback

bp = Blueprint('scores', __name__)

LEADERBOARD_SIZE = 10


def _non_negative_int(value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def leaderboard(game, limit=LEADERBOARD_SIZE):
    """All-time totals for a game: summed points, best (lowest) time"""
    total_points = func.sum(ScoreRecord.points).label('points')
    best_time = func.min(ScoreRecord.time).label('time')

    rows = (
        db.session.query(Player.username, total_points, best_time)
        .join(ScoreRecord, ScoreRecord.player_id == Player.id)
        .filter(ScoreRecord.game == game)
        .group_by(Player.username)
        .order_by(total_points.desc(), best_time.asc())
        .limit(limit)
        .all()
    )
    return [
        {'username': row.username, 'points': int(row.points), 'time': int(row.time)}
        for row in rows
    ]


@bp.route('/score', methods=['POST'])
@require_fields('username', 'game', 'points', 'time', source='json',
                message='Missing required fields: username, game, points, time')
@store_fallback(({'message': 'Score not saved - DB offline'}, 200))
def submit_score(store):
    """Append a score to the player's history"""
    data = request.get_json()
    username = data['username']
    game = data['game']
    points = _non_negative_int(data['points'])
    time_taken = _non_negative_int(data['time'])

    if game not in GAMES:
        return jsonify({'error': f'Unknown game: {game}'}), 400
    if points is None or time_taken is None:
        return jsonify({'error': 'points and time must be non-negative integers'}), 400

    current_app.logger.info(f"Received score: {username} {game} {points} pts {time_taken}s")
    try:
        player = Player.record_score(username, game, points, time_taken)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving score: {e}")
        return jsonify({'error': 'Failed to save score', 'details': str(e)}), 500

    current_app.logger.info(f"Score {points} saved for {username}, ID: {player.id}")
    return jsonify({'message': 'Score saved', 'playerId': player.id}), 201


@bp.route('/leaderboard/<game>')
@store_fallback(([], 200))
def get_leaderboard(game, store):
    """Top players for a game"""
    current_app.logger.info(f"Fetching leaderboard for game: {game}")
    try:
        return jsonify(leaderboard(game)), 200
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error fetching leaderboard: {e}")
        return jsonify({'error': 'Failed to fetch leaderboard', 'details': str(e)}), 500
