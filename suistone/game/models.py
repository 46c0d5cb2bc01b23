"""
Persistence for SuiStone games
Daily puzzle content per (date, game) and players with their score history
"""

import json
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

GAMES = ('wordle', 'hangman', 'trivia', 'minehunter', 'higherlower')


class DailyContent(db.Model):
    """One puzzle per calendar day per game"""
    __tablename__ = 'dailycontent'
    __table_args__ = (
        db.UniqueConstraint('date', 'game', name='uq_dailycontent_date_game'),
    )

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD
    game = db.Column(db.String(20), nullable=False)
    difficulty = db.Column(db.String(20), nullable=True)
    content_json = db.Column(db.Text, nullable=False)

    @property
    def payload(self):
        """Content decoded into the game's concrete type"""
        from .content import decode_content
        return decode_content(self.game, json.loads(self.content_json))

    @classmethod
    def for_day(cls, date, game):
        return cls.query.filter_by(date=date, game=game).first()

    def __repr__(self):
        return f'<DailyContent {self.date}:{self.game}>'


class Player(db.Model):
    """A wallet address and everything it has scored"""
    __tablename__ = 'players'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(120), unique=True, nullable=False)

    scores = db.relationship('ScoreRecord', backref='player', lazy=True,
                             order_by='ScoreRecord.id',
                             cascade='all, delete-orphan')

    @classmethod
    def get_by_username(cls, username):
        return cls.query.filter_by(username=username).first()

    @classmethod
    def record_score(cls, username, game, points, time):
        """Append a score for username, creating the player on first submission"""
        player = cls.get_by_username(username)
        if player is None:
            player = cls(username=username)
            db.session.add(player)

        player.scores.append(ScoreRecord(
            game=game,
            points=points,
            time=time,
            date=datetime.now(),
        ))
        db.session.commit()
        return player

    def __repr__(self):
        return f'<Player {self.username}>'


class ScoreRecord(db.Model):
    __tablename__ = 'score_records'

    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('players.id'), nullable=False)
    game = db.Column(db.String(20), nullable=False)
    points = db.Column(db.Integer, nullable=False)
    time = db.Column(db.Integer, nullable=False)  # seconds
    date = db.Column(db.DateTime, default=datetime.now)  # submission time, server local

    def __repr__(self):
        return f'<ScoreRecord {self.player_id}:{self.game}:{self.points}>'
