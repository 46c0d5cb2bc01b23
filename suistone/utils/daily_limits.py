"""
Daily limits for SuiStone games
Uses each player's score history to track daily plays
"""
from datetime import date

from flask import current_app


def get_today():
    """Server local calendar day"""
    return date.today()


def today_key(today=None):
    """Today's content key, e.g. 2025-02-23"""
    if today is None:
        today = get_today()
    return today.strftime("%Y-%m-%d")


def has_played_today(username, game, store=None, today=None):
    """
    Check if a player already submitted a score for this game today.
    Fails open: with the store unreachable every player may play.

    The check looks at when the score was submitted, not which day's puzzle
    it was played against.
    """
    from suistone.utils.store import get_store
    from suistone.game.models import Player

    if store is None:
        store = get_store()
    if not store.connected:
        current_app.logger.info("Store not connected, assuming not played today")
        return False

    if today is None:
        today = get_today()

    player = Player.get_by_username(username)
    if player is None:
        return False

    return any(
        score.game == game and score.date is not None and score.date.date() == today
        for score in player.scores
    )


def is_higherlower_day(today=None):
    """Higher/Lower only runs on the configured weekdays (Tuesday and Saturday)"""
    if today is None:
        today = get_today()
    return today.weekday() in current_app.config.get('HIGHERLOWER_DAYS', (1, 5))
