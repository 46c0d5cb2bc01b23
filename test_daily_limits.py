from datetime import date, datetime, timedelta

from suistone.game.models import db, Player, ScoreRecord
from suistone.utils.daily_limits import has_played_today, is_higherlower_day, today_key
from suistone.utils.store import get_store

TUESDAY = date(2025, 2, 25)
WEDNESDAY = date(2025, 2, 26)
SATURDAY = date(2025, 3, 1)
PLAYED_AT = datetime(2025, 2, 25, 9, 30)


def add_score(username, game, points=50, when=PLAYED_AT):
    player = Player.get_by_username(username)
    if player is None:
        player = Player(username=username)
        db.session.add(player)
    player.scores.append(ScoreRecord(game=game, points=points, time=30, date=when))
    db.session.commit()


def test_unknown_player_has_not_played(app):
    with app.test_request_context():
        assert has_played_today("0xnew", "wordle", today=TUESDAY) is False


def test_score_submitted_today_counts(app):
    with app.test_request_context():
        add_score("0xalice", "wordle")
        assert has_played_today("0xalice", "wordle", today=TUESDAY) is True


def test_zero_point_score_still_counts(app):
    with app.test_request_context():
        add_score("0xalice", "hangman", points=0)
        assert has_played_today("0xalice", "hangman", today=TUESDAY) is True


def test_other_game_does_not_count(app):
    with app.test_request_context():
        add_score("0xalice", "wordle")
        assert has_played_today("0xalice", "hangman", today=TUESDAY) is False


def test_yesterdays_score_does_not_count(app):
    with app.test_request_context():
        add_score("0xalice", "wordle", when=PLAYED_AT - timedelta(days=1))
        assert has_played_today("0xalice", "wordle", today=TUESDAY) is False


def test_submission_date_decides_not_puzzle_date(app):
    # Played Monday's puzzle, submitted just after midnight
    with app.test_request_context():
        add_score("0xalice", "wordle", when=datetime(2025, 2, 25, 0, 0, 5))
        assert has_played_today("0xalice", "wordle", today=TUESDAY) is True


def test_defaults_to_server_today(app, freeze_today):
    freeze_today(TUESDAY)
    with app.test_request_context():
        add_score("0xalice", "trivia")
        assert has_played_today("0xalice", "trivia") is True
        assert today_key() == "2025-02-25"


def test_fails_open_when_store_offline(app, offline):
    with app.test_request_context():
        add_score("0xalice", "wordle")
        store = get_store()
        assert not store.connected
        assert has_played_today("0xalice", "wordle", store=store, today=TUESDAY) is False


def test_higherlower_days(app_ctx):
    assert is_higherlower_day(TUESDAY) is True
    assert is_higherlower_day(SATURDAY) is True
    assert is_higherlower_day(WEDNESDAY) is False


def test_higherlower_days_follow_config(app):
    app.config["HIGHERLOWER_DAYS"] = (2,)
    with app.app_context():
        assert is_higherlower_day(WEDNESDAY) is True
        assert is_higherlower_day(TUESDAY) is False
