"""
Daily content for SuiStone games
Candidate pools, the typed payload of each game, and the generator that makes
sure every game has exactly one puzzle for today.
"""
from __future__ import annotations

import json
import os
import random
import typing as t
from dataclasses import dataclass

from flask import current_app
from sqlalchemy.exc import IntegrityError

from suistone.utils.daily_limits import today_key
from .models import db, DailyContent, GAMES

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
TRIVIA_SETS_FILE = os.path.join(DATA_DIR, "trivia_sets.json")

HANGMAN_WORDS = ['CRYPTO', 'SUISTONE', 'GROK', 'MINES', 'LEDGER']
WORDLE_WORDS = ['STONE', 'CRYPT', 'RELIC', 'GROVE', 'CHASM']
HIGHERLOWER_MARKERS = ['HIGHERLOWER_PLACEHOLDER']
MINEHUNTER_SEEDS = list(range(1000, 1024))


# ─── PAYLOAD TYPES ────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class WordContent:
    word: str

    def to_dict(self) -> dict:
        return {"word": self.word}


@dataclass(frozen=True)
class TriviaQuestion:
    question: str
    options: t.List[str]
    correct_answer: str

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
        }


@dataclass(frozen=True)
class TriviaContent:
    questions: t.List[TriviaQuestion]

    def to_dict(self) -> dict:
        return {"questions": [q.to_dict() for q in self.questions]}


@dataclass(frozen=True)
class MinehunterContent:
    seed: int

    def to_dict(self) -> dict:
        return {"seed": self.seed}


@dataclass(frozen=True)
class MarkerContent:
    value: str

    def to_dict(self) -> dict:
        return {"marker": self.value}


Payload = t.Union[WordContent, TriviaContent, MinehunterContent, MarkerContent]


def decode_content(game: str, raw) -> Payload:
    """Turn the stored JSON value for a game into its payload type."""
    if game in ("wordle", "hangman"):
        return WordContent(word=str(raw))
    if game == "trivia":
        return TriviaContent(questions=[
            TriviaQuestion(
                question=q["question"],
                options=list(q["options"]),
                correct_answer=q["correctAnswer"],
            )
            for q in raw
        ])
    if game == "minehunter":
        return MinehunterContent(seed=int(raw))
    if game == "higherlower":
        return MarkerContent(value=str(raw))
    raise ValueError(f"Unknown game: {game}")


# ─── CANDIDATE POOLS ──────────────────────────────────────────────────────────
def load_trivia_sets(path: str = TRIVIA_SETS_FILE) -> t.List[list]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def filter_word_bank(lines: t.Iterable[str]) -> t.List[str]:
    """Keep the purely alphabetic 5-letter words, upper-cased."""
    words = []
    for line in lines:
        word = line.strip().upper()
        if len(word) == 5 and word.isascii() and word.isalpha():
            words.append(word)
    return words


def load_word_bank(path: str) -> t.List[str]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Word bank JSON root must be a list of words.")
    return filter_word_bank(data)


def get_candidate_pool(game: str) -> list:
    """Return the fixed list today's content for game is drawn from."""
    if game == "hangman":
        return HANGMAN_WORDS
    if game == "wordle":
        bank_path = current_app.config.get("WORD_BANK_PATH")
        if bank_path and os.path.exists(bank_path):
            bank = load_word_bank(bank_path)
            if bank:
                return bank
            current_app.logger.warning(f"Word bank {bank_path} has no usable words, using built-in pool")
        return WORDLE_WORDS
    if game == "trivia":
        return load_trivia_sets()
    if game == "minehunter":
        return MINEHUNTER_SEEDS
    if game == "higherlower":
        return HIGHERLOWER_MARKERS
    raise ValueError(f"Unknown game: {game}")


# ─── GENERATOR ────────────────────────────────────────────────────────────────
def get_daily_content(game: str, today: t.Optional[str] = None) -> t.Optional[DailyContent]:
    return DailyContent.for_day(today or today_key(), game)


def ensure_daily_content(game: str, pool: t.Sequence, today: t.Optional[str] = None) -> t.Optional[DailyContent]:
    """
    Make sure game has a record for today, drawing one candidate at random if not.
    Idempotent: an existing record is returned untouched.
    """
    today = today or today_key()

    existing = DailyContent.for_day(today, game)
    if existing:
        return existing

    if not pool:
        current_app.logger.warning(f"No candidates for {game}, cannot create content for {today}")
        return None

    chosen = random.choice(list(pool))
    record = DailyContent(date=today, game=game, content_json=json.dumps(chosen))
    db.session.add(record)
    try:
        db.session.commit()
    except IntegrityError:
        # Another request inserted today's record between our lookup and insert
        db.session.rollback()
        current_app.logger.info(f"Daily {game} content for {today} already created by another request")
        return DailyContent.for_day(today, game)

    current_app.logger.info(f"Created daily {game} content for {today}")
    return record


def regenerate_daily_content(games: t.Optional[t.Iterable[str]] = None,
                             today: t.Optional[str] = None) -> t.Dict[str, t.Optional[DailyContent]]:
    """Run the generator for every game (or the given subset)."""
    today = today or today_key()
    results = {}
    for game in (games or GAMES):
        results[game] = ensure_daily_content(game, get_candidate_pool(game), today)
    return results
