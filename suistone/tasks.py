"""
Flask CLI Commands for Daily Content
Lets a scheduler create the day's content ahead of the first player, and
builds the Wordle word bank.

Commands:
    flask regenerate-daily              # Create today's content for every game
    flask regenerate-daily --dry-run    # Preview what would be created
    flask content-status                # Show today's content per game
    flask build-word-bank IN OUT        # Filter a word list into a Wordle word bank

Usage in a scheduled task:
    python3 -m flask --app wsgi regenerate-daily
"""

import json
import logging
from datetime import datetime

import click
from flask import current_app
from flask.cli import with_appcontext

from suistone.game.content import (
    filter_word_bank,
    get_candidate_pool,
    get_daily_content,
    regenerate_daily_content,
)
from suistone.game.models import GAMES
from suistone.utils.daily_limits import today_key
from suistone.utils.store import StoreHandle


# ─── UTILITY FUNCTIONS ─────────────────────────────────────────────────────────
LEVEL_COLOURS = {"ERROR": "red", "WARNING": "yellow", "SUCCESS": "green"}


def log_message(message: str, level: str = "INFO"):
    """Echo a timestamped line for the operator and mirror it to the app logger."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{timestamp}] {level}: {message}"
    click.echo(click.style(line, fg=LEVEL_COLOURS.get(level)), err=level == "ERROR")

    # SUCCESS is a display level only
    log_level = level if level in ("ERROR", "WARNING") else "INFO"
    current_app.logger.log(logging.getLevelName(log_level), message)


def store_available() -> bool:
    from suistone.game.models import db
    return StoreHandle(db.engine).connected


# ─── CLI COMMANDS ─────────────────────────────────────────────────────────────
@click.command('regenerate-daily')
@click.option('--dry-run', is_flag=True, help='Preview what would be created without making changes')
@click.option('--games', multiple=True, type=click.Choice(GAMES),
              help='Which games to generate (default: all)')
@with_appcontext
def regenerate_daily_command(dry_run, games):
    """Create today's content for each game that has none yet."""
    today = today_key()
    selected = list(games) or list(GAMES)

    if not store_available():
        log_message("Store not connected, skipping regeneration", "ERROR")
        raise SystemExit(1)

    if dry_run:
        log_message("🔍 DRY RUN MODE - No changes will be made")
        for game in selected:
            if get_daily_content(game, today):
                log_message(f"  {game}: already has content for {today}")
            else:
                pool = get_candidate_pool(game)
                log_message(f"[DRY RUN] Would pick {game} content from {len(pool)} candidates")
        return

    log_message(f"🚀 Regenerating daily content for {today}...")
    results = regenerate_daily_content(selected, today)

    failed = [game for game, record in results.items() if record is None]
    for game, record in results.items():
        status = f"✅ {record.content_json[:40]}" if record else "❌ Failed"
        log_message(f"  {game}: {status}")

    if failed:
        log_message(f"Regeneration failed for: {', '.join(failed)}", "ERROR")
        raise SystemExit(1)
    log_message("🎯 Daily content ready!", "SUCCESS")


@click.command('content-status')
@with_appcontext
def content_status_command():
    """Check whether today's content exists for each game."""
    today = today_key()
    log_message(f"📊 Content Status Report for {today}")

    if not store_available():
        log_message("Store not connected", "WARNING")
        return

    for game in GAMES:
        record = get_daily_content(game, today)
        pool = get_candidate_pool(game)
        log_message(f"  {game}: {'ready' if record else 'missing'} ({len(pool)} candidates)")


@click.command('build-word-bank')
@click.argument('input_file', type=click.File('r', encoding='utf-8'))
@click.argument('output_file', type=click.Path(dir_okay=False, writable=True))
def build_word_bank_command(input_file, output_file):
    """Filter a newline-separated word list down to 5-letter words."""
    words = filter_word_bank(input_file)
    click.echo(f"Total 5-letter words: {len(words)}")

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(words, f, indent=2)
    click.echo(click.style(f"Saved {len(words)} words to {output_file}", fg='green'))


# ─── REGISTRATION FUNCTION ─────────────────────────────────────────────────────
def register_cli_commands(app):
    """Register all CLI commands with the Flask app."""
    app.cli.add_command(regenerate_daily_command)
    app.cli.add_command(content_status_command)
    app.cli.add_command(build_word_bank_command)

    app.logger.info("Daily content CLI commands registered successfully")
