"""
Bot entrypoint & event wiring.

what?:
  - Configures intents & Client, syncs the slash-command tree.
  - Rates every guild message with the AFINN lexicon (one call per message),
    stores the integer rating, and reacts to strongly negative messages.

why?:
  - The scorer knows nothing about Discord; this module is the host that
    feeds it events and keeps the results.
"""

import time, discord
from typing import Dict
from discord.ext import commands, tasks
from .config import SETTINGS
from .logging_setup import get_logger, setup_logging
from .model import get_lexicon, score
from .storage import init_db, record_rating, purge_older_than
from .commands import SentimentCommands

log = get_logger("sentiment.bot")

intents = discord.Intents.default()
intents.message_content = True
intents.guilds = True
bot = commands.Bot(command_prefix="!", intents=intents)

RATE_LIMIT_SECONDS = 1.5
ALERT_EMOJI = "🫂"
_last_scored: Dict[int, float] = {}


def register_commands(tree) -> None:
    """Add the /sentiment group unless the tree already has it."""
    if tree.get_command("sentiment") is None:
        tree.add_command(SentimentCommands())


@bot.event
async def on_ready():
    log.info("bot_ready", user=str(bot.user), guilds=len(bot.guilds), lexicon_entries=len(get_lexicon()))
    try:
        await bot.tree.sync()
    except Exception as e:
        log.error("command_sync_failed", error=str(e))
    if not retention_cleaner.is_running():
        retention_cleaner.start()


@tasks.loop(hours=24)
async def retention_cleaner():
    try:
        n = purge_older_than(SETTINGS.retention_days)
        log.info("ratings_purged", rows=n, days=SETTINGS.retention_days)
    except Exception as e:
        log.error("purge_failed", error=str(e))


def _throttled(author_id: int, now: float) -> bool:
    if now - _last_scored.get(author_id, 0) < RATE_LIMIT_SECONDS:
        return True
    _last_scored[author_id] = now
    return False


@bot.event
async def on_message(message: discord.Message):
    if message.author.bot or not message.guild:
        return
    content = message.content or ""
    if not content.strip() or _throttled(message.author.id, time.time()):
        await bot.process_commands(message)
        return

    try:
        rating = score(content)
        record_rating(
            str(message.id),
            str(message.author.id),
            str(message.channel.id),
            str(message.guild.id),
            rating,
        )
        log.debug("rating_recorded", guild=message.guild.id, channel=message.channel.id, rating=rating)
        if rating <= SETTINGS.alert_threshold:
            await message.add_reaction(ALERT_EMOJI)
    except Exception as e:
        log.error("message_scoring_failed", message_id=message.id, error=str(e))

    await bot.process_commands(message)


def main():
    setup_logging()
    if not SETTINGS.token:
        raise SystemExit("Set DISCORD_TOKEN in .env")
    init_db()
    get_lexicon()
    register_commands(bot.tree)
    bot.run(SETTINGS.token, log_handler=None)


if __name__ == "__main__":
    main()
