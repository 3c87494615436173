"""
Slash-command layer (presentation only).

what?:
  - /sentiment rate   → AFINN rating of a piece of text + the words that matched (ephemeral)
  - /sentiment status → your recent ratings: average, lowest, highest (ephemeral)
  - /sentiment export → your recent ratings as CSV (ephemeral)
"""

import io, discord
from discord import app_commands
from .model import explain
from .storage import fetch_recent_user_ratings
from .utils import csv_export

COLOR_POS = 0x10B981
COLOR_NEU = 0x3B82F6
COLOR_NEG = 0xEF4444

def _summary(rows):
    if not rows:
        return 0.0, 0, 0
    vals = [r for _, r in rows]
    return sum(vals) / len(vals), min(vals), max(vals)

def _color(rating):
    return COLOR_POS if rating > 0 else COLOR_NEG if rating < 0 else COLOR_NEU

def _meter(avg, span=5, width=20):
    """Bar centred on 0, clamped to ±span."""
    pos = (max(-span, min(span, avg)) + span) / (2 * span)
    filled = int(round(pos * width))
    return "█" * filled + "░" * (width - filled)

def _hits_text(hits):
    if not hits:
        return "- No AFINN words matched."
    return "\n".join(f"- `{w}` {s:+d}" for w, s in hits)

class SentimentCommands(app_commands.Group):
    def __init__(self):
        super().__init__(name="sentiment", description="AFINN sentiment rating")

    @app_commands.command(name="rate", description="Rate a piece of text (private)")
    @app_commands.describe(text="The text to rate")
    async def rate(self, inter: discord.Interaction, text: str):
        rating, hits = explain(text)
        e = discord.Embed(title=f"Sentiment: {rating:+d}", description=_hits_text(hits), color=_color(rating))
        await inter.response.send_message(embed=e, ephemeral=True)

    @app_commands.command(name="status", description="Your 7-day sentiment snapshot (private)")
    async def status(self, inter: discord.Interaction):
        rows = fetch_recent_user_ratings(str(inter.user.id), str(inter.guild_id))
        avg, low, high = _summary(rows)
        e = discord.Embed(title="Your sentiment (7d)", color=_color(avg))
        e.add_field(name=f"{avg:+.2f} avg", value=f"`{_meter(avg)}`", inline=False)
        e.add_field(name="Messages", value=str(len(rows)), inline=True)
        e.add_field(name="Lowest", value=f"{low:+d}", inline=True)
        e.add_field(name="Highest", value=f"{high:+d}", inline=True)
        await inter.response.send_message(embed=e, ephemeral=True)

    @app_commands.command(name="export", description="Download your 7-day ratings as CSV (private)")
    async def export(self, inter: discord.Interaction):
        rows = fetch_recent_user_ratings(str(inter.user.id), str(inter.guild_id))
        file = discord.File(fp=io.BytesIO(csv_export(rows)), filename="sentiment-trend.csv")
        await inter.response.send_message("Here’s your 7-day history.", file=file, ephemeral=True)
