"""Discord bot hosting the waste dashboard."""

from __future__ import annotations

from typing import Any

import discord
from discord.ext import commands

from .logging_config import setup_logging


class WastewiseBot(commands.Bot):
    """Small ``discord.py`` based bot serving the dashboard's slash commands."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the bot with the minimal intents required."""
        intents = kwargs.pop("intents", None) or discord.Intents.default()
        # Slash commands and components only; message content intent not
        # needed.
        intents.message_content = False
        super().__init__(
            command_prefix=kwargs.pop("command_prefix", "!"),
            intents=intents,
        )
        self.log = setup_logging()

    async def setup_hook(self) -> None:
        """Sync slash commands so newly added ones show up for users."""
        tree = getattr(self, "tree", None)
        if tree is not None:  # pragma: no cover - exercised in integration
            await tree.sync()
        await super().setup_hook()

    async def on_ready(self) -> None:  # pragma: no cover - requires discord
        """Log a short confirmation once the bot connected successfully."""
        await self.change_presence(activity=discord.Game(name="Sorting waste"))
        self.log.info(
            "Logged in as %s (%s)",
            self.user,
            self.user.id if self.user else "?",
        )


__all__ = ["WastewiseBot"]
