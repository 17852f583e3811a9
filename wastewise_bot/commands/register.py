"""Registration of slash commands for the bot."""

from __future__ import annotations

import discord
from discord.ext import commands

from ..core.models import Category, SessionProfile
from ..data.dashboard import Dashboard
from ..ui.modals import LoginModal, LogWasteModal, SignupModal
from ..ui.views import (
    CHALLENGES,
    TIPS,
    DashboardView,
    category_select_view,
    dashboard_embed,
    listing_embed,
)


def register_commands(bot: commands.Bot, dashboard: Dashboard) -> None:
    """Register the dashboard's slash commands on ``bot``."""
    tree = bot.tree
    choices = getattr(
        discord.app_commands, "choices", lambda **_kwargs: (lambda func: func)
    )

    async def require_session(interaction: discord.Interaction) -> SessionProfile | None:
        profile = await dashboard.run(dashboard.session_for, interaction.user.id)
        if profile is None:
            await interaction.response.send_message(
                "Log in with `/login` or `/signup` first.", ephemeral=True
            )
        return profile

    @tree.command(name="signup", description="Create an account")
    async def signup(interaction: discord.Interaction) -> None:
        await interaction.response.send_modal(SignupModal(dashboard))

    @tree.command(name="login", description="Log in to your account")
    async def login(interaction: discord.Interaction) -> None:
        await interaction.response.send_modal(LoginModal(dashboard))

    @tree.command(name="logout", description="Log out")
    async def logout(interaction: discord.Interaction) -> None:
        credentials = await dashboard.run(dashboard.credentials_for, interaction.user.id)
        await dashboard.run(credentials.logout)
        await interaction.response.send_message("You have been logged out.", ephemeral=True)

    @tree.command(name="whoami", description="Show the account you are logged in as")
    async def whoami(interaction: discord.Interaction) -> None:
        profile = await require_session(interaction)
        if profile is None:
            return
        await interaction.response.send_message(
            f"{profile.name} <{profile.email}> • {profile.community}", ephemeral=True
        )

    @tree.command(name="log_waste", description="Log a waste item")
    @discord.app_commands.describe(category="Waste category")
    @choices(
        category=[
            discord.app_commands.Choice(name=c.value, value=c.value) for c in Category
        ]
    )
    async def log_waste(
        interaction: discord.Interaction, category: str | None = None
    ) -> None:
        """Open the log form, letting the user pick a category if none given."""
        if await require_session(interaction) is None:
            return
        if category:
            await interaction.response.send_modal(LogWasteModal(dashboard, Category(category)))
            return
        await interaction.response.send_message(
            "Select a waste category:", view=category_select_view(dashboard), ephemeral=True
        )

    @tree.command(name="dashboard", description="Open your waste dashboard")
    async def dashboard_cmd(interaction: discord.Interaction) -> None:
        profile = await require_session(interaction)
        if profile is None:
            return
        embed = await dashboard.run(dashboard_embed, dashboard, profile, "recent")
        await interaction.response.send_message(
            embed=embed,
            view=DashboardView(dashboard),
            ephemeral=True,
        )

    def add_view_command(name: str, description: str) -> None:
        @tree.command(name=name, description=description)
        async def show(interaction: discord.Interaction) -> None:
            profile = await require_session(interaction)
            if profile is None:
                return
            embed = await dashboard.run(dashboard_embed, dashboard, profile, name)
            await interaction.response.send_message(embed=embed, ephemeral=True)

    add_view_command("recent", "Show your most recent entries")
    add_view_command("weekly", "Show the last 7 days per category")
    add_view_command("breakdown", "Show totals per category")
    add_view_command("stats", "Show your summary statistics")

    @tree.command(name="tips", description="Waste reduction resources")
    async def tips(interaction: discord.Interaction) -> None:
        await interaction.response.send_message(
            embed=listing_embed("Educational Resources", TIPS), ephemeral=True
        )

    @tree.command(name="challenges", description="Community challenges")
    async def challenges(interaction: discord.Interaction) -> None:
        await interaction.response.send_message(
            embed=listing_embed("Community Challenges", CHALLENGES), ephemeral=True
        )
