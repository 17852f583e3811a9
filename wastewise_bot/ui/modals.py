from __future__ import annotations
import discord
from ..core.errors import ValidationFailure
from ..core.models import Category, SessionProfile
from ..data.dashboard import Dashboard


def parse_quantity(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class SignupModal(discord.ui.Modal, title="Create Account"):
    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__()
        self.dashboard = dashboard
        self.name_input = discord.ui.TextInput(label="Name", required=True, max_length=100)
        self.email_input = discord.ui.TextInput(label="Email", required=True, max_length=200)
        self.password_input = discord.ui.TextInput(label="Password", required=True, max_length=200)
        self.community_input = discord.ui.TextInput(
            label="Community",
            required=False,
            placeholder=dashboard.default_community,
            max_length=100,
        )
        for item in (self.name_input, self.email_input, self.password_input, self.community_input):
            self.add_item(item)

    async def on_submit(self, interaction: discord.Interaction) -> None:
        credentials = await self.dashboard.run(self.dashboard.credentials_for, interaction.user.id)
        result = await self.dashboard.run(
            credentials.signup,
            self.name_input.value,
            self.email_input.value,
            self.password_input.value,
            self.community_input.value or None,
        )
        if not isinstance(result, SessionProfile):
            await interaction.response.send_message(result.message, ephemeral=True)
            return
        await interaction.response.send_message(
            f"Welcome, {result.name}! You joined `{result.community}`.",
            ephemeral=True,
        )


class LoginModal(discord.ui.Modal, title="Log In"):
    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__()
        self.dashboard = dashboard
        self.email_input = discord.ui.TextInput(label="Email", required=True, max_length=200)
        self.password_input = discord.ui.TextInput(label="Password", required=True, max_length=200)
        self.add_item(self.email_input)
        self.add_item(self.password_input)

    async def on_submit(self, interaction: discord.Interaction) -> None:
        credentials = await self.dashboard.run(self.dashboard.credentials_for, interaction.user.id)
        result = await self.dashboard.run(
            credentials.login, self.email_input.value, self.password_input.value
        )
        if not isinstance(result, SessionProfile):
            await interaction.response.send_message(result.message, ephemeral=True)
            return
        await interaction.response.send_message(f"Welcome back, {result.name}!", ephemeral=True)


class LogWasteModal(discord.ui.Modal, title="Log Waste Item"):
    def __init__(self, dashboard: Dashboard, category: Category) -> None:
        super().__init__()
        self.dashboard = dashboard
        self.category = category
        self.item_input = discord.ui.TextInput(
            label="Item Name",
            placeholder="e.g., Plastic bottle, Food scraps, Paper",
            required=True,
            max_length=100,
        )
        self.quantity_input = discord.ui.TextInput(
            label="Quantity", default="1", required=True, max_length=6
        )
        self.add_item(self.item_input)
        self.add_item(self.quantity_input)

    async def on_submit(self, interaction: discord.Interaction) -> None:
        profile = await self.dashboard.run(self.dashboard.session_for, interaction.user.id)
        if profile is None:
            await interaction.response.send_message(
                "Log in with `/login` or `/signup` first.", ephemeral=True
            )
            return
        quantity = parse_quantity(self.quantity_input.value)
        result = await self.dashboard.run(
            self.dashboard.logs.append,
            self.category, self.item_input.value, quantity, profile.id
        )
        if isinstance(result, ValidationFailure):
            await interaction.response.send_message(result.message, ephemeral=True)
            return
        await interaction.response.send_message(
            f"Added {result.quantity} {result.item_name} to {result.category.value} category.",
            ephemeral=True,
        )
