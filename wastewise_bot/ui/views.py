from __future__ import annotations
import discord
from ..core import aggregator
from ..core.models import (
    Category,
    CategoryTotal,
    DayBucket,
    SessionProfile,
    SummaryStats,
    WasteLogEntry,
    WeeklyTrend,
)
from ..data.dashboard import Dashboard
from .modals import LogWasteModal

CATEGORY_ICONS = {
    Category.RECYCLABLE: "♻️",
    Category.COMPOSTABLE: "🌱",
    Category.LANDFILL: "🗑️",
}

TIPS = [
    ("Composting 101", "Learn how to start composting at home and reduce organic waste."),
    ("Recycling Guidelines", "Understand what can and cannot be recycled in your area."),
    ("Waste Reduction Tips", "Simple strategies to reduce waste in your daily life."),
    ("Local Services", "Find recycling centers and waste collection schedules near you."),
]

CHALLENGES = [
    ("Reduce Landfill Waste by 15%", "Challenge your community to reduce landfill waste this week"),
    ("Composting Week", "Increase compostable waste logging by 25%"),
]


def bar(value: int, peak: int, width: int = 20) -> str:
    # scale value against the largest value shown
    if peak <= 0:
        return "▯" * width
    blocks = int(round(value / peak * width))
    return "▮" * blocks + "▯" * (width - blocks)


def weekly_lines(buckets: list[DayBucket]) -> list[str]:
    peak = max((b.total for b in buckets), default=0)
    lines = []
    for b in buckets:
        parts = " ".join(
            f"{CATEGORY_ICONS[c]}{b.amount(c)}" for c in Category if b.amount(c)
        )
        lines.append(f"`{b.label}` {bar(b.total, peak, 10)} {b.total} {parts}".rstrip())
    return lines


def weekly_embed(buckets: list[DayBucket]) -> discord.Embed:
    e = discord.Embed(title="Last 7 Days", description="\n".join(weekly_lines(buckets)))
    if buckets:
        e.set_footer(text=f"{buckets[0].date.isoformat()} – {buckets[-1].date.isoformat()}")
    return e


def breakdown_embed(totals: list[CategoryTotal]) -> discord.Embed:
    e = discord.Embed(title="Category Breakdown")
    if not totals:
        e.description = "Nothing logged yet."
        return e
    peak = max(t.total for t in totals)
    for t in totals:
        e.add_field(
            name=f"{CATEGORY_ICONS[t.category]} {t.category.value}",
            value=f"{t.total}\n{bar(t.total, peak)}",
            inline=False,
        )
    return e


def trend_text(trend: WeeklyTrend) -> str:
    if trend.reduction_pct is None:
        return f"{trend.this_week} this week (no data for last week)"
    if trend.reduction_pct >= 0:
        return f"{trend.reduction_pct}% less than last week ({trend.this_week} vs {trend.last_week})"
    return f"{-trend.reduction_pct}% more than last week ({trend.this_week} vs {trend.last_week})"


def stats_embed(stats: SummaryStats, trend: WeeklyTrend) -> discord.Embed:
    e = discord.Embed(title="Your Waste Statistics")
    e.add_field(name="Total Items", value=str(stats.total_items), inline=True)
    e.add_field(name="♻️ Recyclable", value=f"{stats.recyclable_pct}%", inline=True)
    e.add_field(name="🌱 Compostable", value=f"{stats.compostable_pct}%", inline=True)
    e.add_field(name="🗑️ Landfill", value=f"{stats.landfill_pct}%", inline=True)
    e.add_field(name="Weekly Trend", value=trend_text(trend), inline=False)
    return e


def recent_embed(profile: SessionProfile, entries: list[WasteLogEntry], total_logged: int) -> discord.Embed:
    e = discord.Embed(title=f"{profile.name} • {profile.community}")
    e.add_field(name="Total Items Logged", value=str(total_logged), inline=False)
    if entries:
        value = "\n".join(
            f"{CATEGORY_ICONS[x.category]} {x.item_name} ×{x.quantity} ({x.date.isoformat()})"
            for x in entries
        )
    else:
        value = "No recent activity"
    e.add_field(name="Recent Activity", value=value, inline=False)
    return e


def listing_embed(title: str, items: list[tuple[str, str]]) -> discord.Embed:
    e = discord.Embed(title=title)
    for name, text in items:
        e.add_field(name=name, value=text, inline=False)
    return e


def dashboard_embed(dashboard: Dashboard, profile: SessionProfile, view: str) -> discord.Embed:
    """Render one dashboard view for ``profile`` from the current log."""
    entries = dashboard.logs.list_all()
    today = dashboard.today()
    if view == "weekly":
        return weekly_embed(aggregator.weekly_series(entries, profile.id, today))
    if view == "breakdown":
        return breakdown_embed(aggregator.category_breakdown(entries, profile.id))
    if view == "stats":
        return stats_embed(
            aggregator.summary_stats(entries, profile.id),
            aggregator.weekly_trend(entries, profile.id, today),
        )
    return recent_embed(
        profile,
        dashboard.logs.recent(profile.id),
        dashboard.logs.count_for_user(profile.id),
    )


class DashboardView(discord.ui.View):
    """Buttons switching between the dashboard's views."""

    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__(timeout=300)
        self.dashboard = dashboard

    async def _show(self, interaction: discord.Interaction, view: str) -> None:
        profile = await self.dashboard.run(self.dashboard.session_for, interaction.user.id)
        if profile is None:
            await interaction.response.send_message("You are logged out.", ephemeral=True)
            return
        embed = await self.dashboard.run(dashboard_embed, self.dashboard, profile, view)
        await interaction.response.edit_message(embed=embed, view=self)

    @discord.ui.button(label="Recent", style=discord.ButtonStyle.secondary)
    async def recent(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        await self._show(interaction, "recent")

    @discord.ui.button(label="Weekly", style=discord.ButtonStyle.primary)
    async def weekly(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        await self._show(interaction, "weekly")

    @discord.ui.button(label="Breakdown", style=discord.ButtonStyle.primary)
    async def breakdown(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        await self._show(interaction, "breakdown")

    @discord.ui.button(label="Stats", style=discord.ButtonStyle.success)
    async def stats(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        await self._show(interaction, "stats")


def category_select_view(dashboard: Dashboard) -> discord.ui.View:
    """Ephemeral chooser that opens :class:`LogWasteModal` for the picked category."""
    view = discord.ui.View()
    options = [
        discord.SelectOption(label=c.value, value=c.value, emoji=CATEGORY_ICONS[c])
        for c in Category
    ]
    select = discord.ui.Select(placeholder="Select waste category", options=options)

    async def on_select(inter: discord.Interaction) -> None:
        await inter.response.send_modal(LogWasteModal(dashboard, Category(select.values[0])))

    select.callback = on_select
    view.add_item(select)
    return view
