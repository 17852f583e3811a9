"""Minimal stand-ins for the parts of ``discord`` the UI modules touch."""

from __future__ import annotations

import sys
import types

import pytest

UI_MODULES = (
    "wastewise_bot.ui.modals",
    "wastewise_bot.ui.views",
    "wastewise_bot.commands.register",
)


class Embed:
    def __init__(self, title=None, description=None, **kwargs):
        self.title = title
        self.description = description
        self.fields = []
        self.footer = None

    def add_field(self, *, name, value, inline=True):
        self.fields.append((name, value, inline))

    def set_footer(self, *, text):
        self.footer = text


class Modal:
    def __init__(self, *args, **kwargs):
        self.children = []

    def __init_subclass__(cls, **kwargs):
        pass

    def add_item(self, item):
        self.children.append(item)


class TextInput:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.value = kwargs.get("default") or ""


class View:
    def __init__(self, *args, timeout=None, **kwargs):
        self.timeout = timeout
        self.children = []

    def add_item(self, item):
        self.children.append(item)


class Select:
    def __init__(self, **kwargs):
        self.options = kwargs.get("options", [])
        self.values = []
        self.callback = None


class SelectOption:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


class Choice:
    def __init__(self, name, value):
        self.name = name
        self.value = value


class Tree:
    def __init__(self):
        self.commands = {}

    def command(self, *, name, description):
        def decorator(func):
            self.commands[name] = func
            return func

        return decorator


class Response:
    def __init__(self):
        self.messages = []
        self.modals = []
        self.edits = []

    async def send_message(self, content=None, **kwargs):
        self.messages.append((content, kwargs))

    async def send_modal(self, modal):
        self.modals.append(modal)

    async def edit_message(self, **kwargs):
        self.edits.append(kwargs)


def button(**kwargs):
    return lambda func: func


@pytest.fixture
def discord_stub(monkeypatch):
    """Install a fake ``discord`` package and re-import the UI modules."""
    ui = types.SimpleNamespace(
        Modal=Modal,
        TextInput=TextInput,
        View=View,
        Select=Select,
        button=button,
    )
    app_commands = types.SimpleNamespace(
        Choice=Choice, describe=lambda **kwargs: (lambda func: func)
    )
    discord = types.SimpleNamespace(
        ui=ui,
        app_commands=app_commands,
        Embed=Embed,
        SelectOption=SelectOption,
        ButtonStyle=types.SimpleNamespace(primary=1, secondary=2, success=3, danger=4),
        TextStyle=types.SimpleNamespace(short=1, long=2),
    )
    ext = types.ModuleType("discord.ext")
    commands = types.ModuleType("discord.ext.commands")
    commands.Bot = object
    ext.commands = commands
    discord.ext = ext

    monkeypatch.setitem(sys.modules, "discord", discord)
    monkeypatch.setitem(sys.modules, "discord.ui", ui)
    monkeypatch.setitem(sys.modules, "discord.ext", ext)
    monkeypatch.setitem(sys.modules, "discord.ext.commands", commands)
    for name in UI_MODULES:
        monkeypatch.delitem(sys.modules, name, raising=False)
    return discord


@pytest.fixture
def make_interaction():
    def factory(user_id: int = 1):
        return types.SimpleNamespace(
            user=types.SimpleNamespace(id=user_id), response=Response()
        )

    return factory


@pytest.fixture
def make_tree():
    return Tree
