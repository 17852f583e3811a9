"""Slash command registration."""
