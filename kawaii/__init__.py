"""Minecraft launcher: downloads a game version's client, libraries and assets, and starts the game."""

__version__ = "0.1.0"