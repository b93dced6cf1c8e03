"""Dataclass model of Common Analysis File standard records and their branches."""

__version__ = "3.12.0"