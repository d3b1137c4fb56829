"""Choice-driven console story game."""

__version__ = "0.1.0"
