"""Two-player gamepad air hockey: hit tests, match rules, scenes and the game command."""

__version__ = "0.1.0"