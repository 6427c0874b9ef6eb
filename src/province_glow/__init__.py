"""Province Glow: light up your province once a day and leave a message."""

__version__ = "0.1.0"
