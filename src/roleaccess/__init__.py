"""Role capability and UI visibility settings engine."""

__version__ = "0.1.0"
