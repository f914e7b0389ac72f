"""iHeartRadio station directory extension for the host streaming app."""

__version__ = "0.3.0"
