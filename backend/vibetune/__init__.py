"""VibeTune music player backend."""

__version__ = "1.0.0"
