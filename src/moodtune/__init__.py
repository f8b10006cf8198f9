"""MoodTune: mood journaling backend with AI reflections and music recommendations."""

__version__ = "1.0.0"
