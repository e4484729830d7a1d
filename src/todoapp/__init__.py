"""todoapp: a single-screen to-do list for the terminal."""

__version__ = "1.0.0"
