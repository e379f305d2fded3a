"""dont: run the opposite of what you asked for."""

__version__ = "0.1.0"
