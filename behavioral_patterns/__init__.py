"""Game-character models built around the command, observer, strategy, state and visitor patterns."""

__version__ = "0.1.0"
__all__ = ["character", "commands", "observer", "strategy", "running", "visitor"]