"""Race timing and nutrition planning for ultra-endurance runners."""

__version__ = "0.1.0"
