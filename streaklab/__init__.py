"""StreakLab: synthetic streak-field imagery with layered noise."""

__version__ = "0.1.0"
