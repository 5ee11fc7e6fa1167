"""Football squad, match and scouting calculators."""

__version__ = "0.1.0"
