"""Life statistics from a birth date, adjusted for developmental milestones."""

__version__ = "0.1.0"
