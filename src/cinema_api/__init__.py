"""Cinema API: movies and their screening schedules."""

__version__ = "0.1.0"
