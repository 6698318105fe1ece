"""Saved race persistence."""

from raceplan.persistence.race_store import DuplicateRaceNameError, SavedRaceStore

__all__ = [
    "DuplicateRaceNameError",
    "SavedRaceStore",
]
