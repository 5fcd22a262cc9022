"""Read-only access to the host's game library."""

from notesearch.library.memory import InMemoryLibrary
from notesearch.library.models import GameRecord, IconResolutionError, LibraryStore

__all__ = ["GameRecord", "IconResolutionError", "InMemoryLibrary", "LibraryStore"]
