"""Host plugin entry point that registers the notes search source."""

from __future__ import annotations

import threading
import uuid
from pathlib import Path
from typing import Any

from loguru import logger

from notesearch.config.loader import load_config
from notesearch.config.schema import Config
from notesearch.library.models import LibraryStore
from notesearch.registry import RegistrationError, SearchSourceRegistry
from notesearch.search.source import GameNotesSearchSource

PLUGIN_ID = uuid.UUID("48cfbcfc-545d-4737-aaae-b495a5e2bea6")

# Process-wide; the host may construct the plugin more than once.
_registered = False
_register_lock = threading.Lock()


class NotesSearchPlugin:
    """Registers a ``GameNotesSearchSource`` with the quick-search registry.

    Without an explicit ``config`` the settings are read with ``load_config``.
    """

    id = PLUGIN_ID

    def __init__(
        self,
        library: LibraryStore,
        registry: SearchSourceRegistry,
        config: Config | None = None,
        main_view: Any | None = None,
        config_path: Path | None = None,
    ):
        self.config = config or load_config(config_path)
        self.main_view = main_view
        select_game = main_view.select_game if main_view is not None else None
        self.source = GameNotesSearchSource(library, self.config.search, select_game=select_game)
        self.registered = _register_once(registry, self.config.search.source_key, self.source)


def _register_once(registry: SearchSourceRegistry, key: str, source: GameNotesSearchSource) -> bool:
    global _registered
    with _register_lock:
        if _registered:
            logger.debug("NotesSearch: source already registered, skipping")
            return False
        try:
            registry.add_item_source(key, source)
        except RegistrationError as e:
            # Key owned by someone else; the guard stays open for a later attempt.
            logger.warning("NotesSearch: registration skipped: {}", e)
            return False
        _registered = True
    logger.info("NotesSearch: source registered.")
    return True


def is_registered() -> bool:
    return _registered
