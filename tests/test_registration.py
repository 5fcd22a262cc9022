import pytest
from loguru import logger

from notesearch import plugin
from notesearch.config.loader import save_config
from notesearch.config.schema import Config, SearchConfig
from notesearch.library.memory import InMemoryLibrary
from notesearch.library.models import GameRecord
from notesearch.plugin import NotesSearchPlugin
from notesearch.registry import RegistrationError, SearchSourceRegistry
from notesearch.search.source import GameNotesSearchSource


class FakeMainView:
    def __init__(self):
        self.selected: list = []

    def select_game(self, game_id) -> None:
        self.selected.append(game_id)


@pytest.fixture(autouse=True)
def _fresh_registration(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(plugin, "_registered", False)
    monkeypatch.setattr("notesearch.config.loader.get_config_path", lambda: tmp_path / "missing.json")


def test_plugin_registers_source_once() -> None:
    registry = SearchSourceRegistry()
    library = InMemoryLibrary()

    first = NotesSearchPlugin(library, registry)
    second = NotesSearchPlugin(library, registry)

    assert first.registered is True
    assert second.registered is False
    assert len(registry) == 1
    assert registry.get("GameNotes") is first.source
    assert plugin.is_registered()


def test_guard_is_process_wide_across_registries() -> None:
    NotesSearchPlugin(InMemoryLibrary(), SearchSourceRegistry())
    other = SearchSourceRegistry()

    NotesSearchPlugin(InMemoryLibrary(), other)

    assert len(other) == 0


def test_plugin_uses_configured_key_and_priority() -> None:
    registry = SearchSourceRegistry()
    config = Config(search=SearchConfig(source_key="Notes", priority=5))

    NotesSearchPlugin(InMemoryLibrary(), registry, config=config)

    assert "Notes" in registry
    assert registry.get("Notes").priority == 5


@pytest.mark.asyncio
async def test_registered_source_selects_through_main_view() -> None:
    registry = SearchSourceRegistry()
    view = FakeMainView()
    NotesSearchPlugin(InMemoryLibrary([GameRecord(id=7, name="Celeste")]), registry, main_view=view)

    items = await registry.get("GameNotes").get_items_async("cel", [])
    items[0].primary_action.execute()

    assert view.selected == [7]


def test_plugin_id_is_stable() -> None:
    assert str(NotesSearchPlugin.id) == "48cfbcfc-545d-4737-aaae-b495a5e2bea6"


def test_registry_rejects_different_source_under_same_key() -> None:
    registry = SearchSourceRegistry()
    source = GameNotesSearchSource(InMemoryLibrary())
    registry.add_item_source("GameNotes", source)
    registry.add_item_source("GameNotes", source)

    with pytest.raises(RegistrationError):
        registry.add_item_source("GameNotes", GameNotesSearchSource(InMemoryLibrary()))
    assert len(registry) == 1


def test_registry_orders_by_priority() -> None:
    registry = SearchSourceRegistry()
    low = GameNotesSearchSource(InMemoryLibrary(), SearchConfig(priority=1))
    high = GameNotesSearchSource(InMemoryLibrary(), SearchConfig(priority=200))
    registry.add_item_source("low", low)
    registry.add_item_source("high", high)

    assert [key for key, _ in registry.sources()] == ["high", "low"]

    registry.remove_item_source("high")
    assert "high" not in registry


def test_taken_key_does_not_raise_from_plugin() -> None:
    registry = SearchSourceRegistry()
    other = GameNotesSearchSource(InMemoryLibrary())
    registry.add_item_source("GameNotes", other)
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(str(m)), level="WARNING", format="{message}")
    try:
        notes_plugin = NotesSearchPlugin(InMemoryLibrary(), registry)
    finally:
        logger.remove(handler_id)

    assert notes_plugin.registered is False
    assert registry.get("GameNotes") is other
    assert not plugin.is_registered()
    assert any("already registered: GameNotes" in m for m in messages)


def test_registration_retried_under_free_key_after_conflict() -> None:
    registry = SearchSourceRegistry()
    registry.add_item_source("GameNotes", GameNotesSearchSource(InMemoryLibrary()))
    NotesSearchPlugin(InMemoryLibrary(), registry)

    retry = NotesSearchPlugin(
        InMemoryLibrary(), registry, config=Config(search=SearchConfig(source_key="GameNotes2"))
    )

    assert retry.registered is True
    assert registry.get("GameNotes2") is retry.source


def test_plugin_reads_config_file(tmp_path) -> None:
    path = tmp_path / "notesearch.json"
    save_config(Config(search=SearchConfig(source_key="Notes", keyword="note")), path)
    registry = SearchSourceRegistry()

    notes_plugin = NotesSearchPlugin(InMemoryLibrary(), registry, config_path=path)

    assert notes_plugin.config.search.keyword == "note"
    assert registry.get("Notes") is notes_plugin.source
