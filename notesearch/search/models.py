"""Result data carried back to the quick-search host."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from notesearch.library.models import GameRecord

DEFAULT_KEY_WEIGHT = 100.0


class ScoreMode(str, Enum):
    """How the host combines per-key scores."""

    WEIGHTED_MAX_SCORE = "weighted_max_score"
    WEIGHTED_AVG_SCORE = "weighted_avg_score"


@dataclass(slots=True, frozen=True)
class SearchKey:
    """Text the host ranks against the query, with its weight."""

    key: str
    weight: float = DEFAULT_KEY_WEIGHT


@dataclass(slots=True)
class SelectAction:
    """Action that selects a game in the library view."""

    name: str
    callback: Callable[[], Any]
    close_after_execute: bool = True

    def execute(self) -> Any:
        return self.callback()


@dataclass(slots=True)
class ResultItem:
    """One renderable search result bound to a library record."""

    game: GameRecord
    keys: list[SearchKey]
    actions: list[SelectAction]
    platform: str = ""
    playtime_text: str = "0h0min"
    install_status: str = ""
    playtime_label: str = "Playtime"
    icon: str | None = None
    score_mode: ScoreMode = ScoreMode.WEIGHTED_MAX_SCORE
    icon_char: str | None = field(default=None, init=False)
    details_view: Any = field(default=None, init=False)

    @property
    def key(self) -> str:
        return str(self.game.id)

    @property
    def primary_action(self) -> SelectAction:
        return self.actions[0]

    @property
    def top_left(self) -> str | None:
        return self.game.name

    @property
    def top_right(self) -> str:
        return self.install_status

    @property
    def bottom_left(self) -> str:
        return self.platform

    @property
    def bottom_center(self) -> str:
        return f"{self.playtime_label}: {self.playtime_text}"

    @property
    def bottom_right(self) -> None:
        return None

    # Unused by the host's list renderer.
    @property
    def name(self) -> None:
        return None

    @property
    def description(self) -> None:
        return None
