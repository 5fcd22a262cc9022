"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchConfig(Base):
    """Search source settings."""

    source_key: str = "GameNotes"
    display_name: str = "Name & Notes"
    keyword: str | None = None
    priority: int = 100
    include_description: bool = True
    key_weight: float = 100.0
    action_name: str = "Show in library"
    installed_label: str = "Installed"
    not_installed_label: str = "Not installed"
    playtime_label: str = "Playtime"

    @field_validator("keyword")
    @classmethod
    def _blank_keyword_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class Config(Base):
    """Root configuration for notesearch."""

    search: SearchConfig = Field(default_factory=SearchConfig)
