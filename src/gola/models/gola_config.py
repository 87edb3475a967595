"""Configuration model for gola."""

from pydantic import BaseModel, ConfigDict, Field


class GolaConfig(BaseModel):
    """Launcher configuration, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Archive member names probed for a shebang, in priority order.
    container_members: list[str] = Field(default_factory=list, alias="dir")
    # keyword -> extension key ("" for default) -> interpreter command.
    interpreter_map: dict[str, dict[str, str]] = Field(default_factory=dict, alias="map")
