from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from duckdps.errors import MalformedRunData


def _none_as_empty(value):
    return [] if value is None else value


class FatDuckBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class SkillRecord(FatDuckBaseModel):
    id: int | None = None
    # Left loose on purpose: the breakdown reports bad values per skill.
    damage: str | int | None = None
    hit_counts: list | None = None


class Player(FatDuckBaseModel):
    id: str | None = None
    name: str = ""
    damage_dealt: str | int | None = None
    skills: list[SkillRecord] = []

    _skills_none = field_validator("skills", mode="before")(_none_as_empty)


class Gate(FatDuckBaseModel):
    id: str | None = None
    name: str = ""
    gate_num: int | None = None
    players: list[Player] = []

    _players_none = field_validator("players", mode="before")(_none_as_empty)


class RosterEntry(FatDuckBaseModel):
    """Top-level run roster entry (no damage data)."""

    id: str | None = None
    name: str = ""


class Run(FatDuckBaseModel):
    id: str | None = None
    gates: list[Gate] = []
    players: list[RosterEntry] = []

    _lists_none = field_validator("gates", "players", mode="before")(_none_as_empty)


def parse_run(raw) -> Run:
    """Validate raw telemetry JSON into a Run."""
    try:
        return Run.model_validate(raw)
    except ValidationError as exc:
        raise MalformedRunData(f"Unexpected run data shape: {exc}") from exc
