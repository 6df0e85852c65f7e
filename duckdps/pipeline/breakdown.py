"""Per-player skill damage breakdown for one gate."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel

from duckdps.errors import MalformedRunData, MalformedSkillRecord, NotFound
from duckdps.fatduck.models import Gate, Player, Run, SkillRecord
from duckdps.pipeline.skills import unknown_skill_name

logger = logging.getLogger(__name__)

ZERO_DAMAGE_MESSAGE = "Player has 0 damage for this gate."

CRIT_INDEX = 1  # position of critical hits in hitCounts


class SkillStatRow(BaseModel):
    name: str
    damage: int
    percent: float
    crit_hits: str
    crit_rate: float


def round1(value: float) -> float:
    """Round to one decimal, halves away from zero (JS toFixed(1))."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def parse_damage(value) -> int:
    """Parse a damage total such as "1.234.567" (dots are thousands separators)."""
    if isinstance(value, bool):
        raise ValueError(f"not a damage value: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"not a damage value: {value!r}")
    return int(value.replace(".", ""))


def find_gate(run: Run, gate_id: str) -> Gate:
    for gate in run.gates:
        if gate.id == gate_id:
            return gate
    raise NotFound("Gate", gate_id)


def find_player(gate: Gate, player_id: str) -> Player:
    for player in gate.players:
        if player.id == player_id:
            return player
    raise NotFound("Player", player_id, scope=f"gate '{gate.name or gate.id}'")


def player_total_damage(player: Player) -> int:
    try:
        return parse_damage(player.damage_dealt)
    except ValueError as exc:
        raise MalformedRunData(
            f"Malformed damage total for player {player.id}: {exc}"
        ) from exc


def _skill_row(skill: SkillRecord, total: int, names: dict[str, str]) -> SkillStatRow:
    try:
        damage = parse_damage(skill.damage)
    except ValueError as exc:
        raise MalformedSkillRecord(skill.id, f"bad damage: {exc}") from exc

    hits = skill.hit_counts
    if hits is None:
        raise MalformedSkillRecord(skill.id, "missing hitCounts")
    bad = [h for h in hits if isinstance(h, bool) or not isinstance(h, int)]
    if bad:
        raise MalformedSkillRecord(skill.id, f"bad hitCounts: non-integer {bad[0]!r}")
    total_hits = sum(hits)
    crits = hits[CRIT_INDEX] if len(hits) > CRIT_INDEX else 0

    crit_rate = round1(crits / total_hits * 100) if total_hits > 0 else 0.0
    return SkillStatRow(
        name=names.get(str(skill.id), unknown_skill_name(skill.id)),
        damage=damage,
        percent=round1(damage / total * 100),
        crit_hits=f"{crits} / {total_hits}",
        crit_rate=crit_rate,
    )


def build_skill_breakdown(
    skills: list[SkillRecord], total: int, names: dict[str, str],
) -> list[SkillStatRow]:
    """Build damage-share rows for one player's skills, highest damage first.

    Returns an empty list when the player's total damage is zero. Equal
    damage keeps the upstream order.
    """
    if total == 0:
        return []
    rows = [_skill_row(skill, total, names) for skill in skills]
    rows.sort(key=lambda r: r.damage, reverse=True)
    return rows
