"""Skill id collection and concurrent name resolution."""

import asyncio
import logging
from collections.abc import Iterable

from duckdps.fatduck.models import Player, Run

logger = logging.getLogger(__name__)

BASIC_ATTACK_ID = -1
BASIC_ATTACK_NAME = "Basic Attack"


def unknown_skill_name(skill_id) -> str:
    return f"Unknown Skill ({skill_id})"


def error_skill_name(skill_id) -> str:
    return f"Error Skill ({skill_id})"


def collect_player_skill_ids(player: Player) -> set[int]:
    """Unique positive skill ids used by one player."""
    return {
        skill.id for skill in player.skills
        if skill.id is not None and skill.id > 0
    }


def collect_skill_ids(run: Run) -> set[int]:
    """Unique positive skill ids used anywhere in a run.

    Ids <= 0 (the basic attack) are never sent to the lookup service.
    """
    ids: set[int] = set()
    for gate in run.gates:
        for player in gate.players:
            ids |= collect_player_skill_ids(player)
    return ids


async def _resolve_one(client, skill_id: int) -> tuple[str, str]:
    try:
        name = await client.lookup_skill_name(skill_id)
    except Exception as exc:
        logger.warning("Skill lookup failed for %d: %s", skill_id, exc)
        return str(skill_id), error_skill_name(skill_id)
    if not name:
        logger.warning("Skill %d has no name in the skill table", skill_id)
        return str(skill_id), unknown_skill_name(skill_id)
    return str(skill_id), name


async def resolve_skill_names(client, skill_ids: Iterable[int]) -> dict[str, str]:
    """Resolve skill ids to display names, one concurrent lookup per id.

    A failed lookup becomes a placeholder name for that id only; this
    never raises for lookup errors. The basic attack entry is always
    present in the result.
    """
    ids = sorted(set(skill_ids))
    entries = await asyncio.gather(*[_resolve_one(client, sid) for sid in ids])
    names = dict(entries)
    names[str(BASIC_ATTACK_ID)] = BASIC_ATTACK_NAME
    logger.info("Resolved %d skill names", len(ids))
    return names
