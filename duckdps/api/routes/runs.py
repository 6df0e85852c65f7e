"""Run data endpoint: raw run + skill dictionary, or one player's breakdown."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from duckdps.api.deps import get_fatduck_factory
from duckdps.api.models import ErrorResponse, RunDataResponse, ZeroDamageResponse
from duckdps.config import get_settings
from duckdps.errors import DuckDPSError, MissingParameter
from duckdps.fatduck.models import parse_run
from duckdps.pipeline.breakdown import (
    ZERO_DAMAGE_MESSAGE,
    SkillStatRow,
    build_skill_breakdown,
    find_gate,
    find_player,
    player_total_damage,
)
from duckdps.pipeline.run_ids import extract_run_id
from duckdps.pipeline.skills import (
    collect_player_skill_ids,
    collect_skill_ids,
    resolve_skill_names,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["runs"])


def _require(**params: str | None) -> None:
    missing = [name for name, value in params.items() if not (value or "").strip()]
    if missing:
        raise MissingParameter(missing)


def _mark_cacheable(response: Response) -> None:
    max_age = get_settings().cache.max_age
    response.headers["Cache-Control"] = (
        f"s-maxage={max_age}, stale-while-revalidate"
    )


async def run_data(client, run_id: str) -> RunDataResponse:
    raw = await client.fetch_run(run_id)
    run = parse_run(raw)
    names = await resolve_skill_names(client, collect_skill_ids(run))
    return RunDataResponse(runData=raw, skillDictionary=names)


async def player_gate_breakdown(
    client, run_id: str, player_id: str, gate_id: str,
) -> list[SkillStatRow] | ZeroDamageResponse:
    run = parse_run(await client.fetch_run(run_id))
    gate = find_gate(run, gate_id)
    player = find_player(gate, player_id)

    total = player_total_damage(player)
    if total == 0:
        return ZeroDamageResponse(message=ZERO_DAMAGE_MESSAGE, data=[])

    names = await resolve_skill_names(client, collect_player_skill_ids(player))
    return build_skill_breakdown(player.skills, total, names)


@router.get(
    "/get-run-data",
    response_model=RunDataResponse | list[SkillStatRow] | ZeroDamageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_run_data(
    response: Response,
    id: str | None = None,
    player_id: str | None = None,
    gate_id: str | None = None,
    factory=Depends(get_fatduck_factory),
):
    """Combined run data, or one player's skill breakdown for one gate.

    Example:
      /api/get-run-data?id=776482144628289536&player_id=62257&gate_id=776482144628289536
    """
    full_data = player_id is None and gate_id is None
    if full_data:
        _require(id=id)
    else:
        _require(id=id, player_id=player_id, gate_id=gate_id)
    run_id = extract_run_id(id)

    try:
        async with factory() as client:
            if full_data:
                result = await run_data(client, run_id)
            else:
                result = await player_gate_breakdown(
                    client, run_id, player_id.strip(), gate_id.strip(),
                )
    except DuckDPSError:
        raise
    except Exception as exc:
        logger.exception("Failed to build run data for %s", run_id)
        raise HTTPException(status_code=500, detail=str(exc)) from None

    _mark_cacheable(response)
    return result
