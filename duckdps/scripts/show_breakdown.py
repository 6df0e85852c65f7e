import argparse
import asyncio
import logging

from duckdps.config import get_settings
from duckdps.fatduck.client import FatDuckClient
from duckdps.fatduck.models import Run, parse_run
from duckdps.pipeline.breakdown import (
    ZERO_DAMAGE_MESSAGE,
    SkillStatRow,
    build_skill_breakdown,
    find_gate,
    find_player,
    player_total_damage,
)
from duckdps.pipeline.run_ids import extract_run_id
from duckdps.pipeline.skills import collect_player_skill_ids, resolve_skill_names

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show a FatDuck run's gates, or one player's skill breakdown",
    )
    parser.add_argument("--run-id", required=True, help="Run id or FatDuck run URL")
    parser.add_argument("--player-id", help="Player id (requires --gate-id)")
    parser.add_argument("--gate-id", help="Gate id (requires --player-id)")
    args = parser.parse_args(argv)
    if (args.player_id is None) != (args.gate_id is None):
        parser.error("--player-id and --gate-id must be given together")
    return args


def format_gates(run: Run) -> list[str]:
    lines = []
    for gate in run.gates:
        label = f"{gate.gate_num}: {gate.name}" if gate.gate_num is not None else gate.name
        lines.append(f"{gate.id}  {label}")
        for player in gate.players:
            lines.append(f"    {player.id or '-':>10}  {player.name:<20} {player.damage_dealt}")
    return lines


def format_rows(rows: list[SkillStatRow]) -> list[str]:
    lines = [f"{'Skill':<32} {'Damage':>14} {'%':>6} {'Crits':>12} {'Crit%':>6}"]
    for row in rows:
        lines.append(
            f"{row.name:<32} {row.damage:>14,} {row.percent:>6.1f} "
            f"{row.crit_hits:>12} {row.crit_rate:>6.1f}"
        )
    return lines


async def run(run_id: str, *, player_id: str | None = None, gate_id: str | None = None) -> list[str]:
    settings = get_settings()
    async with FatDuckClient(
        telemetry_url=settings.telemetry.base_url,
        lookup_url=settings.lookup.base_url,
        telemetry_timeout=settings.telemetry.timeout,
        lookup_timeout=settings.lookup.timeout,
    ) as client:
        run_data = parse_run(await client.fetch_run(run_id))
        if player_id is None:
            return format_gates(run_data)

        player = find_player(find_gate(run_data, gate_id), player_id)
        total = player_total_damage(player)
        if total == 0:
            return [ZERO_DAMAGE_MESSAGE]
        names = await resolve_skill_names(client, collect_player_skill_ids(player))
        return format_rows(build_skill_breakdown(player.skills, total, names))


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    lines = asyncio.run(run(
        extract_run_id(args.run_id), player_id=args.player_id, gate_id=args.gate_id,
    ))
    print("\n".join(lines))


if __name__ == "__main__":
    main()
