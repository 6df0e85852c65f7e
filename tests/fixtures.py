"""Builders for FatDuck telemetry payloads used across tests."""

from duckdps.fatduck.client import DEFAULT_LOOKUP_URL, DEFAULT_TELEMETRY_URL

TELEMETRY_URL = DEFAULT_TELEMETRY_URL
LOOKUP_URL = DEFAULT_LOOKUP_URL

RUN_ID = "776482144628289536"
GATE_ID = "776482144628289536"
PLAYER_ID = 62257


def run_url(run_id: str = RUN_ID) -> str:
    return f"{TELEMETRY_URL}/game/dps/{run_id}"


def skill(skill_id: int, damage: str, hit_counts: list[int]) -> dict:
    return {"id": skill_id, "damage": damage, "hitCounts": hit_counts}


def player(player_id: int, damage_dealt: str, skills: list[dict], name: str = "Lyra") -> dict:
    return {"id": player_id, "name": name, "damageDealt": damage_dealt, "skills": skills}


def gate(gate_id: str, players: list[dict], name: str = "Total", gate_num: int = 0) -> dict:
    return {"id": gate_id, "name": name, "gateNum": gate_num, "players": players}


def sample_run() -> dict:
    """Two gates, two players, with a shared skill and the basic attack."""
    return {
        "id": RUN_ID,
        "players": [{"id": PLAYER_ID, "name": "Lyra"}, {"id": 70001, "name": "Brom"}],
        "gates": [
            gate(GATE_ID, [
                player(PLAYER_ID, "1.000", [
                    skill(-1, "100", [3, 0]),
                    skill(5, "600", [8, 2]),
                    skill(7, "300", [1, 1, 0]),
                ]),
                player(70001, "0", [], name="Brom"),
            ]),
            gate("g-pride", [
                player(PLAYER_ID, "2.500", [skill(5, "2.500", [4, 1])]),
                player(70001, "1.200", [skill(9, "1.200", [2, 0])], name="Brom"),
            ], name="Pride", gate_num=1),
        ],
    }
