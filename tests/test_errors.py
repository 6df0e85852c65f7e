from duckdps.errors import (
    DuckDPSError,
    MalformedRunData,
    MalformedSkillRecord,
    MissingParameter,
    NotFound,
    UpstreamUnavailable,
)


def test_missing_parameter_names_fields():
    exc = MissingParameter(["id", "gate_id"])
    assert exc.status_code == 400
    assert str(exc) == "Missing required query parameter(s): 'id', 'gate_id'"


def test_not_found_message():
    assert str(NotFound("Gate", "x")) == "Gate with ID 'x' not found."
    assert NotFound("Gate", "x").status_code == 404


def test_upstream_unavailable_message():
    exc = UpstreamUnavailable("run", "42", status=503, reason="Service Unavailable")
    assert str(exc) == "Failed to fetch run data (ID: 42): 503 Service Unavailable"
    assert exc.status_code == 502


def test_upstream_unavailable_without_status():
    exc = UpstreamUnavailable("run", "42", reason="ConnectError")
    assert str(exc).endswith(": ConnectError")


def test_malformed_skill_record_is_malformed_run_data():
    exc = MalformedSkillRecord(5, "bad damage")
    assert isinstance(exc, MalformedRunData)
    assert isinstance(exc, DuckDPSError)
    assert exc.skill_id == 5
