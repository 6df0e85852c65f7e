"""Error taxonomy shared by the FatDuck client, the pipeline and the API.

Every error carries the HTTP status the API boundary should answer with.
"""


class DuckDPSError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500


class MissingParameter(DuckDPSError):
    status_code = 400

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        names = ", ".join(f"'{f}'" for f in self.fields)
        super().__init__(f"Missing required query parameter(s): {names}")


class InvalidParameter(DuckDPSError):
    status_code = 400

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}' ({value!r}): {reason}")


class NotFound(DuckDPSError):
    status_code = 404

    def __init__(self, kind: str, identifier: str, scope: str | None = None) -> None:
        self.kind = kind
        self.identifier = identifier
        message = f"{kind} with ID '{identifier}' not found"
        if scope:
            message += f" in {scope}"
        super().__init__(message + ".")


class UpstreamUnavailable(DuckDPSError):
    """Raised when a FatDuck service answers with a non-success status."""

    status_code = 502

    def __init__(
        self,
        service: str,
        resource: str,
        *,
        status: int | None = None,
        reason: str = "",
    ) -> None:
        self.service = service
        self.resource = resource
        self.status = status
        self.reason = reason
        detail = f"{status} {reason}".strip() if status is not None else reason
        super().__init__(
            f"Failed to fetch {service} data (ID: {resource}): {detail}"
        )


class MalformedRunData(DuckDPSError):
    """Raised when upstream run data does not have the expected shape."""

    status_code = 502


class MalformedSkillRecord(MalformedRunData):
    def __init__(self, skill_id, reason: str) -> None:
        self.skill_id = skill_id
        self.reason = reason
        super().__init__(f"Malformed skill record (ID: {skill_id}): {reason}")
