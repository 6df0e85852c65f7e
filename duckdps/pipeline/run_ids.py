import re
from urllib.parse import urlparse

from duckdps.errors import InvalidParameter

_RUN_ID_RE = re.compile(r"^\d+$")


def extract_run_id(value: str) -> str:
    """Accept a bare run id or a FatDuck run URL and return the numeric id.

    >>> extract_run_id("https://fatduckdn.com/runs/776482144628289536/")
    '776482144628289536'
    """
    value = value.strip()
    if _RUN_ID_RE.match(value):
        return value
    parsed = urlparse(value)
    if parsed.scheme in ("http", "https"):
        segments = [s for s in parsed.path.split("/") if s]
        if segments and _RUN_ID_RE.match(segments[-1]):
            return segments[-1]
    raise InvalidParameter("id", value, "expected a run id or a FatDuck run URL")
