import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from duckdps.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TELEMETRY_URL = "https://fatduckdn.com/api/v2"
DEFAULT_LOOKUP_URL = (
    "https://minerva.fatduckdn.com/api/server/duck/tables/virt.skilltable"
)
SKILL_NAME_PARAMS = {"uiresolve": "_NameID", "select": "_NameID"}
SKILL_NAME_FIELD = "_NameID_txt"


def _is_server_error(response: httpx.Response) -> bool:
    return response.status_code >= 500


def _last_outcome(retry_state):
    # Hand back the final response (or re-raise the final exception)
    # instead of tenacity's RetryError.
    return retry_state.outcome.result()


class FatDuckClient:
    """Async client for the FatDuck telemetry and skill table services."""

    def __init__(
        self,
        *,
        telemetry_url: str = DEFAULT_TELEMETRY_URL,
        lookup_url: str = DEFAULT_LOOKUP_URL,
        telemetry_timeout: float = 30.0,
        lookup_timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._telemetry_url = telemetry_url.rstrip("/")
        self._lookup_url = lookup_url.rstrip("/")
        self._telemetry_timeout = telemetry_timeout
        self._lookup_timeout = lookup_timeout
        self._http = http_client
        self._owns_http = http_client is None

    async def __aenter__(self) -> "FatDuckClient":
        if self._owns_http:
            self._http = httpx.AsyncClient()
        return self

    async def __aexit__(self, *exc: object) -> None:
        if self._owns_http and self._http:
            await self._http.aclose()
            self._http = None

    @retry(
        retry=(
            retry_if_result(_is_server_error)
            | retry_if_exception_type((httpx.ConnectError, httpx.ReadTimeout))
        ),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry_error_callback=_last_outcome,
    )
    async def _get(
        self, url: str, *, timeout: float, params: dict | None = None,
    ) -> httpx.Response:
        if self._http is None:
            raise RuntimeError("Use FatDuckClient as an async context manager")
        return await self._http.get(url, params=params, timeout=timeout)

    async def fetch_run(self, run_id: str) -> dict[str, Any]:
        """Fetch raw encounter telemetry for a run.

        Returns the decoded JSON untouched. Non-success statuses and
        transport failures raise UpstreamUnavailable; an undecodable body
        raises the JSON parser's ValueError.
        """
        url = f"{self._telemetry_url}/game/dps/{run_id}"
        try:
            response = await self._get(url, timeout=self._telemetry_timeout)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(
                "run", run_id, reason=str(exc) or type(exc).__name__,
            ) from exc

        if not response.is_success:
            raise UpstreamUnavailable(
                "run", run_id,
                status=response.status_code, reason=response.reason_phrase,
            )

        data = response.json()
        logger.debug("Fetched run %s (%d bytes)", run_id, len(response.content))
        return data

    async def lookup_skill_name(self, skill_id: int) -> str | None:
        """Look up the display name of one skill.

        Returns None when the lookup succeeded but carried no name.
        HTTP and decoding errors propagate to the caller.
        """
        url = f"{self._lookup_url}/{skill_id}"
        response = await self._get(
            url, timeout=self._lookup_timeout, params=SKILL_NAME_PARAMS,
        )
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            return None
        return data.get(SKILL_NAME_FIELD) or None
