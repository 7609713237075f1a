"""HTTP client for the remote Analysis Service."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from ..settings import Settings
from .models import AnalysisResponse, Failure, Success

logger = logging.getLogger(__name__)


def parse_response(payload: Any) -> Union[Success, Failure]:
    """Map a decoded response body onto a settled result.

    Anything that does not match the documented shape collapses into the
    generic failure so that partial results are never shown.
    """

    try:
        response = AnalysisResponse.model_validate(payload)
    except ValidationError as exc:
        logger.debug("Analysis response has an unexpected shape: %s", exc)
        return Failure()

    if response.success:
        if response.output is None:
            logger.debug("Analysis response reported success without output.")
            return Failure()
        return Success(tuple(response.output))

    if not response.error:
        logger.debug("Analysis response reported failure without a reason.")
        return Failure()
    return Failure(response.error)


class AnalysisClient:
    """Send one sentence per call to the Analysis Service."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not endpoint:
            raise ValueError("Analysis API URL is not configured.")
        self.endpoint = endpoint
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalysisClient":
        return cls(settings.analysis_api_url, timeout=settings.request_timeout)

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self._timeout is not None:
            options["timeout"] = self._timeout
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    async def analyze(self, sentence: str) -> Union[Success, Failure]:
        """POST *sentence* and return the settled result; never raises for faults."""

        payload = {"sentence": sentence.strip()}
        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.post(self.endpoint, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.debug(
                "Analysis request to %s failed with status %s",
                self.endpoint,
                exc.response.status_code,
            )
            return Failure()
        except httpx.HTTPError as exc:
            logger.debug("Analysis request to %s failed: %r", self.endpoint, exc)
            return Failure()

        try:
            data = response.json()
        except ValueError:
            logger.debug("Analysis response from %s is not valid JSON.", self.endpoint)
            return Failure()

        return parse_response(data)
