"""
HTTP client for calling external AI providers.

This module provides a ServiceClient class wrapping ``httpx.AsyncClient`` with
a single timeout, default headers, and error logging that preserves the
original exception for the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

ERROR_BODY_PREVIEW = 500


class ServiceClient:
    """
    HTTP client for provider calls.

    Handles:
    - Async HTTP requests with one timeout applied to every phase
    - Default headers (auth) sent with each request
    - Error logging with the upstream status and response body preview
    """

    def __init__(
        self,
        service_url: str,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize service client.

        Args:
            service_url: Base URL of the provider API
            timeout: Request timeout in seconds (connect, read, write, pool)
            headers: Default headers sent with every request
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.service_url = service_url.rstrip("/")
        self.timeout = timeout

        timeout_obj = httpx.Timeout(
            timeout,
            connect=timeout,
            read=timeout,
            write=timeout,
            pool=timeout,
        )

        self._client = httpx.AsyncClient(
            timeout=timeout_obj,
            headers=headers or {},
            transport=transport,
            follow_redirects=True,
        )

    async def post(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Make POST request to the provider.

        Args:
            path: Endpoint path (appended to service_url)
            json: Optional JSON body
            params: Optional query parameters

        Returns:
            JSON response as dictionary

        Raises:
            httpx.HTTPStatusError: If response status is not 2xx
            httpx.RequestError: If request fails (network error, timeout, etc.)
            ValueError: If the response body is not JSON
        """
        url = f"{self.service_url}{path}"
        logger.info(f"🌐 [ServiceClient] POST {url}")

        try:
            response = await self._client.post(url, json=json, params=params)
            logger.info(f"📡 [ServiceClient] POST {url} returned HTTP {response.status_code}")
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            error_body = e.response.text or "No response body"
            logger.error(
                f"❌ [ServiceClient] POST {url} returned HTTP {e.response.status_code}: "
                f"{error_body[:ERROR_BODY_PREVIEW]}"
            )
            raise

        except httpx.RequestError as e:
            error_type = type(e).__name__
            logger.error(f"❌ [ServiceClient] POST {url} failed: {error_type}: {str(e)}")
            raise

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "ServiceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def extract_error_message(error: httpx.HTTPStatusError) -> str:
    """
    Pull a readable message out of a provider error response.

    OpenAI and Gemini both answer with ``{"error": {"message": ...}}``.
    """
    try:
        body = error.response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("error")
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
        if isinstance(detail, str) and detail:
            return detail
    return f"Provider returned HTTP {error.response.status_code}"
