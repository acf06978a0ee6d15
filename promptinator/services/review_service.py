"""Prompt review through the OpenAI Responses API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..clients.service_client import ServiceClient, extract_error_message
from ..core.config import Settings, settings as default_settings
from .errors import ConfigurationError, EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)

REVIEW_INSTRUCTION = (
    "You are an expert at writing prompts for AI image generation. Review this prompt "
    "and provide 3-5 specific, actionable suggestions to improve it for better image "
    "generation results. Focus on clarity, detail, composition, lighting, and style. "
    "Be concise."
)


def build_review_input(prompt: str) -> str:
    return f"{REVIEW_INSTRUCTION}\n\nPrompt to review:\n{prompt}"


def extract_output_text(result: Any) -> str:
    """
    Pull the assistant text out of a Responses API payload.

    Reasoning items may precede the message, so every output item is
    searched for the first non-empty ``output_text`` part. ``output_text`` at
    the top level is used when present.
    """
    if not isinstance(result, dict):
        return ""
    direct = result.get("output_text")
    if isinstance(direct, str) and direct.strip():
        return direct
    for item in result.get("output") or []:
        if not isinstance(item, dict):
            continue
        for part in item.get("content") or []:
            if isinstance(part, dict):
                text = part.get("text")
                if isinstance(text, str) and text.strip():
                    return text
    return ""


class ReviewService:
    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = config or default_settings
        self._transport = transport

    async def review(self, prompt: str) -> str:
        """
        Ask the review model for suggestions on a prompt.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is missing
            ProviderError: If the API call fails
            EmptyResponseError: If the model returned no text
        """
        api_key = self.settings.openai_api_key
        if not api_key:
            raise ConfigurationError("OpenAI API key not configured")

        client = ServiceClient(
            self.settings.openai_base_url,
            timeout=self.settings.provider_timeout_seconds,
            headers={"Authorization": f"Bearer {api_key}"},
            transport=self._transport,
        )
        body = {"model": self.settings.review_model, "input": build_review_input(prompt)}

        logger.info(f"📝 Reviewing prompt ({len(prompt)} chars) with {self.settings.review_model}")
        try:
            async with client:
                result = await client.post("/responses", json=body)
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Failed to review prompt: {extract_error_message(e)}", status_code=500
            ) from e
        except (httpx.RequestError, ValueError) as e:
            raise ProviderError("Failed to review prompt", status_code=500) from e

        suggestions = extract_output_text(result)
        if not suggestions:
            logger.error(f"❌ No suggestions in review response: {str(result)[:500]}")
            raise EmptyResponseError("No suggestions returned from AI")

        logger.info("✅ Prompt review complete")
        return suggestions
