"""
Image generation through external providers.

Two models are supported:
- ``gpt-image``: OpenAI images API (primary)
- ``nano-banana``: Gemini ``generateContent`` with image output (secondary)

Each call is a single request. Failures surface as ``ServiceError``
subclasses; no retry happens here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import httpx

from ..clients.service_client import ServiceClient, extract_error_message
from ..core.config import Settings, settings as default_settings
from .errors import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)

MODEL_GPT_IMAGE = "gpt-image"
MODEL_NANO_BANANA = "nano-banana"
SUPPORTED_MODELS: Tuple[str, ...] = (MODEL_GPT_IMAGE, MODEL_NANO_BANANA)

ASPECT_RATIOS: Tuple[str, ...] = ("auto", "1:1", "4:3", "16:9", "21:9", "9:19.5", "19.5:9", "9:16")
RESOLUTIONS: Tuple[str, ...] = ("1K", "2K", "4K")

DEFAULT_ASPECT_RATIO = "auto"
DEFAULT_RESOLUTION = "2K"
DEFAULT_MODEL = MODEL_GPT_IMAGE

LANDSCAPE_RATIOS = frozenset({"4:3", "16:9", "21:9", "19.5:9"})
PORTRAIT_RATIOS = frozenset({"9:19.5", "9:16"})

GPT_IMAGE_QUALITY: Dict[str, str] = {"1K": "low", "2K": "medium", "4K": "high"}


@dataclass(frozen=True)
class GeneratedImage:
    image_data: str
    mime_type: str


def gpt_image_size(aspect_ratio: str) -> str:
    """Closest size the OpenAI images API accepts for an aspect ratio."""
    if aspect_ratio == "auto":
        return "auto"
    if aspect_ratio in LANDSCAPE_RATIOS:
        return "1536x1024"
    if aspect_ratio in PORTRAIT_RATIOS:
        return "1024x1536"
    return "1024x1024"


def gpt_image_quality(resolution: str) -> str:
    return GPT_IMAGE_QUALITY.get(resolution, "medium")


def gemini_aspect_ratio(aspect_ratio: str) -> str:
    """Gemini accepts 1:1, 16:9 and 9:16; auto falls back to square."""
    if aspect_ratio in LANDSCAPE_RATIOS:
        return "16:9"
    if aspect_ratio in PORTRAIT_RATIOS:
        return "9:16"
    return "1:1"


class GenerationService:
    """Dispatches prompts to the configured image provider."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = config or default_settings
        self._transport = transport

    def _client(self, base_url: str, headers: Optional[Dict[str, str]] = None) -> ServiceClient:
        return ServiceClient(
            base_url,
            timeout=self.settings.provider_timeout_seconds,
            headers=headers,
            transport=self._transport,
        )

    async def generate(
        self,
        prompt: str,
        aspect_ratio: str = DEFAULT_ASPECT_RATIO,
        resolution: str = DEFAULT_RESOLUTION,
        model: str = DEFAULT_MODEL,
    ) -> GeneratedImage:
        """
        Generate one image for a prompt.

        Args:
            prompt: Composed prompt text
            aspect_ratio: One of ASPECT_RATIOS
            resolution: One of RESOLUTIONS
            model: "gpt-image" or "nano-banana"

        Returns:
            GeneratedImage with base64 data and its MIME type

        Raises:
            ConfigurationError: If the provider API key is missing
            ProviderError: If the provider call fails or the response is unusable
        """
        logger.info(
            f"🎨 Generating image: model={model}, aspect_ratio={aspect_ratio}, "
            f"resolution={resolution}, prompt_length={len(prompt)}"
        )
        if model == MODEL_NANO_BANANA:
            return await self._generate_with_gemini(prompt, aspect_ratio, resolution)
        return await self._generate_with_openai(prompt, aspect_ratio, resolution)

    async def _post(self, client: ServiceClient, path: str, provider: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            async with client:
                return await client.post(path, **kwargs)
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"{provider} image generation failed: {extract_error_message(e)}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(f"{provider} image generation failed: {type(e).__name__}") from e
        except ValueError as e:
            raise ProviderError(f"Invalid response from {provider} API") from e

    async def _generate_with_openai(self, prompt: str, aspect_ratio: str, resolution: str) -> GeneratedImage:
        api_key = self.settings.openai_api_key
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY not configured")

        body = {
            "model": self.settings.openai_image_model,
            "prompt": prompt,
            "size": gpt_image_size(aspect_ratio),
            "quality": gpt_image_quality(resolution),
        }
        client = self._client(
            self.settings.openai_base_url,
            headers={"Authorization": f"Bearer {api_key}"},
        )
        result = await self._post(client, "/images/generations", "GPT Image", json=body)

        data = result.get("data") if isinstance(result, dict) else None
        image_data = data[0].get("b64_json") if data and isinstance(data[0], dict) else None
        if not image_data:
            logger.error(f"❌ Unexpected OpenAI response structure: {str(result)[:500]}")
            raise ProviderError("Invalid response from GPT Image API")

        logger.info("✅ GPT Image generation complete")
        return GeneratedImage(image_data=image_data, mime_type="image/png")

    async def _generate_with_gemini(self, prompt: str, aspect_ratio: str, resolution: str) -> GeneratedImage:
        api_key = self.settings.google_api_key
        if not api_key:
            raise ConfigurationError("GOOGLE_API_KEY not configured")

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseModalities": ["Image"],
                "imageConfig": {
                    "aspectRatio": gemini_aspect_ratio(aspect_ratio),
                    "imageSize": resolution,
                },
            },
        }
        client = self._client(self.settings.gemini_base_url)
        result = await self._post(
            client,
            f"/models/{self.settings.gemini_image_model}:generateContent",
            "Nano Banana",
            json=body,
            params={"key": api_key},
        )

        inline = _gemini_inline_data(result)
        if not inline:
            logger.error(f"❌ Unexpected Gemini response structure: {str(result)[:500]}")
            raise ProviderError("Invalid response from Nano Banana API")

        logger.info("✅ Nano Banana generation complete")
        return GeneratedImage(image_data=inline["data"], mime_type=inline["mimeType"])


def _gemini_inline_data(result: Any) -> Optional[Dict[str, str]]:
    try:
        inline = result["candidates"][0]["content"]["parts"][0]["inlineData"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(inline, dict) or not inline.get("data") or not inline.get("mimeType"):
        return None
    return inline
