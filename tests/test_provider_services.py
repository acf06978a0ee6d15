"""
Test suite for the provider-backed services (image generation, prompt review).

Provider HTTP calls go through httpx.MockTransport; no network is used.
"""

from __future__ import annotations

import asyncio
import json
from typing import Callable, List

import httpx
import pytest

from promptinator.core.config import Settings
from promptinator.services.errors import ConfigurationError, EmptyResponseError, ProviderError
from promptinator.services.generation_service import (
    GenerationService,
    gemini_aspect_ratio,
    gpt_image_quality,
    gpt_image_size,
)
from promptinator.services.review_service import ReviewService, extract_output_text


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def config() -> Settings:
    return Settings(OPENAI_API_KEY="sk-test", GOOGLE_API_KEY="g-test")


@pytest.fixture
def recorded() -> List[httpx.Request]:
    return []


def _transport(recorded: List[httpx.Request], handler: Callable[[httpx.Request], httpx.Response]):
    def _handle(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return handler(request)

    return httpx.MockTransport(_handle)


def _run(coro):
    return asyncio.run(coro)


# ============================================================================
# TESTS: request mapping
# ============================================================================

class TestMappings:
    """Test cases for aspect ratio / resolution mapping."""

    @pytest.mark.parametrize(
        "ratio,size",
        [
            ("auto", "auto"),
            ("1:1", "1024x1024"),
            ("4:3", "1536x1024"),
            ("16:9", "1536x1024"),
            ("21:9", "1536x1024"),
            ("19.5:9", "1536x1024"),
            ("9:16", "1024x1536"),
            ("9:19.5", "1024x1536"),
        ],
    )
    def test_gpt_image_size(self, ratio: str, size: str):
        assert gpt_image_size(ratio) == size

    @pytest.mark.parametrize("resolution,quality", [("1K", "low"), ("2K", "medium"), ("4K", "high")])
    def test_gpt_image_quality(self, resolution: str, quality: str):
        assert gpt_image_quality(resolution) == quality

    @pytest.mark.parametrize(
        "ratio,expected",
        [("auto", "1:1"), ("1:1", "1:1"), ("21:9", "16:9"), ("9:19.5", "9:16")],
    )
    def test_gemini_aspect_ratio(self, ratio: str, expected: str):
        assert gemini_aspect_ratio(ratio) == expected


# ============================================================================
# TESTS: GenerationService
# ============================================================================

class TestGenerationService:
    """Test cases for GenerationService.generate()."""

    def test_gpt_image_request(self, config: Settings, recorded: List[httpx.Request]):
        transport = _transport(
            recorded, lambda r: httpx.Response(200, json={"data": [{"b64_json": "aW1n"}]})
        )
        service = GenerationService(config, transport=transport)

        image = _run(service.generate("a red door", aspect_ratio="16:9", resolution="4K"))

        assert image.image_data == "aW1n"
        assert image.mime_type == "image/png"
        request = recorded[0]
        assert str(request.url) == "https://api.openai.com/v1/images/generations"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert json.loads(request.content) == {
            "model": "gpt-image-1.5",
            "prompt": "a red door",
            "size": "1536x1024",
            "quality": "high",
        }

    def test_gemini_request(self, config: Settings, recorded: List[httpx.Request]):
        payload = {
            "candidates": [
                {"content": {"parts": [{"inlineData": {"data": "Z2Vt", "mimeType": "image/jpeg"}}]}}
            ]
        }
        transport = _transport(recorded, lambda r: httpx.Response(200, json=payload))
        service = GenerationService(config, transport=transport)

        image = _run(service.generate("a red door", aspect_ratio="9:16", resolution="1K", model="nano-banana"))

        assert (image.image_data, image.mime_type) == ("Z2Vt", "image/jpeg")
        request = recorded[0]
        assert request.url.path.endswith("/models/gemini-3-pro-image-preview:generateContent")
        assert request.url.params["key"] == "g-test"
        body = json.loads(request.content)
        assert body["contents"] == [{"parts": [{"text": "a red door"}]}]
        assert body["generationConfig"] == {
            "responseModalities": ["Image"],
            "imageConfig": {"aspectRatio": "9:16", "imageSize": "1K"},
        }

    def test_missing_openai_key(self):
        service = GenerationService(Settings(OPENAI_API_KEY=None))
        with pytest.raises(ConfigurationError, match="not configured") as exc_info:
            _run(service.generate("prompt"))
        assert exc_info.value.code == "CONFIG_ERROR"
        assert exc_info.value.status_code == 500

    def test_missing_google_key(self):
        service = GenerationService(Settings(GOOGLE_API_KEY=None))
        with pytest.raises(ConfigurationError):
            _run(service.generate("prompt", model="nano-banana"))

    def test_upstream_error(self, config: Settings, recorded: List[httpx.Request]):
        transport = _transport(
            recorded,
            lambda r: httpx.Response(429, json={"error": {"message": "Rate limit reached"}}),
        )
        service = GenerationService(config, transport=transport)
        with pytest.raises(ProviderError, match="Rate limit reached") as exc_info:
            _run(service.generate("prompt"))
        assert exc_info.value.code == "API_ERROR"
        assert exc_info.value.status_code == 400

    def test_network_error(self, config: Settings):
        def _fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        service = GenerationService(config, transport=httpx.MockTransport(_fail))
        with pytest.raises(ProviderError):
            _run(service.generate("prompt"))

    def test_malformed_response(self, config: Settings, recorded: List[httpx.Request]):
        transport = _transport(recorded, lambda r: httpx.Response(200, json={"data": []}))
        service = GenerationService(config, transport=transport)
        with pytest.raises(ProviderError, match="Invalid response"):
            _run(service.generate("prompt"))


# ============================================================================
# TESTS: ReviewService
# ============================================================================

class TestReviewService:
    """Test cases for ReviewService.review()."""

    def test_review_request(self, config: Settings, recorded: List[httpx.Request]):
        payload = {"output": [{"type": "message", "content": [{"type": "output_text", "text": "1. Add rim light"}]}]}
        transport = _transport(recorded, lambda r: httpx.Response(200, json=payload))
        service = ReviewService(config, transport=transport)

        assert _run(service.review("a red door")) == "1. Add rim light"
        request = recorded[0]
        assert str(request.url) == "https://api.openai.com/v1/responses"
        body = json.loads(request.content)
        assert body["model"] == "gpt-5.2"
        assert body["input"].endswith("\n\nPrompt to review:\na red door")

    def test_reasoning_item_skipped(self):
        payload = {
            "output": [
                {"type": "reasoning", "content": []},
                {"type": "message", "content": [{"type": "output_text", "text": "Use 85mm"}]},
            ]
        }
        assert extract_output_text(payload) == "Use 85mm"

    def test_empty_output(self, config: Settings, recorded: List[httpx.Request]):
        transport = _transport(recorded, lambda r: httpx.Response(200, json={"output": []}))
        service = ReviewService(config, transport=transport)
        with pytest.raises(EmptyResponseError) as exc_info:
            _run(service.review("prompt"))
        assert exc_info.value.code == "EMPTY_RESPONSE"

    def test_missing_key(self):
        with pytest.raises(ConfigurationError):
            _run(ReviewService(Settings(OPENAI_API_KEY=None)).review("prompt"))

    def test_upstream_error(self, config: Settings, recorded: List[httpx.Request]):
        transport = _transport(recorded, lambda r: httpx.Response(500, text="oops"))
        service = ReviewService(config, transport=transport)
        with pytest.raises(ProviderError) as exc_info:
            _run(service.review("prompt"))
        assert exc_info.value.status_code == 500
