"""
Image generation endpoint.

Proxies a composed prompt to the selected provider and returns the image as
base64. Missing provider keys answer 500 with CONFIG_ERROR; upstream
failures answer 400 with API_ERROR.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...models import GenerateImageRequest, GenerateImageResponse
from ...services.errors import ServiceError
from ...services.generation_service import GenerationService
from ._helpers import get_generation_service, to_http_exception

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/generate-image", response_model=GenerateImageResponse)
async def generate_image(
    request: GenerateImageRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerateImageResponse:
    try:
        image = await service.generate(
            prompt=request.prompt,
            aspect_ratio=request.aspect_ratio,
            resolution=request.resolution,
            model=request.model,
        )
    except ServiceError as e:
        raise to_http_exception(e)
    return GenerateImageResponse(image_data=image.image_data, mime_type=image.mime_type)
