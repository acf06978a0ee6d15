from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import catalog, generation, prompt_builder, prompts, review, scene_presets, system
from .core.catalog import all_categories, find_fragment_collisions
from .core.config import settings
from .services.store import reset_stores

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting Promptinator backend")
    logger.info(f"🌐 Server configured to run on {settings.host}:{settings.port}")
    logger.info(f"📚 Catalog loaded: {len(all_categories())} categories")

    collisions = find_fragment_collisions()
    if collisions:
        logger.warning(f"⚠️ Catalog has ambiguous fragments: {collisions}")

    if not settings.openai_configured:
        logger.warning("⚠️ OPENAI_API_KEY not set: gpt-image and prompt review are unavailable")
    if not settings.gemini_configured:
        logger.warning("⚠️ GOOGLE_API_KEY not set: nano-banana is unavailable")

    yield
    reset_stores()
    logger.info("🛑 Shutdown complete")


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
    )

    # CORS configuration
    cors_origins = list(settings.allowed_origins) if settings.allowed_origins else ["http://localhost:3000"]

    # In debug mode, add common localhost ports for development convenience
    if settings.debug:
        common_ports = [3000, 3001, 5173, 5174, 8000]
        for port in common_ports:
            origin = f"http://localhost:{port}"
            if origin not in cors_origins:
                cors_origins.append(origin)
        logger.info(f"🌐 CORS configured for origins (debug mode): {cors_origins}")
    else:
        logger.info(f"🌐 CORS configured for origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    app.include_router(system.router)
    app.include_router(catalog.router)
    app.include_router(prompt_builder.router)
    app.include_router(prompts.router)
    app.include_router(scene_presets.router)
    app.include_router(generation.router)
    app.include_router(review.router)

    logger.info("✅ Routers registered:")
    logger.info("   - System: /api/health, /api/me")
    logger.info("   - Catalog: /api/catalog/categories, /api/catalog/lenses, /api/catalog/cameras")
    logger.info("   - Prompt builder: /api/prompt/compose, /parse, /select, /disabled, /reconcile")
    logger.info("   - Saved prompts: /api/prompts")
    logger.info("   - Scene presets: /api/scene-presets")
    logger.info("   - Providers: /api/generate-image, /api/review-prompt")

    return app
