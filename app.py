"""
projects-api/app.py
Point d'entrée principal de l'API de suivi des projets
"""

import logging
import asyncio
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from api.endpoints import projects_router, technologies_router, users_router
from api.errors import error_response, register_exception_handlers
from api.schemas import HealthResponse
from infrastructure.database.init_db import init_db
from infrastructure.rate_limit import SlidingWindowRateLimiter, client_identity
from logging_config import setup_logging, setup_colored_logging

# Initialiser la configuration
config = Config()

# Configurer le logging
if config.log_colored:
    logger = setup_colored_logging(
        log_level=config.log_level,
        log_file=config.log_file_path if config.log_file_enabled else None
    )
else:
    logger = setup_logging(
        log_level=config.log_level,
        log_file=config.log_file_path if config.log_file_enabled else None
    )

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."

# --- TÂCHE DE FOND ---

async def sweep_rate_limiter(limiter: SlidingWindowRateLimiter, interval: float):
    """Tâche de fond: oublie périodiquement les clients inactifs."""
    try:
        while True:
            await asyncio.sleep(interval)
            limiter.sweep(idle_seconds=interval)
    except asyncio.CancelledError:
        logger.info("🛑 Tâche de nettoyage du rate limiter annulée.")
        raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    # --- Startup ---
    logger.info("🚀 Démarrage de Projects API")
    logger.info(f"📊 Database: {config.database_url.split('@')[-1]}")
    init_db()

    limiter: SlidingWindowRateLimiter = app.state.rate_limiter
    sweep_task: Optional[asyncio.Task] = None
    if limiter.enabled:
        sweep_task = asyncio.create_task(
            sweep_rate_limiter(limiter, float(config.rate_limit_sweep_seconds))
        )
        logger.info(
            f"🚦 Rate limiting: {limiter.max_requests} requests per second per IP "
            f"(RATE_LIMIT_PER_SECOND={config.rate_limit_per_second} not enforced)"
        )
    else:
        logger.info("🚦 Rate limiting disabled")

    base_url = f"http://{config.host}:{config.port}"
    logger.info(f"❤️  Health check: {base_url}/health")
    logger.info(f"📁 Projects API: {base_url}/projects")
    logger.info(f"📚 Swagger UI: {base_url}/swagger-ui")
    logger.info(f"📄 OpenAPI document: {base_url}/api-docs/openapi.json")

    yield

    # --- Shutdown ---
    logger.info("🛑 Arrêt de Projects API")
    if sweep_task:
        sweep_task.cancel()
        try:
            await sweep_task
        except asyncio.CancelledError:
            pass
    logger.info("Tâches de fond arrêtées.")


def create_app(rate_limiter: Optional[SlidingWindowRateLimiter] = None) -> FastAPI:
    """Construit l'application FastAPI (routes, middlewares, gestion d'erreurs)"""
    application = FastAPI(
        title="Projects API",
        description="API de suivi des projets logiciels, de leurs technologies et de leurs contributeurs",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/swagger-ui",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json"
    )

    application.state.rate_limiter = rate_limiter or SlidingWindowRateLimiter(
        enabled=config.rate_limit_enabled,
        max_requests=config.rate_limit_max_requests,
        window_seconds=1.0
    )

    @application.middleware("http")
    async def rate_limit_middleware(request: Request, call_next):
        limiter: SlidingWindowRateLimiter = request.app.state.rate_limiter
        identity = client_identity(request)
        if not limiter.admit(identity):
            logger.warning(f"Rate limit exceeded for {identity} on {request.method} {request.url.path}")
            return error_response(status.HTTP_429_TOO_MANY_REQUESTS, RATE_LIMIT_MESSAGE)
        return await call_next(request)

    # Ajouté en dernier : les réponses 429 portent aussi les en-têtes CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["content-type", "authorization"],
    )

    register_exception_handlers(application)

    application.include_router(projects_router)
    application.include_router(technologies_router)
    application.include_router(users_router)

    @application.get("/health", response_model=HealthResponse, tags=["health"])
    def health_check():
        """Endpoint de santé pour les orchestrateurs"""
        return {"status": "OK"}

    return application


# Créer l'application FastAPI
app = create_app()

if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    log_config = get_uvicorn_log_config(log_level=config.log_level)

    uvicorn.run(
        "app:app",
        host=config.host,
        port=config.port,
        log_config=log_config
    )
