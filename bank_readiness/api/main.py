"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bank_readiness.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bank_readiness.api.v1 import assessment, banks
from bank_readiness.infrastructure.observability.logging import setup_logging
from bank_readiness.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Bank Readiness Assessment",
        description="Risk scoring, bank routing and document guidance for UAE business bank accounts",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(assessment.router, prefix="/v1", tags=["assessments"])
    app.include_router(banks.router, prefix="/v1", tags=["banks"])

    return app


app = create_app()
