"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decision_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decision_engine.api.v1 import decision
from decision_engine.infrastructure.observability.logging import setup_logging
from decision_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Decision Engine",
        description="Loan eligibility and maximum amount decisions by personal code",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Added last, RequestIDMiddleware is the outermost layer
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    return app


app = create_app()
