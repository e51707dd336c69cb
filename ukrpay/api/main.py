"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from ukrpay.api.middleware import RequestIDMiddleware, MetricsMiddleware
from ukrpay.api.v1 import encode, form_state, qr
from ukrpay.infrastructure.database.models import Base
from ukrpay.infrastructure.database.session import engine
from ukrpay.infrastructure.observability.logging import setup_logging
from ukrpay.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="UkrPay",
        description="NBU payment QR payload and link generator",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(encode.router, prefix="/v1", tags=["encoding"])
    app.include_router(qr.router, prefix="/v1", tags=["qr"])
    app.include_router(form_state.router, prefix="/v1", tags=["form-state"])

    return app


app = create_app()
