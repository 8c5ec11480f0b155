"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dewpoint_advisor.config import CORS_ORIGINS


def create_app() -> FastAPI:
    app = FastAPI(
        title="Dew Point Advisor API",
        version="0.1.0",
        description="Indoor/outdoor dew point comparison with live station data",
    )

    # CORS for frontend dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from dewpoint_advisor.api.routers import beach, dewpoint, humidity, weather

    app.include_router(beach.router, prefix="/beach", tags=["stations"])
    app.include_router(humidity.router, prefix="/humidity", tags=["stations"])
    app.include_router(weather.router, prefix="/weather", tags=["weather"])
    app.include_router(dewpoint.router, prefix="/dewpoint", tags=["dewpoint"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
