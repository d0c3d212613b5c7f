"""Main FastAPI application"""
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tank_monitor import __version__
from tank_monitor.config.settings import CORS_ALLOW_ORIGINS, HOST, MAX_READINGS, PORT
from tank_monitor.context.lifespan import lifespan
from tank_monitor.middleware.errors import tank_monitor_error_handler
from tank_monitor.middleware.logging import log_requests
from tank_monitor.models.telemetry import Parameters
from tank_monitor.routes import api_router
from tank_monitor.services.container import ServiceContainer
from tank_monitor.services.errors import TankMonitorError


def create_app(capacity: int = MAX_READINGS, parameters: Optional[Parameters] = None) -> FastAPI:
    app = FastAPI(
        title="Water Tank Monitor",
        version=__version__,
        lifespan=lifespan
    )
    app.state.services = ServiceContainer(capacity=capacity, parameters=parameters)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging middleware
    app.middleware("http")(log_requests)

    app.add_exception_handler(TankMonitorError, tank_monitor_error_handler)

    # Include routers
    app.include_router(api_router)

    return app


app = create_app()


def main():
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
