"""
FastAPI application entry point.

Sets up the application from a resolved configuration:
- CORS from corsAllowedOrigins
- Request deadline from serverWriteTimeoutSecs
- Route registration
- Error handling

Run with:
    CAMUS_CONFIG_PATH=/etc/camus/conf.json python -m api.server
"""

import asyncio

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import set_conf
from api.routes import health_router, info_router
from core.bootstrap import bootstrap
from core.config import Conf
from core.logging import configure_logging, get_logger
from core.settings import get_settings


logger = get_logger(__name__)


def create_app(conf: Conf) -> FastAPI:
    """
    Application factory.

    Expects a config that already went through validate_and_defaults().
    """
    set_conf(conf)

    app = FastAPI(
        title="Camus",
        description="Query history archiving and indexing service.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=conf.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(info_router)

    write_timeout = conf.server_write_timeout_secs

    @app.middleware("http")
    async def enforce_write_timeout(request: Request, call_next):
        if write_timeout <= 0:
            return await call_next(request)
        try:
            return await asyncio.wait_for(call_next(request), timeout=write_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Request exceeded write timeout",
                path=request.url.path,
                method=request.method,
                timeout_secs=write_timeout,
            )
            return JSONResponse(status_code=504, content={"detail": "Request timed out"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app


def uvicorn_options(conf: Conf) -> dict:
    """
    Server options derived from the config.

    serverReadTimeoutSecs bounds how long an idle connection waits for
    the next request; 0 keeps the uvicorn default.
    """
    options = {
        "host": conf.listen_address,
        "port": conf.listen_port,
        "log_config": None,
    }
    if conf.server_read_timeout_secs > 0:
        options["timeout_keep_alive"] = conf.server_read_timeout_secs
    return options


def main() -> None:
    """Bootstrap the configuration and serve until interrupted."""
    import uvicorn

    settings = get_settings()
    conf = bootstrap(settings.config_path)
    configure_logging(conf.logging, development=settings.is_development)

    logger.info(
        "Starting Camus service",
        host=conf.listen_address,
        port=conf.listen_port,
        public_url=conf.public_url,
    )
    uvicorn.run(create_app(conf), **uvicorn_options(conf))


if __name__ == "__main__":
    main()
