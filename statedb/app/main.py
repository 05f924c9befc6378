from contextlib import asynccontextmanager
from typing import Any, Callable

from fastapi import FastAPI
from loguru import logger

from statedb.app.composition import AppDependencies, create_app_dependencies
from statedb.app.core import SERVICE_NAME


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def create_app(
    dependencies_factory: Callable[[], AppDependencies] = create_app_dependencies,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log("app_starting")
        dependencies = dependencies_factory()
        app.state.settings = dependencies.settings
        app.state.dependencies = dependencies
        try:
            dependencies.register_startup_hooks()
            # subscribers start once the lifespan hands control back to the server
            dependencies.ready_signal.fire()
            yield
        finally:
            _log("app_stopping")
            await dependencies.ready_signal.drain()
            dependencies.close()

    return FastAPI(
        title="State Database Connection Service",
        version="0.1.0",
        lifespan=lifespan,
    )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from statedb.app.config.settings import Settings

    settings = Settings()
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
