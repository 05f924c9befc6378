"""
Composition root: single place where concrete implementations are wired.

Builds settings, the connection source, the startup probe and the ready signal;
provides close(). Used by lifespan to populate app.state. Explicit wiring only.
"""
from __future__ import annotations

from loguru import logger

from statedb.app.application.startup_probe import StartupConnectivityProbe
from statedb.app.config.settings import Settings
from statedb.app.core.lifecycle import ApplicationReadySignal
from statedb.app.infrastructure.persistence.factory import create_connection_source
from statedb.app.ports.connection_source import ConnectionSource


class AppDependencies:
    """Holds wired dependencies and their lifecycle. Built only in composition root."""

    def __init__(
        self,
        *,
        settings: Settings,
        connection_source: ConnectionSource,
        startup_probe: StartupConnectivityProbe,
        ready_signal: ApplicationReadySignal,
    ) -> None:
        self._settings = settings
        self._connection_source = connection_source
        self._startup_probe = startup_probe
        self._ready_signal = ready_signal

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def connection_source(self) -> ConnectionSource:
        return self._connection_source

    @property
    def startup_probe(self) -> StartupConnectivityProbe:
        return self._startup_probe

    @property
    def ready_signal(self) -> ApplicationReadySignal:
        return self._ready_signal

    def register_startup_hooks(self) -> None:
        if self._settings.startup_probe_enabled:
            self._ready_signal.subscribe(self._startup_probe.run)

    def close(self) -> None:
        try:
            self._connection_source.dispose()
        except Exception as exc:
            logger.warning("connection source dispose failed: {}", exc)


def create_app_dependencies(settings: Settings | None = None) -> AppDependencies:
    """
    Composition root: build all app dependencies in one place.
    Caller owns lifecycle (register hooks, fire the ready signal, close).
    """
    _settings = settings or Settings()
    connection_source = create_connection_source(_settings)

    return AppDependencies(
        settings=_settings,
        connection_source=connection_source,
        startup_probe=StartupConnectivityProbe(connection_source),
        ready_signal=ApplicationReadySignal(),
    )
