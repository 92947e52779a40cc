"""Dependency wiring for the directions client.

Maps a type (a port or a service) to the factory that builds it.
``create_client`` and ``create_comparison_client`` resolve their
services from here; tests register a fake HttpTransportPort instead
of the requests transport.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import requests

from .config import AppConfig, get_config


@dataclass
class Container:
    """Type-to-factory registry. Every binding is built once and reused.

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, key: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``key`` to ``factory``, dropping any instance already built for it."""
        with self._lock:
            self._factories[key] = factory
            self._instances.pop(key, None)

    def resolve(self, key: type[Any]) -> Any:
        """Return the instance bound to ``key``, building it on first use.

        Raises:
            KeyError: If nothing is registered for ``key``.
        """
        with self._lock:
            if key not in self._instances:
                if key not in self._factories:
                    raise KeyError(f"Type not registered: {key}")
                self._instances[key] = self._factories[key]()
            return self._instances[key]

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> Container:
        """Wire the requests transport and both services.

        Args:
            config: Configuration override (defaults to get_config()).
            session: Session for the transport (a new one when omitted).
        """
        from .adapters.http import RequestsTransport
        from .ports.transport import HttpTransportPort
        from .services import ComparisonService, DirectionsService

        container = cls(config=config or get_config())
        directions_config = container.config.directions

        container.register(
            HttpTransportPort,
            lambda: RequestsTransport(config=directions_config, session=session),
        )
        container.register(
            DirectionsService,
            lambda: DirectionsService(
                transport=container.resolve(HttpTransportPort),
                config=directions_config,
            ),
        )
        container.register(
            ComparisonService,
            lambda: ComparisonService(
                directions_service=container.resolve(DirectionsService),
            ),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, built from get_config() on first use."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container (tests call this between cases)."""
    global _default_container
    with _container_lock:
        _default_container = None
