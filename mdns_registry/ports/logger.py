"""Port for the optional logging of registration builds."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Sink for registration build events.

    The builder, ``build_registration`` and the local address resolver
    accept an optional implementation and stay silent without one. Each
    event is a short fixed message plus keyword context such as
    ``service_name``, ``instance_id``, ``host``, ``port`` or ``field``.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Record a derived default: local host, instance token or fallback address."""
        ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Record a successfully built descriptor."""
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Record a build that failed validation."""
        ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Record an unexpected failure in a collaborator."""
        ...
