"""Registration builder port - the fluent configuration contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..domain.models import (
    BuildResult,
    DiscoveryOptions,
    HeartbeatOptions,
    RegistrationDescriptor,
)


class RegistrationBuilderPort(ABC):
    """Abstract interface for registration builders.

    Every setter returns the builder itself for chaining and never fails.
    Validation is deferred to ``build``.
    """

    @abstractmethod
    def service_name(self, name: str) -> RegistrationBuilderPort: ...

    @abstractmethod
    def host(self, host: str) -> RegistrationBuilderPort: ...

    @abstractmethod
    def port(self, port: int) -> RegistrationBuilderPort: ...

    @abstractmethod
    def domain(self, domain: str) -> RegistrationBuilderPort: ...

    @abstractmethod
    def tags(self, tags: list[str]) -> RegistrationBuilderPort: ...

    @abstractmethod
    def status(self, status: str) -> RegistrationBuilderPort: ...

    @abstractmethod
    def version(self, version: str) -> RegistrationBuilderPort: ...

    @abstractmethod
    def instance_id(self, instance_id: str) -> RegistrationBuilderPort: ...

    @abstractmethod
    def metadata(self, metadata: Mapping[str, Any]) -> RegistrationBuilderPort: ...

    @abstractmethod
    def heartbeat_options(
        self, options: HeartbeatOptions | Mapping[str, Any]
    ) -> RegistrationBuilderPort: ...

    @abstractmethod
    def discovery_options(self, options: DiscoveryOptions) -> RegistrationBuilderPort: ...

    @abstractmethod
    def try_build(self) -> BuildResult:
        """Build the descriptor, returning the outcome instead of raising."""
        ...

    @abstractmethod
    def build(self) -> RegistrationDescriptor:
        """Build the descriptor.

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        ...
