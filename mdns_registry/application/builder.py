"""Fluent builder for mDNS service registrations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..domain.models import (
    BuildResult,
    DiscoveryOptions,
    HeartbeatOptions,
    RegistrationConfig,
    RegistrationDescriptor,
)
from ..ports.logger import LoggerPort
from ..ports.network import IpAddressResolverPort, UniqueIdGeneratorPort
from ..ports.registration_builder import RegistrationBuilderPort
from .registration import build_registration


class MdnsRegistrationBuilder(RegistrationBuilderPort):
    """Accumulates registration fields and builds an immutable descriptor.

    A builder is meant for a single registration attempt and a single
    caller. Setters only record values; all validation and defaulting
    happens in ``build``.

    Example:
        descriptor = (
            MdnsRegistrationBuilder()
            .service_name("orders")
            .port(8080)
            .discovery_options(MdnsDiscoveryOptions(scheme="https"))
            .build()
        )
    """

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        ip_resolver: IpAddressResolverPort | None = None,
        id_generator: UniqueIdGeneratorPort | None = None,
        logger: LoggerPort | None = None,
    ):
        """Initialize the builder.

        Args:
            host: Optional initial host
            port: Optional initial port
            ip_resolver: Local address lookup, SocketIpAddressResolver if omitted
            id_generator: Token generator, Uuid4Generator if omitted
            logger: Optional logger
        """
        if ip_resolver is None:
            from ..infrastructure.ip_resolver import SocketIpAddressResolver

            ip_resolver = SocketIpAddressResolver(logger=logger)
        if id_generator is None:
            from ..infrastructure.uuid_generator import Uuid4Generator

            id_generator = Uuid4Generator()

        self._config = RegistrationConfig.model_construct(host=host, port=port)
        self._ip_resolver = ip_resolver
        self._id_generator = id_generator
        self._logger = logger

    @property
    def config(self) -> RegistrationConfig:
        """The configuration accumulated so far."""
        return self._config

    def service_name(self, name: str) -> MdnsRegistrationBuilder:
        self._config.service_name = name
        return self

    def host(self, host: str) -> MdnsRegistrationBuilder:
        self._config.host = host
        return self

    def port(self, port: int) -> MdnsRegistrationBuilder:
        self._config.port = port
        return self

    def domain(self, domain: str) -> MdnsRegistrationBuilder:
        self._config.domain = domain
        return self

    def tags(self, tags: list[str]) -> MdnsRegistrationBuilder:
        """Replace the tag list."""
        self._config.tags = list(tags) if tags is not None else []
        return self

    def status(self, status: str) -> MdnsRegistrationBuilder:
        self._config.status = status
        return self

    def version(self, version: str) -> MdnsRegistrationBuilder:
        """Set the version. An empty string falls back to ``latest``."""
        self._config.version = version
        return self

    def instance_id(self, instance_id: str) -> MdnsRegistrationBuilder:
        """Set a stable instance id seed; the version is appended at build time."""
        self._config.instance_id = instance_id
        return self

    def metadata(self, metadata: Mapping[str, Any]) -> MdnsRegistrationBuilder:
        """Replace the caller metadata. Previous calls are not merged."""
        self._config.metadata = dict(metadata) if metadata is not None else None
        return self

    def heartbeat_options(
        self, options: HeartbeatOptions | Mapping[str, Any]
    ) -> MdnsRegistrationBuilder:
        self._config.heartbeat_options = options
        return self

    def discovery_options(self, options: DiscoveryOptions) -> MdnsRegistrationBuilder:
        self._config.discovery_options = options
        return self

    def try_build(self) -> BuildResult:
        return build_registration(
            self._config,
            ip_resolver=self._ip_resolver,
            id_generator=self._id_generator,
            logger=self._logger,
        )

    def build(self) -> RegistrationDescriptor:
        """Build the descriptor.

        Returns:
            The immutable registration descriptor

        Raises:
            ValidationError: If the service name or port is missing or invalid
        """
        return self.try_build().unwrap()
