"""Configuration for the registration infrastructure."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from ..application.builder import MdnsRegistrationBuilder
    from ..ports.logger import LoggerPort
    from .ip_resolver import SocketIpAddressResolver
    from .simple_logger import SimpleLogger

ENV_PREFIX = "MDNS_REGISTRY_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RegistryConfig(BaseModel):
    """Strongly-typed settings for building registrations.

    Covers the local address lookup and logging. Can be created directly
    or loaded from ``MDNS_REGISTRY_*`` environment variables.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    route_host: str = Field(
        default="8.8.8.8",
        min_length=1,
        description="Address used to select the outbound interface",
    )
    route_port: int = Field(
        default=80,
        ge=1,
        le=65535,
        description="Port paired with the route address",
    )
    fallback_address: str = Field(
        default="127.0.0.1",
        min_length=1,
        description="Address used when the local lookup fails",
    )
    logger_name: str = Field(
        default="mdns_registry",
        min_length=1,
        description="Name of the logger",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> RegistryConfig:
        """Load settings from the environment, keeping defaults for unset variables."""
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls.model_validate(values)

    @property
    def level(self) -> int:
        """Numeric logging level for ``log_level``, e.g. 20 for INFO."""
        return logging.getLevelName(self.log_level)

    def create_logger(self) -> SimpleLogger:
        from .simple_logger import SimpleLogger

        return SimpleLogger(name=self.logger_name, level=self.level)

    def create_ip_resolver(self, logger: LoggerPort | None = None) -> SocketIpAddressResolver:
        """Create the local address resolver, logging fallbacks to ``logger``."""
        from .ip_resolver import SocketIpAddressResolver

        return SocketIpAddressResolver(
            route_host=self.route_host,
            route_port=self.route_port,
            fallback=self.fallback_address,
            logger=logger,
        )

    def create_builder(self) -> MdnsRegistrationBuilder:
        """Create a builder wired with the configured collaborators."""
        from ..application.builder import MdnsRegistrationBuilder

        logger = self.create_logger()
        return MdnsRegistrationBuilder(
            ip_resolver=self.create_ip_resolver(logger=logger),
            logger=logger,
        )
