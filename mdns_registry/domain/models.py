"""Domain models using Pydantic for validation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .exceptions import ValidationError


class MdnsDiscoveryOptions(BaseModel):
    """Options consumed by the mDNS announcement layer.

    Only ``scheme`` is read while building a descriptor; everything else is
    passed through untouched, including unknown extra fields.
    """

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    scheme: str | None = Field(default=None, description="Application protocol, http if unset")
    type: str | None = Field(default=None, description="DNS-SD service type, e.g. 'http'")
    protocol: str = Field(default="tcp", pattern="^(tcp|udp)$", description="Transport label")
    subtypes: list[str] = Field(default_factory=list, description="DNS-SD subtypes")


class HeartbeatOptions(BaseModel):
    """Options for the heartbeat collaborator. Never interpreted here."""

    model_config = ConfigDict(extra="allow")

    enabled: bool = Field(default=True, description="Whether heartbeats are sent")
    ttl_in_seconds: int | None = Field(default=None, ge=1, description="Registration TTL")
    interval_in_ms: int | None = Field(default=None, ge=1, description="Heartbeat interval")


DiscoveryOptions = MdnsDiscoveryOptions | Mapping[str, Any]


class RegistrationConfig(BaseModel):
    """Mutable accumulator for registration fields.

    Assignments are not validated: filling in a configuration never fails.
    All checks happen when the configuration is turned into a descriptor.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    service_name: str | None = None
    host: str | None = None
    port: int | None = None
    domain: str | None = None
    tags: list[str] = Field(default_factory=list)
    status: str | None = None
    version: str | None = None
    instance_id: str | None = None
    metadata: dict[str, Any] | None = None
    heartbeat_options: Any = None
    discovery_options: Any = None


class RegistrationDescriptor(BaseModel):
    """Immutable record describing one service instance for discovery."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        arbitrary_types_allowed=True,
        json_schema_extra={
            "example": {
                "service_name": "orders",
                "host": "192.168.1.20",
                "port": 8080,
                "instance_id": "orders-latest-123e4567-e89b-12d3-a456-426614174000",
                "domain": "shop.local",
                "tags": ["api"],
                "scheme": "http",
                "metadata": {
                    "domain": "shop.local",
                    "version": "latest",
                    "secure": "false",
                    "serviceId": "orders-latest-123e4567-e89b-12d3-a456-426614174000",
                },
            }
        },
    )

    service_name: str = Field(..., min_length=1, description="Service name")
    host: str = Field(..., min_length=1, description="Network address")
    port: int = Field(..., ge=1, le=65535, description="TCP/UDP port")
    instance_id: str = Field(..., min_length=1, description="Instance identifier")
    domain: str | None = Field(default=None, description="DNS domain or subdomain")
    tags: tuple[str, ...] = Field(default=(), description="Ordered tags")
    scheme: str = Field(default="http", description="Application protocol")
    metadata: dict[str, str] = Field(
        default_factory=dict, validate_default=True, description="TXT annotations, read-only"
    )
    discovery_options: Any = Field(default=None, description="Opaque announcement options")
    heartbeat_options: Any = Field(default=None, description="Opaque heartbeat options")

    @field_validator("metadata", mode="after")
    @classmethod
    def freeze_metadata(cls, v: dict[str, str]) -> Mapping[str, str]:
        """Store the metadata as a read-only view over a private copy."""
        return MappingProxyType(dict(v))

    @field_serializer("metadata")
    def serialize_metadata(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    @property
    def version(self) -> str:
        return self.metadata["version"]

    @property
    def status(self) -> str | None:
        return self.metadata.get("status")

    @property
    def is_secure(self) -> bool:
        return self.scheme == "https"

    @property
    def uri(self) -> str:
        """Address the instance is reachable at, e.g. ``http://10.0.0.5:8080``."""
        return f"{self.scheme}://{self.host}:{self.port}"

    def txt_record(self) -> dict[str, str]:
        """Return a copy of the metadata for use as a DNS TXT payload."""
        return dict(self.metadata)


class BuildSuccess(BaseModel):
    """Successful build outcome carrying the descriptor."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    descriptor: RegistrationDescriptor

    def unwrap(self) -> RegistrationDescriptor:
        return self.descriptor


class BuildFailure(BaseModel):
    """Failed build outcome carrying the validation error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[False] = False
    error: ValidationError

    def unwrap(self) -> RegistrationDescriptor:
        """Raise the carried error."""
        raise self.error


BuildResult = BuildSuccess | BuildFailure
