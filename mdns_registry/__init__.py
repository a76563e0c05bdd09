"""mdns-registry - Validated service registration descriptors for mDNS discovery."""

from .application.builder import MdnsRegistrationBuilder
from .application.registration import build_registration
from .domain.exceptions import RegistryError, ValidationError
from .domain.models import (
    BuildFailure,
    BuildResult,
    BuildSuccess,
    HeartbeatOptions,
    MdnsDiscoveryOptions,
    RegistrationConfig,
    RegistrationDescriptor,
)

__all__ = [
    "BuildFailure",
    "BuildResult",
    "BuildSuccess",
    "HeartbeatOptions",
    "MdnsDiscoveryOptions",
    "MdnsRegistrationBuilder",
    "RegistrationConfig",
    "RegistrationDescriptor",
    "RegistryError",
    "ValidationError",
    "build_registration",
]
__version__ = "0.1.0"
