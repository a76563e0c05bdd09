"""Domain layer - Registration models, rules and errors."""

from .exceptions import RegistryError, ValidationError
from .models import (
    BuildFailure,
    BuildResult,
    BuildSuccess,
    DiscoveryOptions,
    HeartbeatOptions,
    MdnsDiscoveryOptions,
    RegistrationConfig,
    RegistrationDescriptor,
)
from .services import DERIVED_METADATA_KEYS, RegistrationRules

__all__ = [
    "DERIVED_METADATA_KEYS",
    "BuildFailure",
    "BuildResult",
    "BuildSuccess",
    "DiscoveryOptions",
    "HeartbeatOptions",
    "MdnsDiscoveryOptions",
    "RegistrationConfig",
    "RegistrationDescriptor",
    "RegistrationRules",
    "RegistryError",
    "ValidationError",
]
