"""Infrastructure layer - Concrete implementations of ports."""

from .config import RegistryConfig
from .ip_resolver import SocketIpAddressResolver
from .simple_logger import SimpleLogger
from .uuid_generator import Uuid4Generator
from .zeroconf_adapter import instance_label, service_type_for, to_service_info

__all__ = [
    "RegistryConfig",
    "SimpleLogger",
    "SocketIpAddressResolver",
    "Uuid4Generator",
    "instance_label",
    "service_type_for",
    "to_service_info",
]
