"""Ports layer - Interfaces for external collaborators."""

from .logger import LoggerPort
from .network import IpAddressResolverPort, UniqueIdGeneratorPort
from .registration_builder import RegistrationBuilderPort

__all__ = [
    "IpAddressResolverPort",
    "LoggerPort",
    "RegistrationBuilderPort",
    "UniqueIdGeneratorPort",
]
