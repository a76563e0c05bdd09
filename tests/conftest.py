"""Pytest configuration and shared fixtures."""

import itertools
from unittest.mock import Mock

import pytest

from mdns_registry.application.builder import MdnsRegistrationBuilder
from mdns_registry.ports.logger import LoggerPort
from mdns_registry.ports.network import IpAddressResolverPort, UniqueIdGeneratorPort

LOCAL_IP = "10.0.0.5"


class SequentialIdGenerator(UniqueIdGeneratorPort):
    """Deterministic token generator yielding token-1, token-2, ..."""

    def __init__(self):
        self._counter = itertools.count(1)
        self.calls = 0

    def new_unique_id(self) -> str:
        self.calls += 1
        return f"token-{next(self._counter)}"


@pytest.fixture
def ip_resolver():
    """Create a mock local address resolver."""
    mock = Mock(spec=IpAddressResolverPort)
    mock.get_ip_address.return_value = LOCAL_IP
    return mock


@pytest.fixture
def id_generator():
    """Create a deterministic token generator."""
    return SequentialIdGenerator()


@pytest.fixture
def mock_logger():
    """Create a mock logger."""
    return Mock(spec=LoggerPort)


@pytest.fixture
def builder(ip_resolver, id_generator, mock_logger):
    """Create a builder wired with test collaborators."""
    return MdnsRegistrationBuilder(
        ip_resolver=ip_resolver, id_generator=id_generator, logger=mock_logger
    )
