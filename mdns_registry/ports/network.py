"""Ports for the query collaborators used while building a registration.

Both are treated as side-effect free lookups: neither may change the state
of the builder that calls it.
"""

from abc import ABC, abstractmethod


class IpAddressResolverPort(ABC):
    """Looks up the address this host is reachable at on the local network."""

    @abstractmethod
    def get_ip_address(self) -> str:
        """Return the local IP address as a string.

        Called only when a registration has no explicit host.
        """
        ...


class UniqueIdGeneratorPort(ABC):
    """Produces random unique tokens for instance ids."""

    @abstractmethod
    def new_unique_id(self) -> str:
        """Return a fresh token with negligible collision probability."""
        ...
